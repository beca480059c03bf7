"""Exceptions raised while parsing and describing segments.

All of these signal malformed input from upstream (the annotation or the
code that built the Segment). They are never retried or replaced with
fallback text.
"""

from typing import Any


class DescriptionError(ValueError):
    """Base class for failures while generating a segment description."""


class UnsupportedSegmentKind(DescriptionError):
    """The segment's kind has no description branch."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unsupported segment kind: {kind!r}")
        self.kind = kind


class InvalidFeature(DescriptionError):
    """An enum-backed feature holds a value outside its enumeration."""

    def __init__(self, feature: str, value: Any) -> None:
        super().__init__(f"Invalid {feature}: {value!r}")
        self.feature = feature
        self.value = value


class InvalidPerson(InvalidFeature):
    def __init__(self, value: Any) -> None:
        super().__init__("person", value)


class InvalidGender(InvalidFeature):
    def __init__(self, value: Any) -> None:
        super().__init__("gender", value)


class FeatureParseError(ValueError):
    """An annotation string cannot be parsed into a segment."""
