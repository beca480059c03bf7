"""Generate English morphological descriptions of Quranic segments.

Each segment kind has its own describer. Stem and suffix descriptions are
built from a fixed sequence of fragment producers: each producer looks at a
single feature and returns a fragment, or None when the feature is absent.
Present fragments are joined with spaces and the segment name goes last.

Example:
    >>> generate_description(Segment(
    ...     kind=SegmentKind.STEM,
    ...     part_of_speech=PartOfSpeech.NOUN,
    ...     case=GrammaticalCase.GENITIVE,
    ...     gender=Gender.MASCULINE,
    ... ))
    'genitive masculine noun'
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from quranic_morphology.enums import (
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    NounState,
    PartOfSpeech,
    Person,
    PronounType,
    SegmentKind,
    VerbAspect,
    VerbForm,
    VerbVoice,
)
from quranic_morphology.errors import (
    InvalidFeature,
    InvalidGender,
    InvalidPerson,
    UnsupportedSegmentKind,
)
from quranic_morphology.segment import Segment

Fragment = Callable[[Segment], str | None]

E = TypeVar("E", bound=Enum)

# Transliterated glosses for prefix lemmas, matched exactly.
# Lemmas missing from these tables get no gloss.
PREPOSITION_GLOSSES = {
    "l": "{lAm}",
    "b": "{bi}",
}

CONJUNCTION_GLOSSES = {
    "w": "{wa} (and)",
}

PERSON_LABELS = {
    Person.FIRST: "1st person",
    Person.SECOND: "2nd person",
    Person.THIRD: "3rd person",
}

GENDER_LABELS = {
    Gender.MASCULINE: "masculine",
    Gender.FEMININE: "feminine",
}


def _coerce(value: Any, enum_cls: type[E], error: Callable[[Any], Exception]) -> E:
    """Convert a stored feature value to its enum member or raise ``error(value)``."""
    try:
        return enum_cls(value)
    except ValueError:
        raise error(value) from None


def _lowered(value: Any, enum_cls: type[Enum], feature: str) -> str | None:
    """Return the lower-cased member name of an optional feature."""
    if value is None:
        return None
    member = _coerce(value, enum_cls, lambda v: InvalidFeature(feature, v))
    return member.name.lower()


def case_fragment(segment: Segment) -> str | None:
    return _lowered(segment.case, GrammaticalCase, "case")


def person_fragment(segment: Segment) -> str | None:
    if segment.person is None:
        return None
    return PERSON_LABELS[_coerce(segment.person, Person, InvalidPerson)]


def gender_fragment(segment: Segment) -> str | None:
    if segment.gender is None:
        return None
    return GENDER_LABELS[_coerce(segment.gender, Gender, InvalidGender)]


def number_fragment(segment: Segment) -> str | None:
    return _lowered(segment.number, GrammaticalNumber, "number")


def noun_state_fragment(segment: Segment) -> str | None:
    return _lowered(segment.noun_state, NounState, "noun state")


def verb_form_fragment(segment: Segment) -> str | None:
    if segment.verb_form is None:
        return None
    form = _coerce(segment.verb_form, VerbForm, lambda v: InvalidFeature("verb form", v))
    return f"(form {form.value})"


def voice_fragment(segment: Segment) -> str | None:
    return _lowered(segment.voice, VerbVoice, "voice")


def aspect_fragment(segment: Segment) -> str | None:
    return _lowered(segment.aspect, VerbAspect, "aspect")


# Person, gender and number, in that order
PHI_FRAGMENTS: tuple[Fragment, ...] = (
    person_fragment,
    gender_fragment,
    number_fragment,
)

STEM_FRAGMENTS: tuple[Fragment, ...] = (
    case_fragment,
    *PHI_FRAGMENTS,
    noun_state_fragment,
    verb_form_fragment,
    voice_fragment,
    aspect_fragment,
)


def _compose(segment: Segment, fragments: tuple[Fragment, ...]) -> str:
    """Join the present fragments, followed by the segment name."""
    words = [text for fragment in fragments if (text := fragment(segment)) is not None]
    words.append(segment.name)
    return " ".join(words)


def describe_prefix(segment: Segment) -> str:
    """Describe a prefix, adding a gloss for well-known prepositions and conjunctions."""
    description = f"prefixed {segment.name}"

    if segment.part_of_speech == PartOfSpeech.PREPOSITION:
        gloss = PREPOSITION_GLOSSES.get(segment.lemma or "")
    elif segment.part_of_speech == PartOfSpeech.CONJUNCTION:
        gloss = CONJUNCTION_GLOSSES.get(segment.lemma or "")
    else:
        gloss = None

    if gloss is not None:
        description += f" {gloss}"
    return description


def describe_stem(segment: Segment) -> str:
    """Describe a stem: case, phi-features, state, form, voice and aspect, then the name."""
    return _compose(segment, STEM_FRAGMENTS)


def describe_suffix(segment: Segment) -> str:
    """Describe a suffix.

    Subject pronouns repeat the phi-features of the verb they attach to,
    so those are left out for them.
    """
    if segment.pronoun_type == PronounType.SUBJECT:
        return _compose(segment, ())
    return _compose(segment, PHI_FRAGMENTS)


DESCRIBERS: dict[SegmentKind, Callable[[Segment], str]] = {
    SegmentKind.PREFIX: describe_prefix,
    SegmentKind.STEM: describe_stem,
    SegmentKind.SUFFIX: describe_suffix,
}


def generate_description(segment: Segment) -> str:
    """Generate the morphological description of a segment.

    Raises:
        UnsupportedSegmentKind: If the segment kind has no describer.
        InvalidFeature: If a feature holds a value outside its enumeration.
    """
    try:
        describer = DESCRIBERS[segment.kind]
    except (KeyError, TypeError):
        raise UnsupportedSegmentKind(segment.kind) from None
    return describer(segment)


class Descriptor:
    """Object wrapper around ``generate_description`` for callers that hold a describer."""

    def generate_segment_description(self, segment: Segment) -> str:
        return generate_description(segment)
