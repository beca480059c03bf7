"""Morphological descriptions of Quranic Arabic corpus segments."""

from quranic_morphology.descriptor import Descriptor, generate_description
from quranic_morphology.features import parse_segment, parse_word
from quranic_morphology.segment import Segment

__all__ = [
    "Descriptor",
    "Segment",
    "generate_description",
    "parse_segment",
    "parse_word",
]
