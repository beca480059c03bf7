"""Data importers for the Quranic morphology database."""

from quranic_morphology.importers.corpus import import_corpus

__all__ = [
    "import_corpus",
]
