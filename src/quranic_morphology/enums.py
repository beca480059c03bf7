"""Enumeration types for Quranic morphological features.

Member values are the tags used in the corpus annotation strings, so a
stored tag and its enum member are interchangeable (e.g. ``GrammaticalCase("GEN")``).
"""

from enum import IntEnum, StrEnum


class SegmentKind(StrEnum):
    """Position of a segment within its word."""

    PREFIX = "PREFIX"
    STEM = "STEM"
    SUFFIX = "SUFF"


class PartOfSpeech(StrEnum):
    """Part-of-speech tags of the Quranic Arabic Corpus."""

    # Nominals
    NOUN = "N"
    PROPER_NOUN = "PN"
    ADJECTIVE = "ADJ"
    IMPERATIVE_VERBAL_NOUN = "IMPN"
    PRONOUN = "PRON"
    DEMONSTRATIVE = "DEM"
    RELATIVE = "REL"
    TIME_ADVERB = "T"
    LOCATION_ADVERB = "LOC"
    NUMBER = "NUM"
    # Verbs
    VERB = "V"
    # Particles
    PREPOSITION = "P"
    CONJUNCTION = "CONJ"
    SUBORDINATING_CONJUNCTION = "SUB"
    DETERMINER = "DET"
    EMPHATIC = "EMPH"
    IMPERATIVE = "IMPV"
    PURPOSE = "PRP"
    ACCUSATIVE = "ACC"
    AMENDMENT = "AMD"
    ANSWER = "ANS"
    AVERSION = "AVR"
    CAUSE = "CAUS"
    CERTAINTY = "CERT"
    CIRCUMSTANTIAL = "CIRC"
    COMITATIVE = "COM"
    CONDITIONAL = "COND"
    EQUALIZATION = "EQ"
    EXHORTATION = "EXH"
    EXPLANATION = "EXL"
    EXCEPTIVE = "EXP"
    FUTURE = "FUT"
    INCEPTIVE = "INC"
    INTERPRETATION = "INT"
    INTERROGATIVE = "INTG"
    NEGATIVE = "NEG"
    PREVENTIVE = "PREV"
    PROHIBITION = "PRO"
    RESUMPTION = "REM"
    RESTRICTION = "RES"
    RETRACTION = "RET"
    RESULT = "RSLT"
    SUPPLEMENTAL = "SUP"
    SURPRISE = "SUR"
    VOCATIVE = "VOC"
    INITIALS = "INL"

    @property
    def label(self) -> str:
        """Return the English base name used in descriptions (e.g., 'proper noun')."""
        return _POS_LABELS[self]

    @property
    def is_nominal(self) -> bool:
        """Return True for tags that take possessive pronoun suffixes."""
        return self in _NOMINALS


_POS_LABELS = {
    PartOfSpeech.NOUN: "noun",
    PartOfSpeech.PROPER_NOUN: "proper noun",
    PartOfSpeech.ADJECTIVE: "adjective",
    PartOfSpeech.IMPERATIVE_VERBAL_NOUN: "imperative verbal noun",
    PartOfSpeech.PRONOUN: "personal pronoun",
    PartOfSpeech.DEMONSTRATIVE: "demonstrative pronoun",
    PartOfSpeech.RELATIVE: "relative pronoun",
    PartOfSpeech.TIME_ADVERB: "time adverb",
    PartOfSpeech.LOCATION_ADVERB: "location adverb",
    PartOfSpeech.NUMBER: "number",
    PartOfSpeech.VERB: "verb",
    PartOfSpeech.PREPOSITION: "preposition",
    PartOfSpeech.CONJUNCTION: "conjunction",
    PartOfSpeech.SUBORDINATING_CONJUNCTION: "subordinating conjunction",
    PartOfSpeech.DETERMINER: "determiner",
    PartOfSpeech.EMPHATIC: "emphatic particle",
    PartOfSpeech.IMPERATIVE: "imperative particle",
    PartOfSpeech.PURPOSE: "particle of purpose",
    PartOfSpeech.ACCUSATIVE: "accusative particle",
    PartOfSpeech.AMENDMENT: "amendment particle",
    PartOfSpeech.ANSWER: "answer particle",
    PartOfSpeech.AVERSION: "aversion particle",
    PartOfSpeech.CAUSE: "particle of cause",
    PartOfSpeech.CERTAINTY: "particle of certainty",
    PartOfSpeech.CIRCUMSTANTIAL: "circumstantial particle",
    PartOfSpeech.COMITATIVE: "comitative particle",
    PartOfSpeech.CONDITIONAL: "conditional particle",
    PartOfSpeech.EQUALIZATION: "equalization particle",
    PartOfSpeech.EXHORTATION: "exhortation particle",
    PartOfSpeech.EXPLANATION: "explanation particle",
    PartOfSpeech.EXCEPTIVE: "exceptive particle",
    PartOfSpeech.FUTURE: "future particle",
    PartOfSpeech.INCEPTIVE: "inceptive particle",
    PartOfSpeech.INTERPRETATION: "particle of interpretation",
    PartOfSpeech.INTERROGATIVE: "interrogative particle",
    PartOfSpeech.NEGATIVE: "negative particle",
    PartOfSpeech.PREVENTIVE: "preventive particle",
    PartOfSpeech.PROHIBITION: "prohibition particle",
    PartOfSpeech.RESUMPTION: "resumption particle",
    PartOfSpeech.RESTRICTION: "restriction particle",
    PartOfSpeech.RETRACTION: "retraction particle",
    PartOfSpeech.RESULT: "result particle",
    PartOfSpeech.SUPPLEMENTAL: "supplemental particle",
    PartOfSpeech.SURPRISE: "surprise particle",
    PartOfSpeech.VOCATIVE: "vocative particle",
    PartOfSpeech.INITIALS: "quranic initials",
}

_NOMINALS = frozenset(
    {
        PartOfSpeech.NOUN,
        PartOfSpeech.PROPER_NOUN,
        PartOfSpeech.ADJECTIVE,
        PartOfSpeech.IMPERATIVE_VERBAL_NOUN,
        PartOfSpeech.TIME_ADVERB,
        PartOfSpeech.LOCATION_ADVERB,
        PartOfSpeech.NUMBER,
    }
)


class GrammaticalCase(StrEnum):
    """Case of a nominal stem."""

    NOMINATIVE = "NOM"
    ACCUSATIVE = "ACC"
    GENITIVE = "GEN"


class Person(StrEnum):
    """Grammatical person."""

    FIRST = "1"
    SECOND = "2"
    THIRD = "3"


class Gender(StrEnum):
    """Grammatical gender."""

    MASCULINE = "M"
    FEMININE = "F"


class GrammaticalNumber(StrEnum):
    """Grammatical number. Arabic has a dual."""

    SINGULAR = "S"
    DUAL = "D"
    PLURAL = "P"


class NounState(StrEnum):
    """Definiteness marking on a nominal stem."""

    DEFINITE = "DEF"
    INDEFINITE = "INDEF"


class VerbForm(IntEnum):
    """Derived verb forms I-XII.

    Form I is the unmarked base pattern; the corpus only annotates II-XII,
    written as parenthesised Roman numerals (e.g. ``(IV)``).
    """

    FORM_I = 1
    FORM_II = 2
    FORM_III = 3
    FORM_IV = 4
    FORM_V = 5
    FORM_VI = 6
    FORM_VII = 7
    FORM_VIII = 8
    FORM_IX = 9
    FORM_X = 10
    FORM_XI = 11
    FORM_XII = 12

    @classmethod
    def from_tag(cls, tag: str) -> "VerbForm":
        """Parse a tag like '(IV)' into a VerbForm.

        Raises:
            ValueError: If the tag is not a parenthesised Roman numeral I-XII.
        """
        numeral = tag.strip("()")
        try:
            return cls[f"FORM_{numeral}"]
        except KeyError:
            raise ValueError(f"Unknown verb form tag: {tag!r}") from None


class VerbVoice(StrEnum):
    """Voice of a verb stem. Only the passive is marked in annotations."""

    ACTIVE = "ACT"
    PASSIVE = "PASS"


class VerbAspect(StrEnum):
    """Aspect of a verb stem."""

    PERFECT = "PERF"
    IMPERFECT = "IMPF"
    IMPERATIVE = "IMPV"


class Derivation(StrEnum):
    """Derived nominal patterns: participles and verbal nouns."""

    ACTIVE_PARTICIPLE = "ACT PCPL"
    PASSIVE_PARTICIPLE = "PASS PCPL"
    VERBAL_NOUN = "VN"

    @property
    def label(self) -> str:
        """Return the English name of the derivation (e.g., 'active participle')."""
        return {
            Derivation.ACTIVE_PARTICIPLE: "active participle",
            Derivation.PASSIVE_PARTICIPLE: "passive participle",
            Derivation.VERBAL_NOUN: "verbal noun",
        }[self]


class PronounType(StrEnum):
    """Role of a pronoun suffix relative to the stem it attaches to."""

    SUBJECT = "subject"
    OBJECT = "object"
    POSSESSIVE = "possessive"
    PERSONAL = "personal"
