"""The Segment record: one morphological unit of an analyzed word."""

from dataclasses import dataclass

from quranic_morphology.enums import (
    Derivation,
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

# Name used when a segment carries no part-of-speech tag
KIND_NAMES = {
    SegmentKind.PREFIX: "prefix",
    SegmentKind.STEM: "stem",
    SegmentKind.SUFFIX: "suffix",
}


@dataclass(frozen=True)
class Segment:
    """Parsed morphological features of a single segment.

    Every optional feature is None when it does not apply to the segment.
    Suffixes produced by ``features.parse_word`` also carry the word's stem
    as ``host`` and their position among the word's pronoun suffixes as
    ``slot``; both are needed to tell subject pronouns from object pronouns.
    """

    kind: SegmentKind
    part_of_speech: PartOfSpeech | None = None
    lemma: str | None = None
    root: str | None = None
    form: str | None = None
    case: GrammaticalCase | None = None
    person: Person | None = None
    gender: Gender | None = None
    number: GrammaticalNumber | None = None
    noun_state: NounState | None = None
    verb_form: VerbForm | None = None
    voice: VerbVoice | None = None
    aspect: VerbAspect | None = None
    derivation: Derivation | None = None
    host: "Segment | None" = None
    slot: int = 0

    @property
    def name(self) -> str:
        """Return the base label the description is built around.

        Examples:
            'object pronoun' for a pronoun suffix on a verb,
            'active participle' for a participle stem,
            'preposition' for a P-tagged prefix.
        """
        pronoun_type = self.pronoun_type
        if pronoun_type is not None:
            return f"{pronoun_type} pronoun"
        if self.derivation is not None:
            return self.derivation.label
        if self.part_of_speech is not None:
            return self.part_of_speech.label
        return KIND_NAMES.get(self.kind, str(self.kind).lower())

    @property
    def pronoun_type(self) -> PronounType | None:
        """Classify a pronoun suffix as subject, object, possessive or personal.

        Returns None for anything that is not a pronoun suffix.
        """
        if self.kind != SegmentKind.SUFFIX or self.part_of_speech != PartOfSpeech.PRONOUN:
            return None

        host = self.host
        if host is None or host.part_of_speech is None:
            return PronounType.PERSONAL

        if host.derivation is not None or host.part_of_speech.is_nominal:
            return PronounType.POSSESSIVE

        if host.part_of_speech == PartOfSpeech.VERB:
            if self.slot == 0 and self._agrees_with(host) and _has_subject_suffix(host):
                return PronounType.SUBJECT
            return PronounType.OBJECT

        return PronounType.PERSONAL

    def _agrees_with(self, other: "Segment") -> bool:
        """Check person/number agreement, and gender where both sides mark it."""
        if self.person != other.person or self.number != other.number:
            return False
        if self.gender is not None and other.gender is not None:
            return self.gender == other.gender
        return True


def _has_subject_suffix(verb: Segment) -> bool:
    """Check whether a verb's conjugation ends in a subject pronoun suffix.

    Perfect verbs mark every person except the 3rd singular with a suffix.
    Imperfect verbs use prefixes, plus a suffix for duals, plurals and the
    2nd person feminine singular. Imperatives take a suffix except in the
    masculine singular.
    """
    if verb.aspect == VerbAspect.PERFECT:
        return not (verb.person == Person.THIRD and verb.number == GrammaticalNumber.SINGULAR)
    if verb.aspect == VerbAspect.IMPERFECT:
        return verb.number != GrammaticalNumber.SINGULAR or (
            verb.person == Person.SECOND and verb.gender == Gender.FEMININE
        )
    if verb.aspect == VerbAspect.IMPERATIVE:
        return not (verb.gender == Gender.MASCULINE and verb.number == GrammaticalNumber.SINGULAR)
    return False
