"""Tests for annotation string parsing."""

import pytest

from quranic_morphology.descriptor import generate_description
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
from quranic_morphology.errors import FeatureParseError
from quranic_morphology.features import (
    link_word,
    parse_phi_features,
    parse_segment,
    parse_word,
)


class TestParsePhiFeatures:
    """Tests for compact person/gender/number tokens."""

    def test_full_token(self) -> None:
        assert parse_phi_features("3MS") == {
            "person": Person.THIRD,
            "gender": Gender.MASCULINE,
            "number": GrammaticalNumber.SINGULAR,
        }

    def test_gender_only(self) -> None:
        assert parse_phi_features("F") == {
            "person": None,
            "gender": Gender.FEMININE,
            "number": None,
        }

    def test_person_and_number(self) -> None:
        assert parse_phi_features("1P") == {
            "person": Person.FIRST,
            "gender": None,
            "number": GrammaticalNumber.PLURAL,
        }

    def test_dual(self) -> None:
        result = parse_phi_features("MD")
        assert result is not None
        assert result["number"] == GrammaticalNumber.DUAL

    def test_rejects_other_tokens(self) -> None:
        assert parse_phi_features("GEN") is None
        assert parse_phi_features("PERF") is None
        assert parse_phi_features("4MS") is None
        assert parse_phi_features("") is None


class TestParsePrefix:
    """Tests for prefix annotations."""

    def test_bare_preposition(self) -> None:
        segment = parse_segment("PREFIX|bi+")
        assert segment.kind == SegmentKind.PREFIX
        assert segment.part_of_speech == PartOfSpeech.PREPOSITION
        assert segment.lemma == "bi"
        assert generate_description(segment) == "prefixed preposition"

    def test_tagged_conjunction(self) -> None:
        segment = parse_segment("PREFIX|w:CONJ+")
        assert segment.part_of_speech == PartOfSpeech.CONJUNCTION
        assert segment.lemma == "w"
        assert generate_description(segment) == "prefixed conjunction {wa} (and)"

    def test_tagged_preposition(self) -> None:
        segment = parse_segment("PREFIX|l:P+")
        assert generate_description(segment) == "prefixed preposition {lAm}"

    def test_determiner(self) -> None:
        segment = parse_segment("PREFIX|Al+")
        assert segment.part_of_speech == PartOfSpeech.DETERMINER
        assert generate_description(segment) == "prefixed determiner"

    def test_interrogative(self) -> None:
        segment = parse_segment("PREFIX|A:INTG+")
        assert segment.part_of_speech == PartOfSpeech.INTERROGATIVE
        assert generate_description(segment) == "prefixed interrogative particle"

    def test_unknown_bare_prefix(self) -> None:
        segment = parse_segment("PREFIX|zz+")
        assert segment.part_of_speech is None
        assert segment.lemma == "zz"

    def test_form_is_kept(self) -> None:
        segment = parse_segment("PREFIX|bi+", form="bi")
        assert segment.form == "bi"


class TestParseStem:
    """Tests for stem annotations."""

    def test_noun(self) -> None:
        segment = parse_segment("STEM|POS:N|LEM:{som|ROOT:smw|M|GEN")
        assert segment.kind == SegmentKind.STEM
        assert segment.part_of_speech == PartOfSpeech.NOUN
        assert segment.lemma == "{som"
        assert segment.root == "smw"
        assert segment.gender == Gender.MASCULINE
        assert segment.case == GrammaticalCase.GENITIVE
        assert segment.person is None
        assert generate_description(segment) == "genitive masculine noun"

    def test_passive_derived_verb(self) -> None:
        segment = parse_segment("STEM|POS:V|IMPF|(IV)|LEM:>anzala|ROOT:nzl|3MS|PASS|MOOD:IND")
        assert segment.aspect == VerbAspect.IMPERFECT
        assert segment.verb_form == VerbForm.FORM_IV
        assert segment.voice == VerbVoice.PASSIVE
        assert segment.person == Person.THIRD
        assert generate_description(segment) == (
            "3rd person masculine singular (form 4) passive imperfect verb"
        )

    def test_active_participle(self) -> None:
        segment = parse_segment("STEM|POS:N|ACT|PCPL|(VIII)|LEM:m~utaqiyn|ROOT:wqy|MP|NOM")
        assert segment.derivation == Derivation.ACTIVE_PARTICIPLE
        assert segment.voice is None
        assert generate_description(segment) == (
            "nominative masculine plural (form 8) active participle"
        )

    def test_passive_participle(self) -> None:
        segment = parse_segment("STEM|POS:N|PASS|PCPL|LEM:magoDuwb|ROOT:gDb|MS|GEN")
        assert segment.derivation == Derivation.PASSIVE_PARTICIPLE
        assert segment.voice is None
        assert generate_description(segment) == "genitive masculine singular passive participle"

    def test_verbal_noun(self) -> None:
        segment = parse_segment("STEM|POS:N|VN|LEM:Hamod|ROOT:Hmd|M|NOM")
        assert segment.derivation == Derivation.VERBAL_NOUN
        assert generate_description(segment) == "nominative masculine verbal noun"

    def test_indefinite_adjective(self) -> None:
        segment = parse_segment("STEM|POS:ADJ|LEM:r~aHiym|ROOT:rHm|MS|INDEF|GEN")
        assert segment.noun_state == NounState.INDEFINITE
        assert generate_description(segment) == "genitive masculine singular indefinite adjective"

    def test_skips_unknown_tokens(self) -> None:
        segment = parse_segment("STEM|POS:V|PERF|SP:kaAn|LEM:kaAna|ROOT:kwn|3MS|XYZ")
        assert segment.part_of_speech == PartOfSpeech.VERB
        assert segment.aspect == VerbAspect.PERFECT
        assert generate_description(segment) == "3rd person masculine singular perfect verb"

    def test_stem_without_part_of_speech(self) -> None:
        segment = parse_segment("STEM|LEM:x")
        assert segment.part_of_speech is None
        assert generate_description(segment) == "stem"


class TestParseSuffix:
    """Tests for suffix annotations."""

    def test_pronoun(self) -> None:
        segment = parse_segment("SUFF|PRON:3MP")
        assert segment.kind == SegmentKind.SUFFIX
        assert segment.part_of_speech == PartOfSpeech.PRONOUN
        assert segment.person == Person.THIRD
        assert segment.gender == Gender.MASCULINE
        assert segment.number == GrammaticalNumber.PLURAL

    def test_particle(self) -> None:
        segment = parse_segment("SUFF|+n:EMPH")
        assert segment.part_of_speech == PartOfSpeech.EMPHATIC
        assert segment.lemma == "n"
        assert generate_description(segment) == "emphatic particle"

    def test_bare_tag(self) -> None:
        segment = parse_segment("SUFF|+VOC")
        assert segment.part_of_speech == PartOfSpeech.VOCATIVE


class TestParseErrors:
    """Tests for annotations that cannot be parsed."""

    def test_empty_annotation(self) -> None:
        with pytest.raises(FeatureParseError):
            parse_segment("")

    def test_unknown_marker(self) -> None:
        with pytest.raises(FeatureParseError):
            parse_segment("WORD|POS:N")

    def test_unknown_part_of_speech(self) -> None:
        with pytest.raises(FeatureParseError):
            parse_segment("STEM|POS:XYZ|M")

    def test_invalid_pronoun_features(self) -> None:
        with pytest.raises(FeatureParseError):
            parse_segment("SUFF|PRON:XY")

    def test_empty_prefix(self) -> None:
        with pytest.raises(FeatureParseError):
            parse_segment("PREFIX")


class TestParseWord:
    """Tests for linking the segments of a word."""

    def test_subject_pronoun_on_perfect_verb(self) -> None:
        """Test qaAluw+A: 'they said'."""
        verb, suffix = parse_word(["STEM|POS:V|PERF|LEM:qaAla|ROOT:qwl|3MP", "SUFF|PRON:3MP"])
        assert suffix.host == verb
        assert suffix.pronoun_type == PronounType.SUBJECT
        assert generate_description(verb) == "3rd person masculine plural perfect verb"
        assert generate_description(suffix) == "subject pronoun"

    def test_object_pronoun_on_imperfect_verb(self) -> None:
        """Test naEobudu+ka: 'we worship you'."""
        _, suffix = parse_word(["STEM|POS:V|IMPF|LEM:Eabada|ROOT:Ebd|1P|MOOD:IND", "SUFF|PRON:2MS"])
        assert suffix.pronoun_type == PronounType.OBJECT
        assert generate_description(suffix) == "2nd person masculine singular object pronoun"

    def test_third_singular_perfect_has_no_subject_suffix(self) -> None:
        _, suffix = parse_word(["STEM|POS:V|PERF|LEM:qaAla|ROOT:qwl|3MS", "SUFF|PRON:3MS"])
        assert suffix.pronoun_type == PronounType.OBJECT
        assert generate_description(suffix) == "3rd person masculine singular object pronoun"

    def test_subject_then_object(self) -> None:
        _, subject, obj = parse_word(
            ["STEM|POS:V|PERF|(IV)|LEM:>anoEama|ROOT:nEm|1S", "SUFF|PRON:1S", "SUFF|PRON:3MS"]
        )
        assert subject.slot == 0
        assert obj.slot == 1
        assert subject.pronoun_type == PronounType.SUBJECT
        assert obj.pronoun_type == PronounType.OBJECT

    def test_possessive_pronoun_on_noun(self) -> None:
        _, suffix = parse_word(["STEM|POS:N|LEM:rab~|ROOT:rbb|M|GEN", "SUFF|PRON:3MS"])
        assert suffix.pronoun_type == PronounType.POSSESSIVE
        assert generate_description(suffix) == (
            "3rd person masculine singular possessive pronoun"
        )

    def test_personal_pronoun_on_preposition(self) -> None:
        _, suffix = parse_word(["STEM|POS:P|LEM:min", "SUFF|PRON:3MP"])
        assert suffix.pronoun_type == PronounType.PERSONAL
        assert generate_description(suffix) == "3rd person masculine plural personal pronoun"

    def test_prefixes_are_not_linked(self) -> None:
        prefix, stem = parse_word(["PREFIX|bi+", "STEM|POS:N|LEM:{som|ROOT:smw|M|GEN"])
        assert prefix.host is None
        assert stem.host is None

    def test_word_without_stem(self) -> None:
        segments = [parse_segment("PREFIX|bi+"), parse_segment("SUFF|PRON:3MP")]
        assert link_word(segments) == segments
