"""Parse corpus annotation strings into Segment records.

Annotations are pipe-delimited, starting with the segment marker:

    PREFIX|w:CONJ+
    PREFIX|bi+
    STEM|POS:N|LEM:{som|ROOT:smw|M|GEN
    STEM|POS:V|IMPF|(IV)|LEM:>anzala|ROOT:nzl|3MS|PASS|MOOD:IND
    SUFF|PRON:3MP
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from quranic_morphology.enums import (
    Derivation,
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    NounState,
    PartOfSpeech,
    Person,
    SegmentKind,
    VerbAspect,
    VerbForm,
    VerbVoice,
)
from quranic_morphology.errors import FeatureParseError
from quranic_morphology.segment import Segment

logger = logging.getLogger(__name__)

# Prefixes written without an explicit tag -> part of speech
BARE_PREFIXES = {
    "bi": PartOfSpeech.PREPOSITION,
    "ka": PartOfSpeech.PREPOSITION,
    "ta": PartOfSpeech.PREPOSITION,
    "Al": PartOfSpeech.DETERMINER,
    "sa": PartOfSpeech.FUTURE,
    "ya": PartOfSpeech.VOCATIVE,
    "ha": PartOfSpeech.VOCATIVE,
}

# Compact person/gender/number tokens: 3MS, MP, 1P, FD, M, ...
_PHI_TOKEN = re.compile(r"^(?P<person>[123])?(?P<gender>[MF])?(?P<number>[SDP])?$")

_VERB_FORM_TOKEN = re.compile(r"^\((?:I|II|III|IV|V|VI|VII|VIII|IX|X|XI|XII)\)$")

# Key:value tokens carried by the corpus but not used in descriptions
IGNORED_KEYS = frozenset({"MOOD", "SP", "FAM"})

_ASPECTS = {aspect.value for aspect in VerbAspect}
_CASES = {case.value for case in GrammaticalCase}
_STATES = {state.value for state in NounState}
_POS_TAGS = {tag.value for tag in PartOfSpeech}


def _part_of_speech(tag: str, annotation: str) -> PartOfSpeech:
    try:
        return PartOfSpeech(tag)
    except ValueError:
        raise FeatureParseError(f"Unknown part-of-speech tag {tag!r} in {annotation!r}") from None


def parse_phi_features(token: str) -> dict[str, Any] | None:
    """Parse a compact person/gender/number token.

    Returns:
        Dict with 'person', 'gender' and 'number' keys (values may be None),
        or None if the token is not a phi-feature token.

    Example:
        >>> parse_phi_features("3MS")["person"]
        <Person.THIRD: '3'>
    """
    if not token:
        return None
    match = _PHI_TOKEN.match(token)
    if match is None:
        return None

    person = match.group("person")
    gender = match.group("gender")
    number = match.group("number")
    return {
        "person": Person(person) if person else None,
        "gender": Gender(gender) if gender else None,
        "number": GrammaticalNumber(number) if number else None,
    }


def _parse_prefix(body: list[str], annotation: str, form: str | None) -> Segment:
    if not body:
        raise FeatureParseError(f"Empty prefix annotation: {annotation!r}")

    token = body[0].rstrip("+")
    if ":" in token:
        lemma, tag = token.split(":", 1)
        return Segment(
            kind=SegmentKind.PREFIX,
            part_of_speech=_part_of_speech(tag, annotation),
            lemma=lemma,
            form=form,
        )

    part_of_speech = BARE_PREFIXES.get(token)
    if part_of_speech is None:
        logger.debug("Untagged prefix %r in %r", token, annotation)
    return Segment(kind=SegmentKind.PREFIX, part_of_speech=part_of_speech, lemma=token, form=form)


def _parse_suffix(body: list[str], annotation: str, form: str | None) -> Segment:
    if not body:
        raise FeatureParseError(f"Empty suffix annotation: {annotation!r}")

    token = body[0]
    if token.startswith("PRON:"):
        phi = parse_phi_features(token.removeprefix("PRON:"))
        if phi is None:
            raise FeatureParseError(f"Invalid pronoun features in {annotation!r}")
        return Segment(
            kind=SegmentKind.SUFFIX, part_of_speech=PartOfSpeech.PRONOUN, form=form, **phi
        )

    token = token.lstrip("+")
    if ":" in token:
        lemma, tag = token.split(":", 1)
        return Segment(
            kind=SegmentKind.SUFFIX,
            part_of_speech=_part_of_speech(tag, annotation),
            lemma=lemma,
            form=form,
        )

    if token in _POS_TAGS:
        return Segment(kind=SegmentKind.SUFFIX, part_of_speech=PartOfSpeech(token), form=form)

    logger.debug("Untagged suffix %r in %r", token, annotation)
    return Segment(kind=SegmentKind.SUFFIX, lemma=token or None, form=form)


def _parse_stem(body: list[str], annotation: str, form: str | None) -> Segment:
    fields: dict[str, Any] = {}
    tokens = set(body)

    if "PCPL" in tokens:
        fields["derivation"] = (
            Derivation.PASSIVE_PARTICIPLE if "PASS" in tokens else Derivation.ACTIVE_PARTICIPLE
        )
    elif "VN" in tokens:
        fields["derivation"] = Derivation.VERBAL_NOUN

    for token in body:
        key, _, value = token.partition(":")

        if value and key == "POS":
            fields["part_of_speech"] = _part_of_speech(value, annotation)
        elif value and key == "LEM":
            fields["lemma"] = value
        elif value and key == "ROOT":
            fields["root"] = value
        elif value and key in IGNORED_KEYS:
            continue
        elif token in _ASPECTS:
            fields["aspect"] = VerbAspect(token)
        elif token in _CASES:
            fields["case"] = GrammaticalCase(token)
        elif token in _STATES:
            fields["noun_state"] = NounState(token)
        elif _VERB_FORM_TOKEN.match(token):
            fields["verb_form"] = VerbForm.from_tag(token)
        elif token in ("PCPL", "VN"):
            continue
        elif token in ("ACT", "PASS"):
            # Participles use ACT/PASS for the derivation, verbs for the voice
            if "derivation" not in fields:
                fields["voice"] = VerbVoice(token)
        elif (phi := parse_phi_features(token)) is not None:
            fields.update(phi)
        else:
            logger.debug("Skipping unknown stem token %r in %r", token, annotation)

    return Segment(kind=SegmentKind.STEM, form=form, **fields)


_PARSERS = {
    SegmentKind.PREFIX: _parse_prefix,
    SegmentKind.STEM: _parse_stem,
    SegmentKind.SUFFIX: _parse_suffix,
}


def parse_segment(annotation: str, *, form: str | None = None) -> Segment:
    """Parse one annotation string into an unlinked Segment.

    Args:
        annotation: Pipe-delimited features, e.g. "STEM|POS:N|LEM:{som|ROOT:smw|M|GEN"
        form: Optional surface form of the segment

    Raises:
        FeatureParseError: If the annotation is empty, has an unknown marker
            or an unknown part-of-speech tag.
    """
    tokens = [token for token in annotation.strip().split("|") if token]
    if not tokens:
        raise FeatureParseError("Empty annotation")

    try:
        kind = SegmentKind(tokens[0])
    except ValueError:
        raise FeatureParseError(f"Unknown segment marker {tokens[0]!r} in {annotation!r}") from None

    return _PARSERS[kind](tokens[1:], annotation, form)


def link_word(segments: Iterable[Segment]) -> list[Segment]:
    """Attach each suffix of a word to the word's stem.

    Pronoun suffixes are numbered in order (``slot``) so the first one on a
    verb can be recognized as its subject marker.
    """
    word = list(segments)
    stem = next((s for s in word if s.kind == SegmentKind.STEM), None)
    if stem is None:
        return word

    linked: list[Segment] = []
    pronoun_slot = 0
    for segment in word:
        if segment.kind != SegmentKind.SUFFIX:
            linked.append(segment)
            continue

        slot = 0
        if segment.part_of_speech == PartOfSpeech.PRONOUN:
            slot = pronoun_slot
            pronoun_slot += 1
        linked.append(replace(segment, host=stem, slot=slot))

    return linked


def parse_word(annotations: Iterable[str]) -> list[Segment]:
    """Parse all annotations of one word into linked Segments.

    Example:
        >>> word = parse_word(["STEM|POS:V|PERF|LEM:qaAla|ROOT:qwl|3MP", "SUFF|PRON:3MP"])
        >>> [s.name for s in word]
        ['verb', 'subject pronoun']
    """
    return link_word(parse_segment(annotation) for annotation in annotations)
