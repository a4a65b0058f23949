"""Analyzer registry: a fixed set of named slots with swappable implementations.

Every slot is declared once in ``SLOTS`` together with the pipeline stage it
runs in and the result fields the principle score builder reads, each with
the kind of value it must hold. Nested records (fiction elements, character
profiles, prose quality sub-records) are declared by dotted path. Results are
validated against those declarations before they reach the scoring code, so
a malformed result fails in its analyzer's own stage.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..analyzers import default_analyzers
from ..exceptions import MalformedAnalyzerResultError, MissingAnalyzerError, UnknownAnalyzerError
from .stages import Stage

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


# kind -> (description, predicate)
KINDS: Dict[str, Tuple[str, Callable[[Any], bool]]] = {
    "num": ("a number", _is_number),
    "str": ("a string", lambda v: isinstance(v, str)),
    "str?": ("a string or None", lambda v: v is None or isinstance(v, str)),
    "seq": ("a sequence", _is_sequence),
    "map": ("a mapping", lambda v: isinstance(v, Mapping)),
    "call": ("callable", callable),
    "rec": ("a record", lambda v: v is not None),
}


@dataclass(frozen=True)
class FieldSpec:
    """One expected result field.

    ``fields`` describes a nested record: the value itself for ``rec``
    fields, every item for ``seq`` fields.
    """

    name: str
    kind: str
    fields: Tuple["FieldSpec", ...] = ()


@dataclass(frozen=True)
class AnalyzerSlot:
    name: str
    stage: Stage
    fields: Tuple[FieldSpec, ...]
    genre_aware: bool = False

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


def _parse_fields(declaration: str, nested: Dict[str, str], path: str = "") -> Tuple[FieldSpec, ...]:
    specs = []
    for token in declaration.split():
        name, kind = token.split(":")
        if kind not in KINDS:
            raise ValueError(f"Unknown field kind {kind!r} for {path}{name}")
        child_path = f"{path}{name}"
        children = nested.get(child_path)
        fields = _parse_fields(children, nested, f"{child_path}.") if children else ()
        specs.append(FieldSpec(name, kind, fields))
    return tuple(specs)


def _slot(
    name: str,
    stage: Stage,
    fields: str,
    genre_aware: bool = False,
    **nested: str,
) -> AnalyzerSlot:
    # keyword names use "__" for the dots of a nested path
    paths = {key.replace("__", "."): value for key, value in nested.items()}
    return AnalyzerSlot(name, stage, _parse_fields(fields, paths), genre_aware)


SLOTS: List[AnalyzerSlot] = [
    _slot("segmenter", Stage.ANALYZING_PACING, "text:str word_count:num"),
    _slot("dual_coding", Stage.ANALYZING_VISUALS, "suggestion_count:num"),
    _slot("characters", Stage.ANALYZING_CHARACTERS,
          "characters:seq protagonists:seq total_characters:num average_development:num "
          "recommendations:seq",
          characters="name:str arc_type:str total_mentions:num"),
    _slot("themes", Stage.ANALYZING_THEMES,
          "primary_themes:seq symbolic_patterns:seq thematic_density:num dominant_theme:str? "
          "recommendations:seq",
          primary_themes="theme:str frequency:num intensity:num"),
    _slot("tropes", Stage.ANALYZING_TROPES,
          "genre:str detected_tropes:seq story_beats:seq detected_beats:seq convention_score:num "
          "subversion_score:num trope_overuse_score:num recommendations:seq",
          genre_aware=True,
          detected_tropes="name:str strength:num"),
    _slot("fiction_elements", Stage.ANALYZING_FICTION_ELEMENTS,
          "elements:seq overall_balance:num",
          elements="element:str score:num presence:str details:seq insights:seq"),
    _slot("prose_quality", Stage.ANALYZING_PROSE_QUALITY,
          "word_frequency:rec dialogue:rec passive_voice:rec adverbs:rec sentence_variety:rec "
          "readability:rec",
          word_frequency="total:num unique:num richness:num overused_words:seq",
          word_frequency__overused_words="word:str",
          dialogue="total_dialogue_lines:num tagged_lines:num untagged_lines:num speakers:map",
          passive_voice="count:num percentage:num",
          adverbs="count:num density:num weak_adverbs:num",
          sentence_variety="average_length:num short_sentences:num medium_sentences:num "
                           "long_sentences:num variety_score:num",
          readability="flesch_kincaid:num flesch_reading:num average_sentence_length:num "
                      "average_syllables_per_word:num interpretation:str"),
    _slot("emotion_heatmap", Stage.ANALYZING_VISUAL_ENHANCEMENTS,
          "average_intensity:num peaks:seq valleys:seq emotion_breakdown:map pacing_issues:seq "
          "dominant_emotions:call"),
    _slot("pov_consistency", Stage.ANALYZING_VISUAL_ENHANCEMENTS,
          "dominant_pov:str shift_count:num consistency:num potential_head_hops:seq "
          "recommendations:seq"),
    _slot("cliches", Stage.ANALYZING_VISUAL_ENHANCEMENTS,
          "count:num density:num categories:map top_categories:call"),
    _slot("filtering_words", Stage.ANALYZING_VISUAL_ENHANCEMENTS,
          "count:num density:num by_type:map top_types:call"),
    _slot("backstory", Stage.ANALYZING_VISUAL_ENHANCEMENTS,
          "sections:seq percentage:num opening_chapters_backstory:num heavy_sections:num "
          "warnings:seq"),
    _slot("dialogue_ratio", Stage.ANALYZING_ADVANCED_METRICS,
          "dialogue_percentage:num description_percentage:num action_percentage:num "
          "genre_target:rec balance:str recommendations:seq",
          genre_aware=True,
          genre_target="genre:str ideal_dialogue:num ideal_description:num ideal_action:num"),
    _slot("scene_sequel", Stage.ANALYZING_ADVANCED_METRICS,
          "scene_count:num sequel_count:num scene_to_sequel_ratio:num average_scene_length:num "
          "average_sequel_length:num balance:str recommendations:seq"),
    _slot("conflict", Stage.ANALYZING_ADVANCED_METRICS,
          "total_conflicts:num internal_count:num external_count:num interpersonal_count:num "
          "conflict_density:num average_intensity:num low_conflict_sections:seq "
          "recommendations:seq"),
    _slot("sensory", Stage.ANALYZING_ADVANCED_METRICS,
          "total:num sight_percentage:num sound_percentage:num touch_percentage:num "
          "smell_percentage:num taste_percentage:num balance:str recommendations:seq"),
]

_SLOTS_BY_NAME: Dict[str, AnalyzerSlot] = {s.name: s for s in SLOTS}


def get_slot(name: str) -> AnalyzerSlot:
    try:
        return _SLOTS_BY_NAME[name]
    except KeyError:
        raise UnknownAnalyzerError(name, list(_SLOTS_BY_NAME)) from None


def slots_for_stage(stage: Stage) -> List[AnalyzerSlot]:
    return [s for s in SLOTS if s.stage is stage]


def check_fields(
    value: Any, fields: Tuple[FieldSpec, ...], path: str = ""
) -> Tuple[List[str], List[str]]:
    """Check ``value`` against ``fields``, descending into nested records.

    Returns:
        ``(missing, problems)``: dotted paths of absent fields, and one
        message per field holding the wrong kind of value.
    """
    missing: List[str] = []
    problems: List[str] = []
    for spec in fields:
        where = f"{path}{spec.name}"
        try:
            field_value = getattr(value, spec.name)
        except AttributeError:
            missing.append(where)
            continue
        except Exception as e:
            # computed properties over an already-broken field
            problems.append(f"{where}: could not be read ({type(e).__name__}: {e})")
            continue

        label, accepts = KINDS[spec.kind]
        if not accepts(field_value):
            problems.append(f"{where}: expected {label}, got {type(field_value).__name__}")
            continue
        if not spec.fields:
            continue

        if spec.kind == "seq":
            for index, item in enumerate(field_value):
                m, p = check_fields(item, spec.fields, f"{where}[{index}].")
                missing.extend(m)
                problems.extend(p)
        else:
            m, p = check_fields(field_value, spec.fields, f"{where}.")
            missing.extend(m)
            problems.extend(p)
    return missing, problems


class AnalyzerRegistry:
    """Binds analyzer implementations to the fixed slots.

    An analyzer is any object with ``analyze(text, genre)``; its slot comes
    from its ``name`` attribute unless one is given explicitly.
    """

    def __init__(self, analyzers: Optional[Iterable[Any]] = None):
        self._analyzers: Dict[str, Any] = {}
        for analyzer in analyzers or ():
            self.register(analyzer)

    def register(self, analyzer: Any, name: Optional[str] = None) -> None:
        """Bind (or replace) the implementation of a slot."""
        slot_name = name or getattr(analyzer, "name", "")
        get_slot(slot_name)
        if slot_name in self._analyzers:
            logger.debug(f"Replacing analyzer for slot {slot_name}")
        self._analyzers[slot_name] = analyzer

    def replace(self, name: str, analyzer: Any) -> "AnalyzerRegistry":
        """Copy of this registry with one slot rebound."""
        clone = AnalyzerRegistry()
        clone._analyzers = dict(self._analyzers)
        clone.register(analyzer, name=name)
        return clone

    def get(self, name: str) -> Any:
        get_slot(name)
        try:
            return self._analyzers[name]
        except KeyError:
            raise MissingAnalyzerError(name) from None

    def check_complete(self) -> None:
        """Raise MissingAnalyzerError for the first unbound slot."""
        for slot in SLOTS:
            if slot.name not in self._analyzers:
                raise MissingAnalyzerError(slot.name)

    def validate(self, name: str, result: Any) -> Any:
        """Return ``result`` unchanged if it matches the slot's field declarations.

        The segmenter's result must be a sequence whose items carry the
        declared fields; every other result carries them itself. Nested
        records are checked item by item.

        Raises:
            MalformedAnalyzerResultError: On a missing field, a field holding
                the wrong kind of value, or a wrong overall shape.
        """
        slot = get_slot(name)
        if name == "segmenter":
            if not _is_sequence(result):
                raise MalformedAnalyzerResultError(
                    name, [], reason=f"expected a sequence of paragraphs, got {type(result).__name__}"
                )
            for index, paragraph in enumerate(result):
                missing, problems = check_fields(paragraph, slot.fields)
                if missing or problems:
                    reason = f"paragraph {index}"
                    if problems:
                        reason += ": " + "; ".join(problems)
                    raise MalformedAnalyzerResultError(name, missing, reason=reason)
            return result

        if result is None:
            raise MalformedAnalyzerResultError(name, list(slot.required_fields), reason="no result")
        missing, problems = check_fields(result, slot.fields)
        if missing or problems:
            raise MalformedAnalyzerResultError(
                name, missing, reason="; ".join(problems) or None
            )
        return result

    def run(self, name: str, text: str, genre: Optional[str] = None) -> Any:
        """Run one slot's analyzer and validate its result.

        Genre is only passed to genre-aware slots. Analyzer exceptions
        propagate unchanged.
        """
        slot = get_slot(name)
        analyzer = self.get(name)
        if slot.genre_aware:
            result = analyzer.analyze(text, genre)
        else:
            result = analyzer.analyze(text)
        return self.validate(name, result)


def default_registry() -> AnalyzerRegistry:
    """Registry with every slot bound to the default heuristic analyzer."""
    return AnalyzerRegistry(default_analyzers())
