"""Principle score builder: projects raw analyzer results into PrincipleScores.

One method per metric group. Each returns a single ``PrincipleScore`` except
``fiction_elements``, which returns one per reported element. ``build``
assembles the full ordered list for a report.
"""

from typing import List, Sequence, Tuple

from ..analyzers.backstory import BackstoryDensityResult
from ..analyzers.characters import CharacterAnalysisResult
from ..analyzers.cliches import ClicheDetectionResult
from ..analyzers.conflict import ConflictTrackingResult
from ..analyzers.dialogue_ratio import DialogueNarrativeRatio
from ..analyzers.emotion_heatmap import EmotionHeatmapResult
from ..analyzers.fiction_elements import FictionElementScore, FictionElementsResult
from ..analyzers.filtering import FilteringWordsResult
from ..analyzers.pov import POVConsistencyResult
from ..analyzers.prose_quality import ProseQualityResult
from ..analyzers.scene_sequel import SceneSequelResult
from ..analyzers.sensory import SensoryBalanceResult
from ..analyzers.themes import ThemeAnalysisResult
from ..analyzers.tropes import TropeAnalysisResult
from ..math import clamp, format_fixed
from ..models import AnalyzerOutputs, Priority, PrincipleScore, Suggestion
from ..principles import FictionElementPrinciple, PrincipleId, PrincipleKind
from .normalizer import (
    DualCodingCounts,
    PacingCounts,
    calculate_dual_coding_score,
    calculate_pacing_score,
    count_pacing,
)

K = PrincipleKind


def _suggestion(
    principle: PrincipleId,
    suggestion_id: str,
    priority: Priority,
    title: str,
    description: str,
    implementation: str,
    expected_impact: str,
) -> Suggestion:
    return Suggestion(
        id=suggestion_id,
        principle=principle,
        priority=priority,
        title=title,
        description=description,
        implementation=implementation,
        expected_impact=expected_impact,
    )


def _per_recommendation(
    principle: PrincipleId,
    prefix: str,
    recommendations: Sequence[str],
    priority: Priority,
    title: str,
    implementation: str,
    expected_impact: str,
) -> Tuple[Suggestion, ...]:
    """One suggestion per analyzer recommendation, ids ``{prefix}-0``, ``{prefix}-1``..."""
    return tuple(
        _suggestion(principle, f"{prefix}-{i}", priority, title, rec, implementation, expected_impact)
        for i, rec in enumerate(recommendations)
    )


def _score(kind: PrincipleKind, score: float, details, suggestions=()) -> PrincipleScore:
    return PrincipleScore(
        principle=kind,
        display_name=kind.display_name,
        score=score,
        weight=kind.weight,
        details=tuple(details),
        suggestions=tuple(suggestions),
    )


class PrincipleScoreBuilder:
    """Builds the uniform principle score list from one run's analyzer outputs.

    Weights and thresholds are fixed; the builder holds no state.
    """

    # -- structure ---------------------------------------------------------

    def pacing(self, counts: PacingCounts) -> PrincipleScore:
        return _score(
            K.PACING,
            calculate_pacing_score(counts),
            [
                f"{counts.compact} compact paragraphs",
                f"{counts.balanced} balanced paragraphs",
                f"{counts.extended} extended paragraphs",
            ],
        )

    def dual_coding(self, counts: DualCodingCounts) -> PrincipleScore:
        return _score(
            K.DUAL_CODING,
            calculate_dual_coding_score(counts),
            [f"{counts.suggestion_count} areas could use more sensory details"],
        )

    def character_development(self, result: CharacterAnalysisResult) -> PrincipleScore:
        details = [
            f"{result.total_characters} characters detected",
            f"{len(result.protagonists)} protagonist(s): "
            f"{', '.join(result.protagonists) or 'none'}",
        ]
        details.extend(
            f"{c.name}: {c.arc_type} arc ({c.total_mentions} mentions)"
            for c in result.characters[:3]
        )
        return _score(
            K.CHARACTER_DEVELOPMENT,
            result.average_development,
            details,
            _per_recommendation(
                K.CHARACTER_DEVELOPMENT,
                "char",
                result.recommendations,
                Priority.MEDIUM,
                "Character Development",
                "Review character arcs and emotional trajectories",
                "Stronger reader connection and engagement",
            ),
        )

    def theme_depth(self, result: ThemeAnalysisResult) -> PrincipleScore:
        details = [
            f"{len(result.primary_themes)} primary themes detected",
            f"Dominant theme: {result.dominant_theme or 'none'}",
            f"{len(result.symbolic_patterns)} symbolic patterns found",
        ]
        details.extend(
            f"{t.theme}: {t.frequency} mentions ({t.intensity}% intensity)"
            for t in result.primary_themes[:3]
        )
        return _score(
            K.THEME_DEPTH,
            result.thematic_density,
            details,
            _per_recommendation(
                K.THEME_DEPTH,
                "theme",
                result.recommendations,
                Priority.MEDIUM,
                "Theme Development",
                "Review thematic elements and symbolic patterns",
                "Deeper reader engagement and narrative resonance",
            ),
        )

    def genre_tropes(self, result: TropeAnalysisResult) -> PrincipleScore:
        details = [
            f"Genre: {result.genre}",
            f"Convention adherence: {result.convention_score}/100",
            f"Subversion score: {result.subversion_score}/100",
            f"Trope overuse: {result.trope_overuse_score}/100",
            f"{len(result.detected_tropes)} tropes detected",
            f"{len(result.detected_beats)}/{len(result.story_beats)} story beats present",
        ]
        details.extend(f"{t.name}: {t.strength}% strength" for t in result.detected_tropes[:3])
        priority = Priority.HIGH if result.trope_overuse_score > 60 else Priority.MEDIUM
        return _score(
            K.GENRE_TROPES,
            result.convention_score,
            details,
            _per_recommendation(
                K.GENRE_TROPES,
                "trope",
                result.recommendations,
                priority,
                "Genre Conventions",
                "Review genre tropes and narrative conventions",
                "Better alignment with reader expectations and genre standards",
            ),
        )

    # -- prose quality -----------------------------------------------------

    def word_choice(self, result: ProseQualityResult) -> PrincipleScore:
        freq = result.word_frequency
        overused = freq.overused_words
        details = [
            f"Total words: {freq.total:,}",
            f"Unique words: {freq.unique:,}",
            f"Vocabulary richness: {format_fixed(freq.richness * 100, 1)}%",
            f"{len(overused)} potentially overused words detected"
            if overused
            else "No significantly overused words detected",
        ]
        suggestions = []
        if len(overused) > 3:
            suggestions.append(
                _suggestion(
                    K.WORD_CHOICE,
                    "word-variety-1",
                    Priority.MEDIUM,
                    "Expand Vocabulary",
                    "Consider varying these frequently used words: "
                    + ", ".join(w.word for w in overused[:5]),
                    "Use a thesaurus to find synonyms for overused words",
                    "More engaging and varied prose",
                )
            )
        return _score(K.WORD_CHOICE, min(100.0, freq.richness * 300), details, suggestions)

    def dialogue_quality(self, result: ProseQualityResult) -> PrincipleScore:
        dialogue = result.dialogue
        if dialogue.total_dialogue_lines > 0:
            score = min(100.0, dialogue.tagged_lines / dialogue.total_dialogue_lines * 100)
        else:
            score = 50
        suggestions = []
        if dialogue.untagged_lines > 5:
            suggestions.append(
                _suggestion(
                    K.DIALOGUE_QUALITY,
                    "dialogue-1",
                    Priority.MEDIUM,
                    "Add Dialogue Attribution",
                    f"{dialogue.untagged_lines} dialogue lines lack clear speaker attribution",
                    "Add dialogue tags or action beats to clarify who is speaking",
                    "Clearer dialogue flow and speaker identification",
                )
            )
        return _score(
            K.DIALOGUE_QUALITY,
            score,
            [
                f"Dialogue lines: {dialogue.total_dialogue_lines}",
                f"Tagged: {dialogue.tagged_lines}",
                f"Untagged: {dialogue.untagged_lines}",
                f"Unique speakers: {len(dialogue.speakers)}",
            ],
            suggestions,
        )

    def voice_strength(self, result: ProseQualityResult) -> PrincipleScore:
        passive = result.passive_voice
        if passive.percentage < 10:
            verdict = "Excellent active voice usage"
        elif passive.percentage < 20:
            verdict = "Good, but could strengthen some sentences"
        else:
            verdict = "Consider revising to active voice for stronger prose"
        suggestions = []
        if passive.count > 10:
            suggestions.append(
                _suggestion(
                    K.VOICE_STRENGTH,
                    "passive-1",
                    Priority.HIGH if passive.percentage > 25 else Priority.MEDIUM,
                    "Reduce Passive Voice",
                    f"{passive.count} instances of passive voice detected. "
                    "Active voice creates stronger, more engaging prose.",
                    "Review sentences with 'was/were [verb]' and rewrite with active subjects",
                    "More direct and powerful writing",
                )
            )
        return _score(
            K.VOICE_STRENGTH,
            clamp(100 - passive.percentage * 2),
            [
                f"Passive voice instances: {passive.count}",
                f"Passive voice rate: {format_fixed(passive.percentage, 1)}% of sentences",
                verdict,
            ],
            suggestions,
        )

    def adverb_usage(self, result: ProseQualityResult) -> PrincipleScore:
        adverbs = result.adverbs
        suggestions = []
        if adverbs.weak_adverbs > 5:
            suggestions.append(
                _suggestion(
                    K.ADVERB_USAGE,
                    "adverb-1",
                    Priority.LOW,
                    "Reduce Weak Adverbs",
                    f"{adverbs.weak_adverbs} weak adverbs (very, really, quite, etc.) detected",
                    "Replace weak adverb + verb combinations with single strong verbs",
                    "More concise and impactful writing",
                )
            )
        return _score(
            K.ADVERB_USAGE,
            max(0.0, 100 - min(100.0, adverbs.density * 2)),
            [
                f"Total adverbs: {adverbs.count}",
                f"Density: {format_fixed(adverbs.density, 1)} per 1000 words",
                f"Weak adverbs (very, really, etc.): {adverbs.weak_adverbs}",
                "Good adverb usage"
                if adverbs.density < 15
                else "Consider replacing some adverbs with stronger verbs",
            ],
            suggestions,
        )

    def sentence_variety(self, result: ProseQualityResult) -> PrincipleScore:
        variety = result.sentence_variety
        suggestions = []
        if variety.variety_score < 60:
            suggestions.append(
                _suggestion(
                    K.SENTENCE_VARIETY,
                    "variety-1",
                    Priority.MEDIUM,
                    "Improve Sentence Variety",
                    "Sentence length could be more varied. Mix short, punchy sentences "
                    "with longer, flowing ones.",
                    "Aim for 30% short, 50% medium, 20% long sentences",
                    "Better reading rhythm and engagement",
                )
            )
        return _score(
            K.SENTENCE_VARIETY,
            variety.variety_score,
            [
                f"Average sentence length: {format_fixed(variety.average_length, 1)} words",
                f"Short sentences (< 10 words): {variety.short_sentences}",
                f"Medium sentences (10-20 words): {variety.medium_sentences}",
                f"Long sentences (> 20 words): {variety.long_sentences}",
                f"Variety score: {format_fixed(variety.variety_score)}/100",
            ],
            suggestions,
        )

    def readability(self, result: ProseQualityResult) -> PrincipleScore:
        r = result.readability
        suggestions = []
        if r.flesch_kincaid > 12 or r.flesch_kincaid < 6:
            too_complex = r.flesch_kincaid > 12
            suggestions.append(
                _suggestion(
                    K.READABILITY,
                    "readability-1",
                    Priority.LOW,
                    "Simplify Complex Prose" if too_complex else "Add Complexity",
                    "Prose may be too complex. Consider shorter sentences and simpler words."
                    if too_complex
                    else "Prose may be too simple. Consider varying sentence structure "
                    "and vocabulary.",
                    "Target 8th-10th grade reading level for most fiction",
                    "Optimal readability for target audience",
                )
            )
        return _score(
            K.READABILITY,
            clamp(100 - abs(r.flesch_kincaid - 8) * 5),
            [
                f"Flesch-Kincaid Grade Level: {format_fixed(r.flesch_kincaid, 1)}",
                f"Reading Ease: {format_fixed(r.flesch_reading)}/100",
                r.interpretation,
                f"Avg sentence length: {format_fixed(r.average_sentence_length, 1)} words",
                f"Avg syllables per word: {format_fixed(r.average_syllables_per_word, 2)}",
            ],
            suggestions,
        )

    # -- style -------------------------------------------------------------

    def emotional_pacing(self, result: EmotionHeatmapResult) -> PrincipleScore:
        dominant = ", ".join(emotion for emotion, _ in result.dominant_emotions(3))
        details = [
            f"Average emotional intensity: {format_fixed(result.average_intensity)}/100",
            f"Emotional peaks: {len(result.peaks)}",
            f"Low-tension valleys: {len(result.valleys)}",
            f"Dominant emotions: {dominant}",
        ]
        details.extend(result.pacing_issues[:2])
        return _score(
            K.EMOTIONAL_PACING,
            min(100.0, result.average_intensity * 2),
            details,
            _per_recommendation(
                K.EMOTIONAL_PACING,
                "emotion",
                result.pacing_issues,
                Priority.MEDIUM,
                "Improve Emotional Pacing",
                "Vary emotional intensity throughout manuscript",
                "More engaging, dynamic story",
            ),
        )

    def pov_consistency(self, result: POVConsistencyResult) -> PrincipleScore:
        head_hops = len(result.potential_head_hops)
        details = [
            f"Dominant POV: {result.dominant_pov}",
            f"POV shifts: {result.shift_count}",
            f"Consistency score: {format_fixed(result.consistency)}/100",
            f"Potential head-hops: {head_hops}",
        ]
        details.extend(result.recommendations[:2])
        suggestions = []
        if head_hops > 0 or result.consistency < 80:
            suggestions.append(
                _suggestion(
                    K.POV_CONSISTENCY,
                    "pov-1",
                    Priority.HIGH if head_hops > 3 else Priority.MEDIUM,
                    "Maintain POV Consistency",
                    result.recommendations[0] if result.recommendations else "Review POV shifts",
                    "Stick to one character's perspective within each scene",
                    "Clearer narrative voice and reader immersion",
                )
            )
        return _score(K.POV_CONSISTENCY, result.consistency, details, suggestions)

    def cliche_avoidance(self, result: ClicheDetectionResult) -> PrincipleScore:
        if result.count == 0:
            summary = "No common clichés detected"
        else:
            summary = "Most common: " + ", ".join(
                f"{category} ({count})" for category, count in result.top_categories(2)
            )
        suggestions = []
        if result.count > 5:
            suggestions.append(
                _suggestion(
                    K.CLICHE_AVOIDANCE,
                    "cliche-1",
                    Priority.LOW,
                    "Replace Clichés with Fresh Language",
                    f"{result.count} clichés detected. "
                    "Replace with original descriptions and metaphors.",
                    "Review flagged phrases and create unique alternatives",
                    "More original, engaging prose",
                )
            )
        return _score(
            K.CLICHE_AVOIDANCE,
            max(0.0, 100 - min(100.0, result.density * 20)),
            [
                f"Clichés detected: {result.count}",
                f"Density: {format_fixed(result.density, 2)} per 1000 words",
                summary,
            ],
            suggestions,
        )

    def direct_prose(self, result: FilteringWordsResult) -> PrincipleScore:
        common = ", ".join(f"{kind} ({count})" for kind, count in result.top_types(3))
        suggestions = []
        if result.count > 20:
            suggestions.append(
                _suggestion(
                    K.DIRECT_PROSE,
                    "filtering-1",
                    Priority.MEDIUM,
                    "Eliminate Filtering Words",
                    f"{result.count} filtering words weaken your prose. Show directly "
                    "instead of filtering through perception verbs.",
                    "Replace 'She saw the door open' with 'The door opened'",
                    "More immediate, engaging narrative",
                )
            )
        return _score(
            K.DIRECT_PROSE,
            max(0.0, 100 - min(100.0, result.density * 5)),
            [
                f"Filtering words: {result.count}",
                f"Density: {format_fixed(result.density, 1)} per 1000 words",
                f"Most common types: {common}",
                "Strong, direct prose"
                if result.density < 10
                else "Consider removing filter words for immediacy",
            ],
            suggestions,
        )

    def backstory_balance(self, result: BackstoryDensityResult) -> PrincipleScore:
        details = [
            f"Backstory sections: {len(result.sections)}",
            f"Total backstory: {format_fixed(result.percentage, 1)}% of manuscript",
            f"Opening chapters backstory: {format_fixed(result.opening_chapters_backstory, 1)}%",
            f"Heavy sections: {result.heavy_sections}",
        ]
        details.extend(result.warnings[:2])
        priority = Priority.HIGH if result.opening_chapters_backstory > 30 else Priority.MEDIUM
        return _score(
            K.BACKSTORY_BALANCE,
            max(0.0, 100 - min(100.0, result.percentage * 2)),
            details,
            _per_recommendation(
                K.BACKSTORY_BALANCE,
                "backstory",
                result.warnings,
                priority,
                "Reduce Backstory Density",
                "Weave backstory gradually through action and dialogue",
                "Better pacing and reader engagement",
            ),
        )

    # -- fiction elements --------------------------------------------------

    def fiction_element(self, index: int, element: FictionElementScore) -> PrincipleScore:
        principle = FictionElementPrinciple(index, element.element)
        name = element.element
        details = [f"Presence: {element.presence}", *element.details, *element.insights[:2]]
        priority = Priority.HIGH if element.score < 40 else Priority.MEDIUM
        suggestions = tuple(
            _suggestion(
                principle,
                f"element-{name}-{i}",
                priority,
                f"{name} Development",
                insight,
                f"Focus on strengthening {name.lower()}",
                f"Improved narrative depth and {name.lower()}",
            )
            for i, insight in enumerate(element.insights[:3])
        )
        return PrincipleScore(
            principle=principle,
            display_name=principle.display_name,
            score=element.score,
            weight=principle.weight,
            details=tuple(details),
            suggestions=suggestions,
        )

    def fiction_elements(self, ranked: Sequence[FictionElementScore]) -> List[PrincipleScore]:
        """One score per element; ``ranked`` must already be sorted by score."""
        return [self.fiction_element(i, element) for i, element in enumerate(ranked)]

    def fiction_balance(
        self, result: FictionElementsResult, ranked: Sequence[FictionElementScore]
    ) -> PrincipleScore:
        strong = ", ".join(e.element for e in ranked if e.score >= 70)
        weak = ", ".join(e.element for e in ranked if e.score < 60)
        return _score(
            K.FICTION_BALANCE,
            result.overall_balance,
            [
                f"Overall balance: {result.overall_balance}/100",
                f"Strong: {strong}",
                f"Needs work: {weak}",
            ],
        )

    # -- advanced metrics --------------------------------------------------

    def dialogue_narrative_balance(self, result: DialogueNarrativeRatio) -> PrincipleScore:
        target = result.genre_target
        score = {"excellent": 90, "good": 75}.get(result.balance, 55)
        return _score(
            K.DIALOGUE_NARRATIVE_BALANCE,
            score,
            [
                f"Dialogue: {format_fixed(result.dialogue_percentage, 1)}% "
                f"(target: {target.ideal_dialogue}%)",
                f"Description: {format_fixed(result.description_percentage, 1)}% "
                f"(target: {target.ideal_description}%)",
                f"Action: {format_fixed(result.action_percentage, 1)}% "
                f"(target: {target.ideal_action}%)",
                f"Genre: {target.genre}",
            ],
            _per_recommendation(
                K.DIALOGUE_NARRATIVE_BALANCE,
                "dialogue-ratio",
                result.recommendations,
                Priority.MEDIUM,
                "Balance Dialogue and Narrative",
                "Adjust proportion of dialogue, description, and action",
                f"Better pacing for {target.genre} genre",
            ),
        )

    def scene_sequel_structure(self, result: SceneSequelResult) -> PrincipleScore:
        score = {"excellent": 90, "good": 75}.get(result.balance, 50)
        priority = Priority.HIGH if result.balance == "unbalanced" else Priority.MEDIUM
        return _score(
            K.SCENE_SEQUEL_STRUCTURE,
            score,
            [
                f"Scenes: {result.scene_count}",
                f"Sequels: {result.sequel_count}",
                f"Scene:Sequel ratio: {format_fixed(result.scene_to_sequel_ratio, 1)}:1",
                f"Avg scene length: {format_fixed(result.average_scene_length)} words",
                f"Avg sequel length: {format_fixed(result.average_sequel_length)} words",
            ],
            _per_recommendation(
                K.SCENE_SEQUEL_STRUCTURE,
                "scene-sequel",
                result.recommendations,
                priority,
                "Balance Scene and Sequel",
                "Add action scenes or reflection/decision points as needed",
                "Better pacing rhythm and character development",
            ),
        )

    def conflict_presence(self, result: ConflictTrackingResult) -> PrincipleScore:
        priority = Priority.HIGH if result.conflict_density < 1 else Priority.MEDIUM
        return _score(
            K.CONFLICT_PRESENCE,
            min(100.0, 40 + result.conflict_density * 10 + result.average_intensity / 2),
            [
                f"Total conflicts: {result.total_conflicts}",
                f"Internal: {result.internal_count}",
                f"External: {result.external_count}",
                f"Interpersonal: {result.interpersonal_count}",
                f"Conflict density: {format_fixed(result.conflict_density, 1)} per 1000 words",
                f"Average intensity: {format_fixed(result.average_intensity)}/100",
                f"Low-conflict sections: {len(result.low_conflict_sections)}",
            ],
            _per_recommendation(
                K.CONFLICT_PRESENCE,
                "conflict",
                result.recommendations,
                priority,
                "Strengthen Conflict",
                "Add obstacles, tensions, and challenges throughout",
                "Increased tension and reader engagement",
            ),
        )

    def sensory_richness(self, result: SensoryBalanceResult) -> PrincipleScore:
        score = {"excellent": 90, "good": 75, "visual-heavy": 60}.get(result.balance, 50)
        priority = Priority.MEDIUM if result.balance == "visual-heavy" else Priority.LOW
        return _score(
            K.SENSORY_RICHNESS,
            score,
            [
                f"Total sensory details: {result.total}",
                f"Sight: {format_fixed(result.sight_percentage, 1)}%",
                f"Sound: {format_fixed(result.sound_percentage, 1)}%",
                f"Touch: {format_fixed(result.touch_percentage, 1)}%",
                f"Smell: {format_fixed(result.smell_percentage, 1)}%",
                f"Taste: {format_fixed(result.taste_percentage, 1)}%",
            ],
            _per_recommendation(
                K.SENSORY_RICHNESS,
                "sensory",
                result.recommendations,
                priority,
                "Balance Sensory Details",
                "Add underutilized senses throughout scenes",
                "Richer, more immersive world-building",
            ),
        )

    # -- assembly ----------------------------------------------------------

    def build(self, outputs: AnalyzerOutputs) -> Tuple[PrincipleScore, ...]:
        """Full ordered principle list for one run.

        Fiction elements appear after backstory balance, sorted by score
        (descending, stable), followed by the fiction balance score.
        """
        paragraphs = outputs.paragraphs
        pacing_counts = count_pacing(paragraphs)
        dual_counts = DualCodingCounts(
            suggestion_count=outputs.dual_coding.suggestion_count,
            total_paragraphs=len(paragraphs),
        )
        prose = outputs.prose_quality
        ranked = sorted(outputs.fiction_elements.elements, key=lambda e: e.score, reverse=True)

        scores = [
            self.pacing(pacing_counts),
            self.dual_coding(dual_counts),
            self.character_development(outputs.characters),
            self.theme_depth(outputs.themes),
            self.genre_tropes(outputs.tropes),
            self.word_choice(prose),
            self.dialogue_quality(prose),
            self.voice_strength(prose),
            self.adverb_usage(prose),
            self.sentence_variety(prose),
            self.readability(prose),
            self.emotional_pacing(outputs.emotion_heatmap),
            self.pov_consistency(outputs.pov_consistency),
            self.cliche_avoidance(outputs.cliches),
            self.direct_prose(outputs.filtering_words),
            self.backstory_balance(outputs.backstory),
        ]
        scores.extend(self.fiction_elements(ranked))
        scores.extend(
            [
                self.fiction_balance(outputs.fiction_elements, ranked),
                self.dialogue_narrative_balance(outputs.dialogue_ratio),
                self.scene_sequel_structure(outputs.scene_sequel),
                self.conflict_presence(outputs.conflict),
                self.sensory_richness(outputs.sensory),
            ]
        )
        return tuple(scores)
