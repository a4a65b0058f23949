"""Tests for principles.py - the fixed principle registry."""

from manuscript_insight.principles import (
    FICTION_ELEMENT_WEIGHT,
    PRINCIPLE_REGISTRY,
    FictionElementPrinciple,
    PrincipleKind,
)


class TestPrincipleKind:
    def test_every_kind_registered(self):
        assert set(PRINCIPLE_REGISTRY) == set(PrincipleKind)

    def test_fixed_weights(self):
        assert PrincipleKind.PACING.weight == 1.0
        assert PrincipleKind.WORD_CHOICE.weight == 0.7
        assert PrincipleKind.DIALOGUE_QUALITY.weight == 0.8
        assert PrincipleKind.VOICE_STRENGTH.weight == 0.6
        assert PrincipleKind.ADVERB_USAGE.weight == 0.5
        assert PrincipleKind.POV_CONSISTENCY.weight == 0.9
        assert PrincipleKind.CONFLICT_PRESENCE.weight == 1.0

    def test_ids_are_camel_case(self):
        assert PrincipleKind.DUAL_CODING.id == "dualCoding"
        assert PrincipleKind.SENSORY_RICHNESS.id == "sensoryRichness"

    def test_display_names(self):
        assert PrincipleKind.PACING.display_name == "Pacing & Flow"
        assert PrincipleKind.DUAL_CODING.display_name == "Show vs Tell"

    def test_descriptions(self):
        assert PrincipleKind.ADVERB_USAGE.description == "Inverse of adverb density"
        assert all(kind.description for kind in PrincipleKind)


class TestFictionElementPrinciple:
    def test_id_from_index(self):
        p = FictionElementPrinciple(3, "Setting")
        assert p.id == "fictionElement3"
        assert p.display_name == "Setting"
        assert p.weight == FICTION_ELEMENT_WEIGHT == 0.8

    def test_description_names_element(self):
        assert FictionElementPrinciple(0, "Plot").description == "Fiction element: Plot"
