"""
Tests for stage morph constraints:
- MorphRange validation and clamping
- The per-stage table
- Envelope interpolation
"""

import pytest
from fowl_lifecycle.core.stage import BiologicalStage, iter_hatched_stages
from fowl_lifecycle.core.appearance import MORPH_FIELDS, CombStyle, Sheen, Stance, TailStyle
from fowl_lifecycle.morph.constraints import (
    MorphRange,
    MorphRangeError,
    for_stage,
    interpolate,
    preserve_or_default,
)


# =============================================================================
# MORPH RANGE TESTS
# =============================================================================

class TestMorphRange:
    """Tests for a single morph range."""

    def test_clamp(self):
        """Test values are clamped into [min, max]."""
        morph_range = MorphRange(0.2, 0.6, 0.4)
        assert morph_range.clamp(0.1) == 0.2
        assert morph_range.clamp(0.9) == 0.6
        assert morph_range.clamp(0.5) == 0.5

    def test_interpolate_factor(self):
        """Test the 0-1 factor maps onto the range."""
        morph_range = MorphRange(0.2, 0.6, 0.4)
        assert morph_range.interpolate(0.0) == pytest.approx(0.2)
        assert morph_range.interpolate(0.5) == pytest.approx(0.4)
        assert morph_range.interpolate(2.0) == pytest.approx(0.6)

    def test_default_outside_range_rejected(self):
        """Test construction fails when default is outside the range."""
        with pytest.raises(MorphRangeError):
            MorphRange(0.3, 0.85, 0.15)
        with pytest.raises(ValueError):
            MorphRange(0.0, 0.5, 0.6)


# =============================================================================
# TABLE TESTS
# =============================================================================

class TestConstraintTable:
    """Tests for the sixteen stage/sex records."""

    def test_every_slot_matches(self):
        """Test each lookup returns its own stage and sex."""
        for stage in BiologicalStage.ordered():
            for is_male in (True, False):
                record = for_stage(stage, is_male)
                assert record.stage == stage
                assert record.is_male == is_male

    def test_egg_is_empty(self):
        """Test EGG ranges are all zero and allowed sets are singletons."""
        egg = for_stage(BiologicalStage.EGG)
        for name, morph_range in egg.ranges().items():
            assert (morph_range.min_value, morph_range.max_value, morph_range.default_value) == (0, 0, 0), name
        for name, allowed in egg.allowed_sets().items():
            assert len(allowed) == 1, name
        assert egg.allowed_combs == (CombStyle.NONE,)
        assert egg.allowed_sheens == (Sheen.MATTE,)

    def test_hatchling_has_no_comb_or_hackles(self):
        """Test a hatchling cannot carry adult features."""
        hatchling = for_stage(BiologicalStage.HATCHLING)
        assert hatchling.allowed_combs == (CombStyle.NONE,)
        assert hatchling.hackle_length.max_value == 0.0
        assert hatchling.spur_size.max_value == 0.0
        assert hatchling.default_feather_texture == "Fluff"

    def test_hen_defaults_inside_range(self):
        """Test hen hackle and spur defaults sit inside their ranges."""
        for stage in (BiologicalStage.ADULT, BiologicalStage.MATURE_ADULT, BiologicalStage.SENIOR):
            hen = for_stage(stage, is_male=False)
            assert hen.spur_size.default_value == 0.0
            assert hen.spur_size.contains(hen.spur_size.default_value)
            assert hen.hackle_length.contains(hen.hackle_length.default_value)

    def test_sexual_dimorphism(self):
        """Test cocks carry bigger adult features than hens."""
        cock = for_stage(BiologicalStage.ADULT, is_male=True)
        hen = for_stage(BiologicalStage.ADULT, is_male=False)
        assert cock.hackle_length.default_value == pytest.approx(0.75)
        assert hen.hackle_length.default_value == pytest.approx(0.15)
        assert cock.default_stance == Stance.GAME_READY
        assert hen.default_stance == Stance.NORMAL

    def test_senior_excludes_iridescent(self):
        """Test seniors lose the iridescent sheen."""
        senior = for_stage(BiologicalStage.SENIOR)
        assert Sheen.IRIDESCENT not in senior.allowed_sheens
        assert senior.default_feather_texture == "Dulling"

    def test_all_defaults_valid(self):
        """Test every record has min <= default <= max."""
        for stage in BiologicalStage.ordered():
            for is_male in (True, False):
                for name, r in for_stage(stage, is_male).ranges().items():
                    assert r.min_value <= r.default_value <= r.max_value, f"{stage.name} {name}"

    def test_to_dict(self):
        """Test serialization includes ranges and allowed styles."""
        data = for_stage(BiologicalStage.GROWER).to_dict()
        assert data["stage"] == "GROWER"
        assert data["leg_length"] == {"min": 0.45, "max": 0.7, "default": 0.6}
        assert data["allowed_tail"] == ["SHORT", "SICKLE"]


# =============================================================================
# INTERPOLATION TESTS
# =============================================================================

class TestInterpolation:
    """Tests for envelope blending between stages."""

    def test_endpoints(self):
        """Test progress 0 and 1 reproduce the source and target ranges."""
        chick = for_stage(BiologicalStage.CHICK)
        grower = for_stage(BiologicalStage.GROWER)
        start = interpolate(chick, grower, 0.0)
        end = interpolate(chick, grower, 1.0)
        for name in MORPH_FIELDS:
            assert getattr(start, name).default_value == pytest.approx(getattr(chick, name).default_value)
            assert getattr(end, name).default_value == pytest.approx(getattr(grower, name).default_value)

    def test_midpoint(self):
        """Test linear blend at progress 0.5."""
        chick = for_stage(BiologicalStage.CHICK)
        grower = for_stage(BiologicalStage.GROWER)
        mid = interpolate(chick, grower, 0.5)
        assert mid.leg_length.min_value == pytest.approx((0.25 + 0.45) / 2)
        assert mid.leg_length.max_value == pytest.approx((0.45 + 0.7) / 2)
        assert mid.leg_length.default_value == pytest.approx((0.4 + 0.6) / 2)

    def test_categoricals_come_from_target(self):
        """Test allowed styles and picks switch to the target stage."""
        chick = for_stage(BiologicalStage.CHICK)
        grower = for_stage(BiologicalStage.GROWER)
        mid = interpolate(chick, grower, 0.1)
        assert mid.stage == BiologicalStage.GROWER
        assert mid.allowed_tails == (TailStyle.SHORT, TailStyle.SICKLE)
        assert mid.default_feather_texture == "Developing"

    def test_progress_clamped(self):
        """Test progress outside [0, 1] is clamped."""
        chick = for_stage(BiologicalStage.CHICK)
        grower = for_stage(BiologicalStage.GROWER)
        assert interpolate(chick, grower, -1.0).leg_length.default_value == pytest.approx(0.4)
        assert interpolate(chick, grower, 3.0).leg_length.default_value == pytest.approx(0.6)

    def test_min_not_above_max_for_any_progress(self):
        """Test blended ranges stay well formed across every adjacent pair."""
        stages = list(iter_hatched_stages())
        for is_male in (True, False):
            for source_stage, target_stage in zip(stages, stages[1:]):
                source = for_stage(source_stage, is_male)
                target = for_stage(target_stage, is_male)
                for step in range(11):
                    blended = interpolate(source, target, step / 10)
                    for name, r in blended.ranges().items():
                        assert r.min_value <= r.max_value, f"{source_stage.name}->{target_stage.name} {name}"


class TestPreserveOrDefault:
    """Tests for the preserve-if-valid helper."""

    def test_keeps_allowed_value(self):
        """Test an allowed value is preserved."""
        allowed = (CombStyle.NONE, CombStyle.PEA)
        assert preserve_or_default(CombStyle.PEA, allowed, CombStyle.NONE) == CombStyle.PEA

    def test_falls_back(self):
        """Test a disallowed value falls back."""
        allowed = (CombStyle.NONE, CombStyle.PEA)
        assert preserve_or_default(CombStyle.ROSE, allowed, CombStyle.PEA) == CombStyle.PEA


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
