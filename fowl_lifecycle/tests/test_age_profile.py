"""
Tests for age profiles:
- Maturity index
- Unhatched birds and hatch dates
"""

from datetime import date

import pytest
from fowl_lifecycle.core.age_profile import AgeProfile
from fowl_lifecycle.core.stage import BiologicalStage, GrowthMode


class TestMaturity:
    """Tests for the maturity index."""

    def test_linear_up_to_full_maturity(self):
        """Test maturity_index = days / 390 on [0, 390]."""
        for day in (0, 39, 100, 195, 300, 390):
            assert AgeProfile.from_days(day).maturity_index == pytest.approx(day / 390)
        assert AgeProfile.from_days(390).maturity_index == 1.0

    def test_exceeds_one_after_maturity(self):
        """Test seniors read above 1.0."""
        assert AgeProfile.from_days(391).maturity_index > 1.0
        assert AgeProfile.from_days(780).maturity_index == pytest.approx(2.0)

    def test_maturity_percent_capped(self):
        """Test percentage is clamped to 0-100."""
        assert AgeProfile.from_days(195).maturity_percent == 50
        assert AgeProfile.from_days(1000).maturity_percent == 100
        assert AgeProfile.unhatched().maturity_percent == 0

    def test_negative_days_clamped(self):
        """Test negative ages are treated as hatch day."""
        profile = AgeProfile.from_days(-5)
        assert profile.age_in_days == 0
        assert profile.stage == BiologicalStage.HATCHLING
        assert profile.maturity_index == 0.0


class TestFactories:
    """Tests for profile construction."""

    def test_from_weeks(self):
        """Test weeks convert to days."""
        profile = AgeProfile.from_weeks(6, is_male=False)
        assert profile.age_in_days == 42
        assert profile.stage == BiologicalStage.GROWER
        assert profile.is_male is False

    def test_unhatched(self):
        """Test an unhatched bird is an EGG with no maturity."""
        profile = AgeProfile.unhatched(is_male=False)
        assert profile.stage == BiologicalStage.EGG
        assert profile.age_in_days == 0
        assert profile.progress == 0.0

    def test_from_hatch_date_before_hatch(self):
        """Test a bird is an egg until its hatch date."""
        profile = AgeProfile.from_hatch_date(date(2026, 3, 20), date(2026, 3, 10))
        assert profile.stage == BiologicalStage.EGG

    def test_from_hatch_date_after_hatch(self):
        """Test age counts from the hatch date."""
        profile = AgeProfile.from_hatch_date(date(2026, 3, 1), date(2026, 4, 12))
        assert profile.age_in_days == 42
        assert profile.stage == BiologicalStage.GROWER

    def test_hatch_day_is_hatchling(self):
        """Test the hatch date itself is day 0."""
        profile = AgeProfile.from_hatch_date(date(2026, 3, 1), date(2026, 3, 1))
        assert profile.stage == BiologicalStage.HATCHLING

    def test_growth_mode(self):
        """Test growth mode is carried and replaceable."""
        profile = AgeProfile.from_days(100, growth_mode=GrowthMode.MANUAL_STAGE)
        assert profile.growth_mode == GrowthMode.MANUAL_STAGE
        free = profile.with_growth_mode(GrowthMode.MANUAL_FREE)
        assert free.growth_mode == GrowthMode.MANUAL_FREE
        assert free.age_in_days == 100

    def test_to_dict(self):
        """Test serialization uses enum names."""
        data = AgeProfile.from_days(42).to_dict()
        assert data["stage"] == "GROWER"
        assert data["growth_mode"] == "AUTO_BIOLOGICAL"
        assert data["age_in_days"] == 42


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
