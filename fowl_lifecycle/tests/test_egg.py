"""
Tests for egg incubation state.
"""

from datetime import datetime

import pytest
from fowl_lifecycle.core.egg import (
    EggProfile,
    CandlingResult,
    FertilityStatus,
    ShellColor,
    TemperatureStatus,
)


class TestIncubation:
    """Tests for incubation progress and candling."""

    def test_progress(self):
        """Test progress is days over 21, clamped."""
        assert EggProfile.from_incubation(0).incubation_progress == 0.0
        assert EggProfile.from_incubation(7).incubation_progress == pytest.approx(1 / 3)
        assert EggProfile.from_incubation(30).incubation_progress == 1.0
        assert EggProfile.from_incubation(-3).incubation_days == 0

    def test_days_remaining(self):
        """Test countdown to hatch."""
        assert EggProfile.from_incubation(18).days_remaining == 3
        assert EggProfile.from_incubation(21).days_remaining == 0

    def test_fertility_unknown_before_candling(self):
        """Test fertility is unknown until day 7."""
        egg = EggProfile.from_incubation(5, is_fertile=True)
        assert egg.fertility_status == FertilityStatus.UNKNOWN
        assert egg.candling_result == CandlingResult.NOT_CANDLED

    @pytest.mark.parametrize("days, expected", [
        (7, CandlingResult.VEINS_VISIBLE),
        (13, CandlingResult.VEINS_VISIBLE),
        (14, CandlingResult.EMBRYO_DEVELOPING),
        (17, CandlingResult.EMBRYO_DEVELOPING),
        (18, CandlingResult.LOCKDOWN),
        (21, CandlingResult.LOCKDOWN),
    ])
    def test_candling_stages(self, days, expected):
        """Test candling result for a fertile egg."""
        assert EggProfile.from_incubation(days, is_fertile=True).candling_result == expected

    def test_infertile_egg_is_clear(self):
        """Test an infertile egg candles clear and will not hatch."""
        egg = EggProfile.from_incubation(21, is_fertile=False)
        assert egg.fertility_status == FertilityStatus.INFERTILE
        assert egg.candling_result == CandlingResult.CLEAR
        assert egg.hatch_probability == 0.0
        assert not egg.is_ready_to_hatch


class TestHatchProbability:
    """Tests for hatch probability and temperature."""

    def test_base_and_fertile_rates(self):
        """Test unconfirmed and confirmed fertile hatch rates."""
        assert EggProfile.from_incubation(3).hatch_probability == pytest.approx(0.75)
        assert EggProfile.from_incubation(10, is_fertile=True).hatch_probability == pytest.approx(0.90)

    @pytest.mark.parametrize("temperature, status", [
        (36.5, TemperatureStatus.LOW),
        (37.5, TemperatureStatus.OPTIMAL),
        (38.6, TemperatureStatus.HIGH),
    ])
    def test_temperature_status(self, temperature, status):
        """Test incubator temperature bands."""
        assert EggProfile.from_incubation(10, temperature_c=temperature).temperature_status == status

    def test_off_band_temperature_penalty(self):
        """Test wrong temperature cuts hatch probability."""
        egg = EggProfile.from_incubation(10, is_fertile=True, temperature_c=39.0)
        assert egg.hatch_probability == pytest.approx(0.90 * 0.7)

    def test_no_reading(self):
        """Test missing temperature is unknown and not penalized."""
        egg = EggProfile.from_incubation(10, is_fertile=True)
        assert egg.temperature_status == TemperatureStatus.UNKNOWN
        assert egg.hatch_probability == pytest.approx(0.90)


class TestPredictedHatch:
    """Tests for the hatch date and serialization."""

    def test_predicted_hatch_from_set_date(self):
        """Test hatch is predicted 21 days after setting."""
        egg = EggProfile.from_incubation(4, set_at=datetime(2026, 5, 1, 8, 0))
        assert egg.predicted_hatch_at == datetime(2026, 5, 22, 8, 0)

    def test_no_prediction_for_infertile(self):
        """Test clear eggs get no hatch date."""
        egg = EggProfile.from_incubation(10, is_fertile=False, set_at=datetime(2026, 5, 1))
        assert egg.predicted_hatch_at is None

    def test_ready_to_hatch(self):
        """Test a full-term egg of unknown fertility is ready."""
        assert EggProfile.from_incubation(21).is_ready_to_hatch
        assert not EggProfile.from_incubation(20).is_ready_to_hatch

    def test_to_dict(self):
        """Test serialization."""
        data = EggProfile.from_incubation(10, shell_color=ShellColor.TINTED).to_dict()
        assert data["shell_color"] == "TINTED"
        assert data["candling_result"] == "VEINS_VISIBLE"
        assert data["predicted_hatch_at"] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
