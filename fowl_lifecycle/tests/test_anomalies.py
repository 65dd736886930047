"""
Tests for weekly growth anomaly detection.
"""

import pytest
from fowl_lifecycle.growth.anomalies import (
    AnomalyType,
    Severity,
    detect_growth_anomalies,
)


class TestGrowthAnomalies:
    """Tests for stalls, spikes and weight loss."""

    def test_too_few_weights(self):
        """Test fewer than three weigh-ins gives nothing."""
        assert detect_growth_anomalies([]) == []
        assert detect_growth_anomalies([100, 200]) == []

    def test_steady_growth(self):
        """Test even gains raise no anomalies."""
        assert detect_growth_anomalies([100, 200, 300, 400, 500]) == []

    def test_flat_series(self):
        """Test a flat series has no spread and no anomalies."""
        assert detect_growth_anomalies([500, 500, 500, 500]) == []

    def test_moderate_stall(self):
        """Test a stall between two and three deviations is MEDIUM."""
        anomalies = detect_growth_anomalies([0, 100, 200, 300, 400, 500, 510])
        assert len(anomalies) == 1
        stall = anomalies[0]
        assert stall.anomaly_type == AnomalyType.GROWTH_STALL
        assert stall.severity == Severity.MEDIUM
        assert stall.week == 7
        assert stall.message == "Unusual growth slowdown in week 7"
        assert stall.z_score == pytest.approx(-2.236, abs=0.01)

    def test_severe_stall(self):
        """Test a stall beyond three deviations is HIGH."""
        weights = [i * 100 for i in range(11)] + [1010]
        anomalies = detect_growth_anomalies(weights)
        assert len(anomalies) == 1
        assert anomalies[0].anomaly_type == AnomalyType.GROWTH_STALL
        assert anomalies[0].severity == Severity.HIGH
        assert anomalies[0].week == 12

    def test_spike(self):
        """Test an exceptional gain is a LOW spike."""
        anomalies = detect_growth_anomalies([0, 100, 200, 300, 400, 500, 690])
        assert len(anomalies) == 1
        spike = anomalies[0]
        assert spike.anomaly_type == AnomalyType.GROWTH_SPIKE
        assert spike.severity == Severity.LOW
        assert spike.message == "Exceptional growth in week 7"

    def test_weight_loss(self):
        """Test any other net loss is flagged HIGH."""
        anomalies = detect_growth_anomalies([1000, 1100, 1200, 1180, 1280, 1380])
        assert len(anomalies) == 1
        loss = anomalies[0]
        assert loss.anomaly_type == AnomalyType.WEIGHT_LOSS
        assert loss.severity == Severity.HIGH
        assert loss.week == 4
        assert loss.change_grams == -20
        assert loss.message == "Weight loss detected in week 4 - check health!"

    def test_to_dict(self):
        """Test serialization."""
        data = detect_growth_anomalies([1000, 1100, 1200, 1180, 1280, 1380])[0].to_dict()
        assert data["anomaly_type"] == "WEIGHT_LOSS"
        assert data["severity"] == "HIGH"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
