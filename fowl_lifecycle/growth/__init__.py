"""
Fowl Lifecycle — Growth Module
Weight curve, weigh-in evaluation, prediction and anomaly detection.
"""

from .curve import (
    GrowthCurve,
    WeightRating,
    WeightExpectation,
    WeightEvaluation,
    WeightPrediction,
    MALE_WEIGHT_TABLE,
)
from .anomalies import AnomalyType, Severity, GrowthAnomaly, detect_growth_anomalies

__all__ = [
    "GrowthCurve",
    "WeightRating",
    "WeightExpectation",
    "WeightEvaluation",
    "WeightPrediction",
    "MALE_WEIGHT_TABLE",
    "AnomalyType",
    "Severity",
    "GrowthAnomaly",
    "detect_growth_anomalies",
]
