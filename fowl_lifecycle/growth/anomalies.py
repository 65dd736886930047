"""
Fowl Lifecycle — Growth Anomalies
Flags unusual weeks in a weekly weigh-in series: stalls, spikes and losses.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence
from enum import Enum, auto
import logging
import statistics

from ..config import GROWTH

logger = logging.getLogger(__name__)


class AnomalyType(Enum):
    GROWTH_STALL = auto()
    GROWTH_SPIKE = auto()
    WEIGHT_LOSS = auto()


class Severity(Enum):
    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()


@dataclass(frozen=True)
class GrowthAnomaly:
    """One flagged week."""
    week: int
    anomaly_type: AnomalyType
    severity: Severity
    message: str
    change_grams: float
    z_score: float

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "week": self.week,
            "anomaly_type": self.anomaly_type.name,
            "severity": self.severity.name,
            "message": self.message,
            "change_grams": self.change_grams,
            "z_score": self.z_score,
        }


def detect_growth_anomalies(weights: Sequence[float]) -> List[GrowthAnomaly]:
    """
    Compare each week's gain with the series' typical gain.

    ``weights`` are weekly weigh-ins in grams, oldest first. Gains more than
    two standard deviations below the mean are stalls, more than two above
    are spikes; any other net loss is flagged on its own.
    """
    if len(weights) < 3:
        return []

    changes = [after - before for before, after in zip(weights, weights[1:])]
    mean = statistics.mean(changes)
    std_dev = statistics.pstdev(changes)

    anomalies = []
    for i, change in enumerate(changes):
        z_score = (change - mean) / std_dev if std_dev > 0 else 0.0
        week = i + 2

        if z_score < -GROWTH.anomaly_z_threshold:
            severity = Severity.HIGH if z_score < -GROWTH.severe_anomaly_z_threshold else Severity.MEDIUM
            anomalies.append(GrowthAnomaly(
                week, AnomalyType.GROWTH_STALL, severity,
                f"Unusual growth slowdown in week {week}", change, z_score,
            ))
        elif z_score > GROWTH.anomaly_z_threshold:
            anomalies.append(GrowthAnomaly(
                week, AnomalyType.GROWTH_SPIKE, Severity.LOW,
                f"Exceptional growth in week {week}", change, z_score,
            ))
        elif change < 0:
            anomalies.append(GrowthAnomaly(
                week, AnomalyType.WEIGHT_LOSS, Severity.HIGH,
                f"Weight loss detected in week {week} - check health!", change, z_score,
            ))

    if anomalies:
        logger.debug(f"Found {len(anomalies)} growth anomalies in {len(weights)} weigh-ins")
    return anomalies
