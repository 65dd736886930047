"""
Fowl Lifecycle — Configuration
Lifecycle thresholds, growth-curve ratios, and incubation parameters.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class LifecycleConfig:
    """Stage timing and morph-transition parameters."""

    # Maturity
    full_maturity_days: int = 390  # maturity_index == 1.0 here

    # Senior stage has no end; progress uses this span instead
    senior_progress_span_days: int = 365

    # Transition diff
    transition_delta_threshold: float = 0.1  # Default must grow by more than this

    # Automatic categorical cutoffs (progress within GROWER)
    comb_progress_cutoff: float = 0.5
    sickle_progress_cutoff: float = 0.6

    # Canonical snapshot ages for growth timelines
    timeline_key_days: Tuple[int, ...] = field(default_factory=lambda: (
        0,    # Hatchling
        3,    # Early hatchling
        7,    # End hatchling
        14,   # 2 week chick
        28,   # 4 week chick
        42,   # 6 weeks (grower start)
        63,   # 9 weeks
        84,   # 12 weeks
        112,  # 16 weeks (sub-adult)
        150,  # ~5 months
        180,  # 6 months
        210,  # 7 months
        240,  # 8 months (adult)
        300,  # 10 months
        365,  # 12 months (mature)
        455,  # 15 months
        548,  # 18 months
        730,  # 2 years (senior)
    ))


@dataclass
class GrowthConfig:
    """Breed growth-curve parameters (Aseel reference breed)."""

    # Hens are not tabulated separately
    female_weight_ratio: float = 0.72

    # Healthy weight envelope around the ideal
    min_weight_ratio: float = 0.80
    max_weight_ratio: float = 1.15

    # Rating bands (distance of actual/ideal from 1.0)
    excellent_band: float = 0.05
    good_band: float = 0.10

    # Prediction confidence is never certain, never worthless
    min_confidence: float = 0.3
    max_confidence: float = 0.95

    # Curve sampling
    default_curve_max_days: int = 730
    default_curve_step_days: int = 7

    # Weekly weight anomaly detection (z-scores)
    anomaly_z_threshold: float = 2.0
    severe_anomaly_z_threshold: float = 3.0

    @property
    def excellent_range(self) -> Tuple[float, float]:
        return (1.0 - self.excellent_band, 1.0 + self.excellent_band)

    @property
    def good_range(self) -> Tuple[float, float]:
        return (1.0 - self.good_band, 1.0 + self.good_band)


@dataclass
class IncubationConfig:
    """
    Incubation parameters.

    Chicken eggs hatch after 21 days:
    - Candling from day 7 (veins visible in fertile eggs)
    - Embryo clearly developing from day 14
    - Lockdown (no turning, raised humidity) from day 18
    """
    incubation_days: int = 21
    candling_day: int = 7
    embryo_day: int = 14
    lockdown_day: int = 18

    # Hatch rates
    base_hatch_rate: float = 0.75     # Fertility not yet confirmed
    fertile_hatch_rate: float = 0.90  # Candled and confirmed fertile
    off_band_penalty: float = 0.7     # Multiplier when temperature is wrong

    # Forced-air incubator band
    temperature_min_c: float = 37.2
    temperature_max_c: float = 38.0


# Default configurations
LIFECYCLE = LifecycleConfig()
GROWTH = GrowthConfig()
INCUBATION = IncubationConfig()
