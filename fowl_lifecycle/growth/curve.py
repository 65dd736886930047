"""
Fowl Lifecycle — Growth Curve
Expected body weight by age for Aseel-type game fowl, weight evaluation
against that curve, and a short-range linear weight prediction.

Reference weights are for cocks; hens run at 72% of the cock curve.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
from enum import Enum, auto
import logging

from ..config import GROWTH

logger = logging.getLogger(__name__)


# =============================================================================
# REFERENCE DATA
# =============================================================================

# (age_days, grams) for a healthy cock, ascending by age
MALE_WEIGHT_TABLE: Tuple[Tuple[int, int], ...] = (
    (0, 35),       # Hatch
    (7, 70),
    (14, 130),
    (21, 210),
    (28, 310),
    (35, 420),
    (42, 540),     # End of chick stage
    (56, 780),
    (70, 1000),
    (84, 1180),
    (98, 1300),
    (112, 1400),   # End of grower stage
    (140, 1750),
    (168, 2100),
    (196, 2450),
    (240, 2900),   # End of sub-adult stage
    (300, 3400),
    (365, 3900),   # One year
    (420, 4250),
    (480, 4550),
    (548, 4800),
    (640, 4950),
    (730, 5000),   # Two years, fully grown
)


class WeightRating(Enum):
    """How a measured weight compares with the curve."""
    EXCELLENT = auto()
    GOOD = auto()
    FAIR = auto()
    UNDERWEIGHT = auto()
    OVERWEIGHT = auto()

    @property
    def spec(self) -> "WeightRatingSpec":
        return WEIGHT_RATING_SPECS[self]

    @property
    def display_name(self) -> str:
        return self.spec.display_name

    @property
    def emoji(self) -> str:
        return self.spec.emoji

    @property
    def score_delta(self) -> int:
        """Health score adjustment for this rating."""
        return self.spec.score_delta

    @property
    def is_anomaly(self) -> bool:
        return self in (WeightRating.UNDERWEIGHT, WeightRating.OVERWEIGHT)


@dataclass(frozen=True)
class WeightRatingSpec:
    display_name: str
    emoji: str
    score_delta: int


WEIGHT_RATING_SPECS: Dict[WeightRating, WeightRatingSpec] = {
    WeightRating.EXCELLENT: WeightRatingSpec("Excellent", "🌟", 2),
    WeightRating.GOOD: WeightRatingSpec("Good", "✅", 1),
    WeightRating.FAIR: WeightRatingSpec("Fair", "⚠️", 0),
    WeightRating.UNDERWEIGHT: WeightRatingSpec("Underweight", "📉", -1),
    WeightRating.OVERWEIGHT: WeightRatingSpec("Overweight", "📈", -1),
}


# =============================================================================
# RESULT RECORDS
# =============================================================================

@dataclass(frozen=True)
class WeightExpectation:
    """Expected weight band at one age."""
    age_days: int
    ideal_grams: int
    min_grams: int
    max_grams: int

    def to_dict(self) -> Dict:
        return {
            "age_days": self.age_days,
            "ideal_grams": self.ideal_grams,
            "min_grams": self.min_grams,
            "max_grams": self.max_grams,
        }


@dataclass(frozen=True)
class WeightEvaluation:
    """A measured weight rated against the curve."""
    actual_grams: int
    expected: WeightExpectation
    ratio: float
    rating: WeightRating
    deviation_percent: int

    def describe(self) -> str:
        """Event line for a weigh-in, e.g. "Current: 1400g, Expected: 1400g (0% deviation)"."""
        return (f"Current: {self.actual_grams}g, Expected: {self.expected.ideal_grams}g "
                f"({self.deviation_percent}% deviation)")

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "actual_grams": self.actual_grams,
            "expected": self.expected.to_dict(),
            "ratio": self.ratio,
            "rating": self.rating.name,
            "deviation_percent": self.deviation_percent,
        }


@dataclass(frozen=True)
class WeightPrediction:
    target_age_days: int
    predicted_grams: int
    confidence: float
    method: str

    def to_dict(self) -> Dict:
        return {
            "target_age_days": self.target_age_days,
            "predicted_grams": self.predicted_grams,
            "confidence": self.confidence,
            "method": self.method,
        }


# =============================================================================
# CURVE OPERATIONS
# =============================================================================

def _male_ideal(age_days: float) -> float:
    first_day, first_grams = MALE_WEIGHT_TABLE[0]
    if age_days <= first_day:
        return float(first_grams)
    for (day_a, grams_a), (day_b, grams_b) in zip(MALE_WEIGHT_TABLE, MALE_WEIGHT_TABLE[1:]):
        if age_days <= day_b:
            t = (age_days - day_a) / (day_b - day_a)
            return grams_a + (grams_b - grams_a) * t
    return float(MALE_WEIGHT_TABLE[-1][1])


def ideal_weight(age_days: int, is_male: bool = True) -> int:
    """Ideal weight in grams, linear between reference points and held at the ends."""
    grams = _male_ideal(age_days)
    if not is_male:
        grams *= GROWTH.female_weight_ratio
    return int(round(grams))


def expected_weight(age_days: int, is_male: bool = True) -> WeightExpectation:
    ideal = ideal_weight(age_days, is_male)
    return WeightExpectation(
        age_days=age_days,
        ideal_grams=ideal,
        min_grams=int(round(ideal * GROWTH.min_weight_ratio)),
        max_grams=int(round(ideal * GROWTH.max_weight_ratio)),
    )


def _rate(actual_grams: int, expected: WeightExpectation, ratio: float) -> WeightRating:
    if actual_grams < expected.min_grams:
        return WeightRating.UNDERWEIGHT
    if actual_grams > expected.max_grams:
        return WeightRating.OVERWEIGHT
    low, high = GROWTH.excellent_range
    if low <= ratio <= high:
        return WeightRating.EXCELLENT
    low, high = GROWTH.good_range
    if low <= ratio <= high:
        return WeightRating.GOOD
    return WeightRating.FAIR


def evaluate_weight(age_days: int, actual_grams: int, is_male: bool = True) -> WeightEvaluation:
    """
    Rate a weigh-in against the curve.

    Outside the 80-115% band the bird is under- or overweight. Inside it,
    within 5% of ideal is excellent and within 10% good.
    """
    expected = expected_weight(age_days, is_male)
    ratio = actual_grams / expected.ideal_grams
    rating = _rate(actual_grams, expected, ratio)
    evaluation = WeightEvaluation(
        actual_grams=actual_grams,
        expected=expected,
        ratio=ratio,
        rating=rating,
        deviation_percent=int(round((ratio - 1.0) * 100)),
    )
    if rating.is_anomaly:
        logger.info(f"{rating.emoji} {rating.display_name} at day {age_days}: {evaluation.describe()}")
    return evaluation


def generate_curve(is_male: bool = True, max_days: int = GROWTH.default_curve_max_days,
                   step_days: int = GROWTH.default_curve_step_days) -> List[WeightExpectation]:
    """Expected weights every ``step_days`` from hatch to ``max_days``."""
    if step_days <= 0:
        raise ValueError(f"step_days must be positive, got {step_days}")
    return [expected_weight(day, is_male) for day in range(0, max_days + 1, step_days)]


def predict_future_weight(current_age: int, current_weight: int, previous_weight: int,
                          previous_age: int, target_age: int,
                          is_male: bool = True) -> WeightPrediction:
    """
    Extrapolate the recent daily gain to ``target_age``.

    The prediction never falls below the current weight. Confidence drops
    as the prediction strays from the curve at the target age.
    """
    interval = current_age - previous_age
    if interval <= 0:
        logger.debug(f"Cannot predict weight at day {target_age}: no interval between weigh-ins")
        return WeightPrediction(
            target_age_days=target_age,
            predicted_grams=current_weight,
            confidence=0.0,
            method="Insufficient data",
        )

    daily_gain = (current_weight - previous_weight) / interval
    horizon = target_age - current_age
    predicted = max(current_weight, int(round(current_weight + daily_gain * horizon)))

    # Trust the trend less the further it lands from the curve
    target_ideal = ideal_weight(target_age, is_male)
    confidence = 1.0 - abs(predicted - target_ideal) / target_ideal
    confidence = max(GROWTH.min_confidence, min(GROWTH.max_confidence, confidence))

    return WeightPrediction(
        target_age_days=target_age,
        predicted_grams=predicted,
        confidence=confidence,
        method="Linear trend",
    )


class GrowthCurve:
    """Entry point gathering the growth curve operations."""

    ideal_weight = staticmethod(ideal_weight)
    expected_weight = staticmethod(expected_weight)
    evaluate_weight = staticmethod(evaluate_weight)
    generate_curve = staticmethod(generate_curve)
    predict_future_weight = staticmethod(predict_future_weight)
