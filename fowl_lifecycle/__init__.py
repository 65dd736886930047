"""
Fowl Lifecycle — Progressive Morphological Lifecycle Engine
Age-driven appearance, growth curve and incubation model for game fowl.

Given a bird's age, sex and growth mode, the engine classifies its biological
stage, blends the stage's morph envelope toward the next stage, and returns an
age-appropriate copy of the bird's appearance for a renderer to draw.
"""

__version__ = "1.0.0"

from .config import (
    LIFECYCLE,
    GROWTH,
    INCUBATION,
    LifecycleConfig,
    GrowthConfig,
    IncubationConfig,
)

from .core import (
    BiologicalStage,
    GrowthMode,
    AgeProfile,
    BirdAppearance,
    EggProfile,
    aseel_base,
)

from .morph import (
    MorphRange,
    MorphRangeError,
    StageMorphConstraints,
    LifecycleMorphEngine,
    GrowthSnapshot,
    MorphSummary,
    MorphChange,
)

from .growth import (
    GrowthCurve,
    WeightRating,
    WeightExpectation,
    WeightEvaluation,
    WeightPrediction,
    GrowthAnomaly,
    detect_growth_anomalies,
)

__all__ = [
    # Config
    "LIFECYCLE",
    "GROWTH",
    "INCUBATION",
    "LifecycleConfig",
    "GrowthConfig",
    "IncubationConfig",

    # Core
    "BiologicalStage",
    "GrowthMode",
    "AgeProfile",
    "BirdAppearance",
    "EggProfile",
    "aseel_base",

    # Morph
    "MorphRange",
    "MorphRangeError",
    "StageMorphConstraints",
    "LifecycleMorphEngine",
    "GrowthSnapshot",
    "MorphSummary",
    "MorphChange",

    # Growth
    "GrowthCurve",
    "WeightRating",
    "WeightExpectation",
    "WeightEvaluation",
    "WeightPrediction",
    "GrowthAnomaly",
    "detect_growth_anomalies",
]
