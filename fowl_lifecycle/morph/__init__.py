"""
Fowl Lifecycle — Morph Module
Stage constraint envelopes and the lifecycle morph engine.
"""

from .constraints import (
    MorphRange,
    MorphRangeError,
    ConstraintTableError,
    StageMorphConstraints,
    for_stage,
    interpolate,
    preserve_or_default,
)
from .engine import (
    LifecycleMorphEngine,
    GrowthSnapshot,
    MorphSummary,
    MorphChange,
    smoothstep,
)

__all__ = [
    # Constraints
    "MorphRange",
    "MorphRangeError",
    "ConstraintTableError",
    "StageMorphConstraints",
    "for_stage",
    "interpolate",
    "preserve_or_default",

    # Engine
    "LifecycleMorphEngine",
    "GrowthSnapshot",
    "MorphSummary",
    "MorphChange",
    "smoothstep",
]
