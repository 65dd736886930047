"""
Fowl Lifecycle — Core Module
Stages, age profiles, egg incubation state and the appearance value.
"""

from .stage import BiologicalStage, GrowthMode, StageSpec, STAGE_SPECS, iter_hatched_stages
from .age_profile import AgeProfile
from .appearance import BirdAppearance, MORPH_FIELDS, MORPH_CATEGORICALS, aseel_base
from .egg import EggProfile, ShellColor, FertilityStatus, TemperatureStatus, CandlingResult

__all__ = [
    # Stage
    "BiologicalStage",
    "GrowthMode",
    "StageSpec",
    "STAGE_SPECS",
    "iter_hatched_stages",

    # Age
    "AgeProfile",

    # Appearance
    "BirdAppearance",
    "MORPH_FIELDS",
    "MORPH_CATEGORICALS",
    "aseel_base",

    # Egg
    "EggProfile",
    "ShellColor",
    "FertilityStatus",
    "TemperatureStatus",
    "CandlingResult",
]
