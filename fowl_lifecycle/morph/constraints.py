"""
Fowl Lifecycle — Morph Constraints
Stage-based min/max/default envelopes for every morph slider, plus the part
styles each stage allows. A chick cannot have full hackles or large spurs.

The table is fixed domain data: one record per (stage, sex), sixteen in all,
stored in a tuple indexed by ``stage.index * 2 + int(is_male)``.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple, TypeVar
import logging

from ..core.stage import BiologicalStage
from ..core.appearance import (
    MORPH_FIELDS,
    BodySize,
    BreastShape,
    CombStyle,
    NailStyle,
    NeckStyle,
    Sheen,
    Stance,
    TailStyle,
    WattleStyle,
)

logger = logging.getLogger(__name__)

# Float slack when checking interpolated ranges
_TOLERANCE = 1e-9

E = TypeVar("E")


# =============================================================================
# EXCEPTIONS
# =============================================================================

class MorphRangeError(ValueError):
    """A morph range whose default lies outside [min, max]."""
    pass


class ConstraintTableError(Exception):
    """The stage constraint table is missing or misplaces a (stage, sex) record."""
    pass


# =============================================================================
# RANGES
# =============================================================================

@dataclass(frozen=True)
class MorphRange:
    """Allowed slider interval for one morph dimension, with its auto default."""
    min_value: float
    max_value: float
    default_value: float

    def __post_init__(self):
        if not (self.min_value - _TOLERANCE <= self.default_value <= self.max_value + _TOLERANCE):
            raise MorphRangeError(
                f"default {self.default_value} outside [{self.min_value}, {self.max_value}]"
            )

    def clamp(self, value: float) -> float:
        """Clamp a user value into the allowed range."""
        return max(self.min_value, min(self.max_value, value))

    def interpolate(self, factor: float) -> float:
        """Point between min and max for a 0-1 factor."""
        factor = max(0.0, min(1.0, factor))
        return self.min_value + (self.max_value - self.min_value) * factor

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value

    def to_dict(self) -> Dict[str, float]:
        return {"min": self.min_value, "max": self.max_value, "default": self.default_value}


def _lerp(a: MorphRange, b: MorphRange, t: float) -> MorphRange:
    return MorphRange(
        min_value=a.min_value + (b.min_value - a.min_value) * t,
        max_value=a.max_value + (b.max_value - a.max_value) * t,
        default_value=a.default_value + (b.default_value - a.default_value) * t,
    )


# =============================================================================
# STAGE ENVELOPE
# =============================================================================

@dataclass(frozen=True)
class StageMorphConstraints:
    """Complete constraint envelope for one stage and sex."""
    stage: BiologicalStage
    is_male: bool

    # Morph slider ranges
    body_width: MorphRange
    body_roundness: MorphRange
    leg_length: MorphRange
    leg_thickness: MorphRange
    tail_length: MorphRange
    tail_angle: MorphRange
    tail_spread: MorphRange
    comb_size: MorphRange
    beak_scale: MorphRange
    beak_curvature: MorphRange
    neck_length: MorphRange
    neck_thickness: MorphRange
    chest_depth: MorphRange
    hackle_length: MorphRange
    spur_size: MorphRange
    bone_thickness: MorphRange
    feather_density: MorphRange

    # Part styles valid at this stage (ordered; first is the fallback)
    allowed_combs: Tuple[CombStyle, ...]
    allowed_tails: Tuple[TailStyle, ...]
    allowed_nails: Tuple[NailStyle, ...]
    allowed_wattles: Tuple[WattleStyle, ...]
    allowed_stances: Tuple[Stance, ...]
    allowed_sheens: Tuple[Sheen, ...]
    allowed_necks: Tuple[NeckStyle, ...]
    allowed_breasts: Tuple[BreastShape, ...]

    # Suggested picks for automatic mode
    default_body_size: BodySize
    default_stance: Stance
    default_sheen: Sheen
    default_feather_texture: str  # "Fluff", "Soft", "Developing", "Medium", "Hard", "Peak", "Dulling"

    def ranges(self) -> Dict[str, MorphRange]:
        """The 17 morph ranges by field name."""
        return {name: getattr(self, name) for name in MORPH_FIELDS}

    def allowed_sets(self) -> Dict[str, tuple]:
        """Allowed part styles keyed by the appearance field they govern."""
        return {
            appearance_field: getattr(self, constraint_field)
            for appearance_field, constraint_field in CATEGORICAL_CONSTRAINTS.items()
        }

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        result = {
            "stage": self.stage.name,
            "is_male": self.is_male,
            "default_body_size": self.default_body_size.name,
            "default_stance": self.default_stance.name,
            "default_sheen": self.default_sheen.name,
            "default_feather_texture": self.default_feather_texture,
        }
        for name, morph_range in self.ranges().items():
            result[name] = morph_range.to_dict()
        for name, allowed in self.allowed_sets().items():
            result[f"allowed_{name}"] = [value.name for value in allowed]
        return result


# Appearance field -> constraint field holding its allowed styles
CATEGORICAL_CONSTRAINTS: Dict[str, str] = {
    "comb": "allowed_combs",
    "tail": "allowed_tails",
    "nails": "allowed_nails",
    "wattle": "allowed_wattles",
    "stance": "allowed_stances",
    "sheen": "allowed_sheens",
    "neck": "allowed_necks",
    "breast": "allowed_breasts",
}


def preserve_or_default(current: E, allowed: Tuple[E, ...], fallback: E) -> E:
    """Keep ``current`` if the stage still allows it, otherwise use ``fallback``."""
    return current if current in allowed else fallback


# =============================================================================
# LOOKUP & INTERPOLATION
# =============================================================================

def for_stage(stage: BiologicalStage, is_male: bool = True) -> StageMorphConstraints:
    """Constraint envelope for a stage and sex."""
    return _CONSTRAINT_TABLE[_slot(stage, is_male)]


def interpolate(source: StageMorphConstraints, target: StageMorphConstraints,
                progress: float) -> StageMorphConstraints:
    """
    Blend two envelopes for smooth transitions.

    Numeric ranges move linearly from ``source`` (progress 0) to ``target``
    (progress 1). Allowed styles, default picks and the texture label are
    taken from ``target`` unchanged: sliders glide, style choices switch.
    """
    p = max(0.0, min(1.0, progress))
    blended = {
        name: _lerp(getattr(source, name), getattr(target, name), p)
        for name in MORPH_FIELDS
    }
    return replace(target, **blended)


def _slot(stage: BiologicalStage, is_male: bool) -> int:
    return stage.index * 2 + int(is_male)


# =============================================================================
# STAGE CONSTRAINT DEFINITIONS
# =============================================================================

def _fixed(lo: float, hi: float, default: float) -> MorphRange:
    return MorphRange(lo, hi, default)


def _sexed(is_male: bool, lo: float, hi: float,
           male_default: float, female_default: float) -> MorphRange:
    """
    Range shared by both sexes with a per-sex default.

    Hens can sit below the rooster floor (no spurs, short hackles), so the
    floor drops to the hen default when needed.
    """
    default = male_default if is_male else female_default
    return MorphRange(min(lo, default), max(hi, default), default)


_ALL_COMBS = tuple(CombStyle)
_ALL_TAILS = tuple(TailStyle)
_ALL_NAILS = tuple(NailStyle)
_ALL_WATTLES = tuple(WattleStyle)
_ALL_STANCES = tuple(Stance)
_ALL_SHEENS = tuple(Sheen)
_ALL_NECKS = tuple(NeckStyle)
_ALL_BREASTS = tuple(BreastShape)


# 🥚 EGG: shell only, no bird morphology
def _egg(is_male: bool) -> StageMorphConstraints:
    zero = MorphRange(0.0, 0.0, 0.0)
    return StageMorphConstraints(
        BiologicalStage.EGG, is_male,
        **{name: zero for name in MORPH_FIELDS},
        allowed_combs=(CombStyle.NONE,),
        allowed_tails=(TailStyle.NONE,),
        allowed_nails=(NailStyle.NONE,),
        allowed_wattles=(WattleStyle.NONE,),
        allowed_stances=(Stance.NORMAL,),
        allowed_sheens=(Sheen.MATTE,),
        allowed_necks=(NeckStyle.SHORT,),
        allowed_breasts=(BreastShape.ROUND,),
        default_body_size=BodySize.TINY,
        default_stance=Stance.NORMAL,
        default_sheen=Sheen.MATTE,
        default_feather_texture="None",
    )


# 🐣 HATCHLING (0-7 days): oversized head and puffy down
def _hatchling(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.HATCHLING, is_male,
        body_width=_fixed(0.3, 0.5, 0.4),
        body_roundness=_fixed(0.7, 1.0, 0.9),
        leg_length=_fixed(0.1, 0.25, 0.2),
        leg_thickness=_fixed(0.2, 0.4, 0.3),
        tail_length=_fixed(0.0, 0.05, 0.0),
        tail_angle=_fixed(0.3, 0.5, 0.4),
        tail_spread=_fixed(0.0, 0.1, 0.0),
        comb_size=_fixed(0.0, 0.02, 0.0),
        beak_scale=_fixed(0.2, 0.35, 0.25),
        beak_curvature=_fixed(0.3, 0.5, 0.4),
        neck_length=_fixed(0.1, 0.3, 0.2),
        neck_thickness=_fixed(0.2, 0.4, 0.3),
        chest_depth=_fixed(0.1, 0.2, 0.15),
        hackle_length=_fixed(0.0, 0.0, 0.0),
        spur_size=_fixed(0.0, 0.0, 0.0),
        bone_thickness=_fixed(0.1, 0.2, 0.15),
        feather_density=_fixed(0.0, 0.1, 0.05),  # Down only
        allowed_combs=(CombStyle.NONE,),
        allowed_tails=(TailStyle.NONE, TailStyle.SHORT),
        allowed_nails=(NailStyle.NONE, NailStyle.SHORT),
        allowed_wattles=(WattleStyle.NONE,),
        allowed_stances=(Stance.NORMAL, Stance.LOW),
        allowed_sheens=(Sheen.MATTE,),
        allowed_necks=(NeckStyle.SHORT,),
        allowed_breasts=(BreastShape.ROUND,),
        default_body_size=BodySize.TINY,
        default_stance=Stance.LOW,
        default_sheen=Sheen.MATTE,
        default_feather_texture="Fluff",
    )


# 🐥 CHICK (1-6 weeks): legs growing, first feathers
def _chick(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.CHICK, is_male,
        body_width=_fixed(0.3, 0.5, 0.35),
        body_roundness=_fixed(0.4, 0.7, 0.6),
        leg_length=_fixed(0.25, 0.45, 0.4),
        leg_thickness=_fixed(0.25, 0.4, 0.3),
        tail_length=_fixed(0.05, 0.25, 0.15),
        tail_angle=_fixed(0.3, 0.5, 0.4),
        tail_spread=_fixed(0.05, 0.2, 0.1),
        comb_size=_fixed(0.0, 0.12, 0.05),
        beak_scale=_fixed(0.25, 0.4, 0.3),
        beak_curvature=_fixed(0.3, 0.5, 0.4),
        neck_length=_fixed(0.2, 0.4, 0.3),
        neck_thickness=_fixed(0.2, 0.4, 0.3),
        chest_depth=_fixed(0.1, 0.25, 0.15),
        hackle_length=_fixed(0.0, 0.05, 0.0),
        spur_size=_fixed(0.0, 0.0, 0.0),
        bone_thickness=_fixed(0.15, 0.3, 0.2),
        feather_density=_fixed(0.1, 0.35, 0.2),
        allowed_combs=(CombStyle.NONE, CombStyle.PEA),
        allowed_tails=(TailStyle.NONE, TailStyle.SHORT),
        allowed_nails=(NailStyle.NONE, NailStyle.SHORT),
        allowed_wattles=(WattleStyle.NONE, WattleStyle.SMALL),
        allowed_stances=(Stance.NORMAL, Stance.LOW),
        allowed_sheens=(Sheen.MATTE,),
        allowed_necks=(NeckStyle.SHORT, NeckStyle.MEDIUM),
        allowed_breasts=(BreastShape.ROUND, BreastShape.FLAT),
        default_body_size=BodySize.BANTAM,
        default_stance=Stance.NORMAL,
        default_sheen=Sheen.MATTE,
        default_feather_texture="Soft",
    )


# 🐤 GROWER (6-16 weeks): lanky legs and patchy feathers
def _grower(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.GROWER, is_male,
        body_width=_fixed(0.3, 0.5, 0.35),
        body_roundness=_fixed(0.2, 0.5, 0.35),
        leg_length=_fixed(0.45, 0.7, 0.6),
        leg_thickness=_fixed(0.3, 0.5, 0.35),
        tail_length=_fixed(0.2, 0.45, 0.35),
        tail_angle=_fixed(0.3, 0.6, 0.45),
        tail_spread=_fixed(0.1, 0.3, 0.2),
        comb_size=_fixed(0.05, 0.25, 0.12),
        beak_scale=_fixed(0.3, 0.5, 0.4),
        beak_curvature=_fixed(0.3, 0.55, 0.45),
        neck_length=_fixed(0.35, 0.6, 0.5),
        neck_thickness=_fixed(0.25, 0.45, 0.3),
        chest_depth=_fixed(0.15, 0.35, 0.25),
        hackle_length=_fixed(0.0, 0.15, 0.05),  # Barely visible
        spur_size=_fixed(0.0, 0.05, 0.0),
        bone_thickness=_fixed(0.2, 0.4, 0.3),
        feather_density=_fixed(0.25, 0.55, 0.4),
        allowed_combs=(CombStyle.NONE, CombStyle.PEA, CombStyle.SINGLE, CombStyle.WALNUT),
        allowed_tails=(TailStyle.SHORT, TailStyle.SICKLE),
        allowed_nails=(NailStyle.SHORT,),
        allowed_wattles=(WattleStyle.NONE, WattleStyle.SMALL),
        allowed_stances=(Stance.NORMAL, Stance.UPRIGHT),
        allowed_sheens=(Sheen.MATTE, Sheen.SATIN),
        allowed_necks=(NeckStyle.SHORT, NeckStyle.MEDIUM, NeckStyle.LONG),
        allowed_breasts=(BreastShape.FLAT, BreastShape.ROUND),
        default_body_size=BodySize.SMALL,
        default_stance=Stance.NORMAL,
        default_sheen=Sheen.MATTE,
        default_feather_texture="Developing",
    )


# 🐔 SUB-ADULT (4-8 months): hackles and sickles forming
def _sub_adult(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.SUB_ADULT, is_male,
        body_width=_sexed(is_male, 0.35, 0.6, 0.45, 0.4),
        body_roundness=_fixed(0.25, 0.5, 0.35),
        leg_length=_fixed(0.5, 0.75, 0.65),
        leg_thickness=_sexed(is_male, 0.35, 0.6, 0.5, 0.4),
        tail_length=_sexed(is_male, 0.3, 0.65, 0.55, 0.4),
        tail_angle=_fixed(0.35, 0.65, 0.5),
        tail_spread=_fixed(0.2, 0.4, 0.3),
        comb_size=_sexed(is_male, 0.1, 0.4, 0.3, 0.15),
        beak_scale=_fixed(0.35, 0.55, 0.45),
        beak_curvature=_fixed(0.35, 0.6, 0.5),
        neck_length=_fixed(0.45, 0.7, 0.6),
        neck_thickness=_sexed(is_male, 0.35, 0.55, 0.5, 0.4),
        chest_depth=_sexed(is_male, 0.3, 0.55, 0.45, 0.35),
        hackle_length=_sexed(is_male, 0.1, 0.65, 0.5, 0.1),
        spur_size=_sexed(is_male, 0.0, 0.3, 0.15, 0.0),
        bone_thickness=_fixed(0.3, 0.55, 0.4),
        feather_density=_fixed(0.45, 0.75, 0.6),
        allowed_combs=_ALL_COMBS,
        allowed_tails=_ALL_TAILS,
        allowed_nails=_ALL_NAILS,
        allowed_wattles=_ALL_WATTLES,
        allowed_stances=_ALL_STANCES,
        allowed_sheens=(Sheen.MATTE, Sheen.SATIN, Sheen.GLOSSY),
        allowed_necks=_ALL_NECKS,
        allowed_breasts=_ALL_BREASTS,
        default_body_size=BodySize.MEDIUM,
        default_stance=Stance.UPRIGHT if is_male else Stance.NORMAL,
        default_sheen=Sheen.SATIN,
        default_feather_texture="Medium",
    )


# 🐓 ADULT (8-12 months): hard feather, spurs visible
def _adult(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.ADULT, is_male,
        body_width=_sexed(is_male, 0.4, 0.7, 0.55, 0.45),
        body_roundness=_fixed(0.25, 0.5, 0.35),
        leg_length=_fixed(0.55, 0.8, 0.7),
        leg_thickness=_sexed(is_male, 0.4, 0.7, 0.6, 0.45),
        tail_length=_sexed(is_male, 0.4, 0.8, 0.7, 0.45),
        tail_angle=_fixed(0.4, 0.7, 0.55),
        tail_spread=_fixed(0.25, 0.55, 0.4),
        comb_size=_sexed(is_male, 0.2, 0.6, 0.5, 0.25),
        beak_scale=_fixed(0.4, 0.6, 0.5),
        beak_curvature=_fixed(0.4, 0.65, 0.55),
        neck_length=_fixed(0.5, 0.8, 0.65),
        neck_thickness=_sexed(is_male, 0.4, 0.7, 0.6, 0.45),
        chest_depth=_sexed(is_male, 0.45, 0.75, 0.65, 0.5),
        hackle_length=_sexed(is_male, 0.3, 0.85, 0.75, 0.15),
        spur_size=_sexed(is_male, 0.1, 0.6, 0.45, 0.0),
        bone_thickness=_fixed(0.4, 0.7, 0.55),
        feather_density=_fixed(0.6, 0.85, 0.75),
        allowed_combs=_ALL_COMBS,
        allowed_tails=_ALL_TAILS,
        allowed_nails=_ALL_NAILS,
        allowed_wattles=_ALL_WATTLES,
        allowed_stances=_ALL_STANCES,
        allowed_sheens=_ALL_SHEENS,
        allowed_necks=_ALL_NECKS,
        allowed_breasts=_ALL_BREASTS,
        default_body_size=BodySize.LARGE if is_male else BodySize.MEDIUM,
        default_stance=Stance.GAME_READY if is_male else Stance.NORMAL,
        default_sheen=Sheen.GLOSSY,
        default_feather_texture="Hard",
    )


# 🏆 MATURE ADULT (12-24 months): peak form
def _mature_adult(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.MATURE_ADULT, is_male,
        body_width=_sexed(is_male, 0.5, 0.8, 0.65, 0.5),
        body_roundness=_fixed(0.2, 0.5, 0.3),
        leg_length=_fixed(0.6, 0.85, 0.75),
        leg_thickness=_sexed(is_male, 0.5, 0.8, 0.7, 0.5),
        tail_length=_sexed(is_male, 0.5, 0.9, 0.8, 0.5),
        tail_angle=_fixed(0.45, 0.75, 0.6),
        tail_spread=_fixed(0.3, 0.6, 0.45),
        comb_size=_sexed(is_male, 0.3, 0.7, 0.55, 0.3),
        beak_scale=_fixed(0.45, 0.65, 0.55),
        beak_curvature=_fixed(0.45, 0.7, 0.6),
        neck_length=_fixed(0.55, 0.85, 0.7),
        neck_thickness=_sexed(is_male, 0.55, 0.85, 0.75, 0.55),
        chest_depth=_sexed(is_male, 0.55, 0.85, 0.8, 0.6),
        hackle_length=_sexed(is_male, 0.5, 1.0, 0.9, 0.2),
        spur_size=_sexed(is_male, 0.3, 0.85, 0.75, 0.0),
        bone_thickness=_fixed(0.55, 0.85, 0.75),
        feather_density=_fixed(0.75, 1.0, 0.9),
        allowed_combs=_ALL_COMBS,
        allowed_tails=_ALL_TAILS,
        allowed_nails=_ALL_NAILS,
        allowed_wattles=_ALL_WATTLES,
        allowed_stances=_ALL_STANCES,
        allowed_sheens=_ALL_SHEENS,
        allowed_necks=_ALL_NECKS,
        allowed_breasts=_ALL_BREASTS,
        default_body_size=BodySize.LARGE if is_male else BodySize.MEDIUM,
        default_stance=Stance.GAME_READY if is_male else Stance.NORMAL,
        default_sheen=Sheen.IRIDESCENT if is_male else Sheen.GLOSSY,
        default_feather_texture="Peak",
    )


# 🦅 SENIOR (2+ years): slight dulling and very thick spurs
def _senior(is_male: bool) -> StageMorphConstraints:
    return StageMorphConstraints(
        BiologicalStage.SENIOR, is_male,
        body_width=_sexed(is_male, 0.5, 0.8, 0.65, 0.5),
        body_roundness=_fixed(0.25, 0.55, 0.4),
        leg_length=_fixed(0.6, 0.85, 0.72),
        leg_thickness=_sexed(is_male, 0.55, 0.85, 0.75, 0.55),
        tail_length=_sexed(is_male, 0.45, 0.85, 0.72, 0.45),
        tail_angle=_fixed(0.4, 0.7, 0.55),
        tail_spread=_fixed(0.25, 0.55, 0.4),
        comb_size=_sexed(is_male, 0.25, 0.65, 0.5, 0.3),
        beak_scale=_fixed(0.45, 0.65, 0.55),
        beak_curvature=_fixed(0.45, 0.7, 0.6),
        neck_length=_fixed(0.55, 0.85, 0.7),
        neck_thickness=_sexed(is_male, 0.6, 0.9, 0.8, 0.6),
        chest_depth=_sexed(is_male, 0.5, 0.8, 0.7, 0.55),
        hackle_length=_sexed(is_male, 0.4, 0.9, 0.8, 0.15),
        spur_size=_sexed(is_male, 0.5, 1.0, 0.85, 0.0),
        bone_thickness=_fixed(0.6, 0.9, 0.8),
        feather_density=_fixed(0.6, 0.9, 0.75),
        allowed_combs=_ALL_COMBS,
        allowed_tails=_ALL_TAILS,
        allowed_nails=_ALL_NAILS,
        allowed_wattles=_ALL_WATTLES,
        allowed_stances=_ALL_STANCES,
        allowed_sheens=(Sheen.MATTE, Sheen.SATIN, Sheen.GLOSSY, Sheen.METALLIC),  # No iridescent
        allowed_necks=_ALL_NECKS,
        allowed_breasts=_ALL_BREASTS,
        default_body_size=BodySize.LARGE if is_male else BodySize.MEDIUM,
        default_stance=Stance.NORMAL,
        default_sheen=Sheen.GLOSSY,
        default_feather_texture="Dulling",
    )


_STAGE_BUILDERS = {
    BiologicalStage.EGG: _egg,
    BiologicalStage.HATCHLING: _hatchling,
    BiologicalStage.CHICK: _chick,
    BiologicalStage.GROWER: _grower,
    BiologicalStage.SUB_ADULT: _sub_adult,
    BiologicalStage.ADULT: _adult,
    BiologicalStage.MATURE_ADULT: _mature_adult,
    BiologicalStage.SENIOR: _senior,
}


def _build_table() -> Tuple[StageMorphConstraints, ...]:
    """Build all sixteen envelopes and check every slot holds its own (stage, sex)."""
    table = tuple(
        _STAGE_BUILDERS[stage](is_male)
        for stage in BiologicalStage.ordered()
        for is_male in (False, True)
    )
    expected = len(BiologicalStage) * 2
    if len(table) != expected:
        raise ConstraintTableError(f"Expected {expected} constraint records, built {len(table)}")
    for slot, record in enumerate(table):
        if _slot(record.stage, record.is_male) != slot:
            raise ConstraintTableError(
                f"Slot {slot} holds {record.stage.name}/{'male' if record.is_male else 'female'}"
            )
    return table


_CONSTRAINT_TABLE = _build_table()
