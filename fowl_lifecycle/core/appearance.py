"""
Fowl Lifecycle — Bird Appearance
The rendering layer's appearance value: continuous morph sliders, categorical
part styles, and colors. The lifecycle engine reads it and returns copies.
"""

from dataclasses import dataclass, fields, replace
from typing import Dict, Tuple
from enum import Enum, auto


# =============================================================================
# PART STYLES
# =============================================================================

class CombStyle(Enum):
    """Comb shapes."""
    SINGLE = auto()      # Upright serrated
    ROSE = auto()        # Flat, fleshy, bumpy
    PEA = auto()         # Three low ridges (Aseel)
    WALNUT = auto()      # Round bumpy
    BUTTERCUP = auto()   # Cup-shaped with points
    V_SHAPED = auto()    # Two horn-like points
    STRAWBERRY = auto()  # Low rounded
    NONE = auto()        # Young chicks


class TailStyle(Enum):
    """Tail carriage and feathering."""
    SHORT = auto()
    SICKLE = auto()       # Standard rooster sickles
    LONG_SICKLE = auto()
    FAN = auto()
    SQUIRREL = auto()
    WHIP = auto()
    NONE = auto()         # Hatchlings, rumpless


class NailStyle(Enum):
    """Nails and spurs."""
    SHORT = auto()
    LONG_SPUR = auto()
    DOUBLE_SPUR = auto()
    CURVED = auto()       # Curved fighting spur
    NONE = auto()


class WattleStyle(Enum):
    NONE = auto()
    SMALL = auto()
    MEDIUM = auto()
    LARGE = auto()
    PENDULOUS = auto()


class Stance(Enum):
    """Body posture."""
    NORMAL = auto()
    LOW = auto()
    UPRIGHT = auto()
    GAME_READY = auto()
    DISPLAY = auto()
    CROUCHING = auto()


class Sheen(Enum):
    """Feather surface finish."""
    MATTE = auto()
    SATIN = auto()
    GLOSSY = auto()
    IRIDESCENT = auto()
    METALLIC = auto()
    SILKY = auto()


class NeckStyle(Enum):
    SHORT = auto()
    MEDIUM = auto()
    LONG = auto()
    ARCHED = auto()
    MUSCULAR = auto()
    HACKLE_HEAVY = auto()


class BreastShape(Enum):
    ROUND = auto()
    FLAT = auto()
    DEEP = auto()
    BROAD = auto()
    PUFFED = auto()


class BackStyle(Enum):
    SMOOTH = auto()   # Sleek, close feathering
    HACKLE = auto()   # Flowing neck/saddle hackle
    SADDLE = auto()   # Prominent saddle feathers
    CUSHION = auto()  # Rounded, puffy back


class LegStyle(Enum):
    CLEAN = auto()
    FEATHERED = auto()
    HEAVILY_FEATHERED = auto()
    SPURRED = auto()
    BOOTED = auto()


class WingStyle(Enum):
    FOLDED = auto()
    SPREAD = auto()
    CLIPPED = auto()
    ANGEL = auto()
    TIGHT = auto()    # Very tight to body (game bird)


class BodySize(Enum):
    TINY = auto()
    BANTAM = auto()
    SMALL = auto()
    MEDIUM = auto()
    LARGE = auto()
    XLARGE = auto()


class BeakStyle(Enum):
    SHORT = auto()
    MEDIUM = auto()
    LONG = auto()
    HOOKED = auto()
    CURVED = auto()


class EyeColor(Enum):
    ORANGE = auto()
    RED = auto()
    PEARL = auto()
    BAY = auto()
    DARK = auto()
    YELLOW = auto()


class PartColor(Enum):
    """Part colors with their sRGB hex."""
    WHITE = "FAFAFA"
    CREAM = "FFF8E1"
    BUFF = "FFCC80"
    GOLD = "FFB300"
    RED = "E53935"
    DARK_RED = "B71C1C"
    MAHOGANY = "6D4C41"
    BROWN = "8D6E63"
    BLACK = "212121"
    GREEN_BLACK = "1B5E20"
    COPPER = "BF360C"
    WHEATEN = "FFE082"
    YELLOW = "FFB74D"
    SLATE = "607D8B"
    HORN = "D7CCC8"


# Continuous sliders, each normalized to 0-1 and constrained per stage
MORPH_FIELDS: Tuple[str, ...] = (
    "body_width",
    "body_roundness",
    "leg_length",
    "leg_thickness",
    "tail_length",
    "tail_angle",
    "tail_spread",
    "comb_size",
    "beak_scale",
    "beak_curvature",
    "neck_length",
    "neck_thickness",
    "chest_depth",
    "hackle_length",
    "spur_size",
    "bone_thickness",
    "feather_density",
)

# Categorical selectors the lifecycle engine may rewrite
MORPH_CATEGORICALS: Tuple[str, ...] = (
    "comb",
    "tail",
    "nails",
    "wattle",
    "stance",
    "sheen",
    "neck",
    "breast",
    "back",
    "legs",
    "wings",
    "body_size",
)


# =============================================================================
# APPEARANCE VALUE
# =============================================================================

@dataclass(frozen=True)
class BirdAppearance:
    """
    Complete visual description of one bird.

    Morph sliders and part styles change with age; colors, eye, beak style
    and sex belong to the breed and are never touched by the lifecycle engine.
    """
    # Morph sliders
    body_width: float = 0.5
    body_roundness: float = 0.5
    leg_length: float = 0.5
    leg_thickness: float = 0.5
    tail_length: float = 0.5
    tail_angle: float = 0.5
    tail_spread: float = 0.5
    comb_size: float = 0.5
    beak_scale: float = 0.5
    beak_curvature: float = 0.5
    neck_length: float = 0.5
    neck_thickness: float = 0.5
    chest_depth: float = 0.5
    hackle_length: float = 0.5
    spur_size: float = 0.5
    bone_thickness: float = 0.5
    feather_density: float = 0.5

    # Part styles
    comb: CombStyle = CombStyle.SINGLE
    tail: TailStyle = TailStyle.SHORT
    nails: NailStyle = NailStyle.SHORT
    wattle: WattleStyle = WattleStyle.MEDIUM
    stance: Stance = Stance.NORMAL
    sheen: Sheen = Sheen.SATIN
    neck: NeckStyle = NeckStyle.MEDIUM
    breast: BreastShape = BreastShape.ROUND
    back: BackStyle = BackStyle.SMOOTH
    legs: LegStyle = LegStyle.CLEAN
    wings: WingStyle = WingStyle.FOLDED
    body_size: BodySize = BodySize.MEDIUM

    # Breed identity
    beak: BeakStyle = BeakStyle.MEDIUM
    eye: EyeColor = EyeColor.ORANGE
    comb_color: PartColor = PartColor.RED
    beak_color: PartColor = PartColor.HORN
    chest_color: PartColor = PartColor.WHITE
    back_color: PartColor = PartColor.WHITE
    wing_color: PartColor = PartColor.WHITE
    tail_color: PartColor = PartColor.BLACK
    leg_color: PartColor = PartColor.YELLOW
    wattle_color: PartColor = PartColor.RED
    is_male: bool = True

    def copy(self, **changes) -> "BirdAppearance":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def morph_values(self) -> Dict[str, float]:
        """The 17 continuous sliders by name."""
        return {name: getattr(self, name) for name in MORPH_FIELDS}

    def identity_values(self) -> Dict[str, object]:
        """Fields the lifecycle engine never changes."""
        age_driven = set(MORPH_FIELDS) | set(MORPH_CATEGORICALS)
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in age_driven}

    def to_dict(self) -> Dict:
        """Convert to dictionary (enums by name)."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = value.name if isinstance(value, Enum) else value
        return result


def aseel_base(is_male: bool = True) -> BirdAppearance:
    """Reference Aseel look used for previews and reports."""
    return BirdAppearance(
        comb=CombStyle.PEA,
        tail=TailStyle.SICKLE if is_male else TailStyle.SHORT,
        nails=NailStyle.CURVED if is_male else NailStyle.SHORT,
        wattle=WattleStyle.SMALL,
        stance=Stance.UPRIGHT,
        sheen=Sheen.GLOSSY,
        neck=NeckStyle.LONG,
        breast=BreastShape.BROAD,
        back=BackStyle.HACKLE if is_male else BackStyle.SMOOTH,
        legs=LegStyle.SPURRED if is_male else LegStyle.CLEAN,
        wings=WingStyle.TIGHT,
        body_size=BodySize.LARGE,
        beak=BeakStyle.SHORT,
        eye=EyeColor.PEARL,
        chest_color=PartColor.RED if is_male else PartColor.BROWN,
        back_color=PartColor.DARK_RED if is_male else PartColor.BROWN,
        wing_color=PartColor.RED if is_male else PartColor.BROWN,
        tail_color=PartColor.GREEN_BLACK,
        is_male=is_male,
    )
