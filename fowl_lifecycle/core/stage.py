"""
Fowl Lifecycle — Biological Stages
Ordered life phases of a fowl and the visual capabilities each one unlocks.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
from enum import Enum, auto
import logging

from ..config import LIFECYCLE

logger = logging.getLogger(__name__)


class GrowthMode(Enum):
    """How morphology follows age."""
    AUTO_BIOLOGICAL = auto()  # Morphs evolve daily from age alone
    MANUAL_STAGE = auto()     # User edits clamped to the stage envelope
    MANUAL_FREE = auto()      # No constraints


class BiologicalStage(Enum):
    """Life stages for a fowl, egg to senior."""
    EGG = auto()           # Pre-hatch, never derived from age
    HATCHLING = auto()     # 0-7 days
    CHICK = auto()         # 1-6 weeks
    GROWER = auto()        # 6-16 weeks
    SUB_ADULT = auto()     # 4-8 months
    ADULT = auto()         # 8-12 months
    MATURE_ADULT = auto()  # 12-24 months
    SENIOR = auto()        # 2+ years

    @property
    def spec(self) -> "StageSpec":
        return STAGE_SPECS[self]

    @property
    def index(self) -> int:
        return self.spec.index

    @property
    def min_days(self) -> int:
        return self.spec.min_days

    @property
    def max_days(self) -> Optional[int]:
        return self.spec.max_days

    @property
    def display_name(self) -> str:
        return self.spec.display_name

    @property
    def emoji(self) -> str:
        return self.spec.emoji

    # -------------------------------------------------------------------------
    # Capabilities (monotone: once unlocked, unlocked for every later stage)
    # -------------------------------------------------------------------------

    @property
    def can_render_bird(self) -> bool:
        return self.index >= BiologicalStage.HATCHLING.index

    @property
    def has_feathers(self) -> bool:
        return self.index >= BiologicalStage.CHICK.index

    @property
    def has_hackles(self) -> bool:
        return self.index >= BiologicalStage.SUB_ADULT.index

    @property
    def has_sickle_feathers(self) -> bool:
        return self.index >= BiologicalStage.SUB_ADULT.index

    @property
    def has_spurs(self) -> bool:
        return self.index >= BiologicalStage.ADULT.index

    @property
    def has_full_plumage(self) -> bool:
        return self.index >= BiologicalStage.MATURE_ADULT.index

    @property
    def next_stage(self) -> Optional["BiologicalStage"]:
        """Stage that follows this one, or None for SENIOR."""
        later = [s for s in BiologicalStage if s.index > self.index]
        if not later:
            return None
        return min(later, key=lambda s: s.index)

    def progress_in_stage(self, age_days: float) -> float:
        """
        Linear progress through this stage, 0.0 at entry and 1.0 at exit.

        SENIOR has no exit, so a one-year span is used instead.
        """
        end = self.max_days
        if end is None:
            end = self.min_days + LIFECYCLE.senior_progress_span_days
        span = end - self.min_days
        if span <= 0:
            return 0.0
        return max(0.0, min(1.0, (age_days - self.min_days) / span))

    @classmethod
    def ordered(cls) -> List["BiologicalStage"]:
        """All stages by ordering index."""
        return sorted(cls, key=lambda s: s.index)

    @classmethod
    def from_age_days(cls, age_days: float, is_male: bool = True) -> "BiologicalStage":
        """
        Classify a hatched bird by age.

        Thresholds come from the stage table itself, so a bird is always
        inside the declared [min_days, max_days) of the stage returned.
        EGG is never returned; callers mark unhatched birds explicitly.
        """
        for stage in cls.ordered():
            if stage == cls.EGG:
                continue
            if stage.max_days is None or age_days < stage.max_days:
                return stage
        return cls.SENIOR


@dataclass(frozen=True)
class StageSpec:
    """Fixed metadata for one biological stage."""
    index: int
    min_days: int
    max_days: Optional[int]  # None = open-ended
    display_name: str
    emoji: str


STAGE_SPECS: Dict[BiologicalStage, StageSpec] = {
    BiologicalStage.EGG: StageSpec(
        index=0, min_days=0, max_days=0,
        display_name="Egg", emoji="🥚",
    ),
    BiologicalStage.HATCHLING: StageSpec(
        index=1, min_days=0, max_days=7,
        display_name="Hatchling", emoji="🐣",
    ),
    BiologicalStage.CHICK: StageSpec(
        index=2, min_days=7, max_days=42,
        display_name="Chick", emoji="🐥",
    ),
    BiologicalStage.GROWER: StageSpec(
        index=3, min_days=42, max_days=112,
        display_name="Grower", emoji="🐤",
    ),
    BiologicalStage.SUB_ADULT: StageSpec(
        index=4, min_days=112, max_days=240,
        display_name="Sub-Adult", emoji="🐔",
    ),
    BiologicalStage.ADULT: StageSpec(
        index=5, min_days=240, max_days=365,
        display_name="Adult", emoji="🐓",
    ),
    BiologicalStage.MATURE_ADULT: StageSpec(
        index=6, min_days=365, max_days=730,
        display_name="Mature Adult", emoji="🏆",
    ),
    BiologicalStage.SENIOR: StageSpec(
        index=7, min_days=730, max_days=None,
        display_name="Senior", emoji="🦅",
    ),
}


def iter_hatched_stages() -> Iterator[BiologicalStage]:
    """Stages a living bird can be classified into by age."""
    for stage in BiologicalStage.ordered():
        if stage.can_render_bird:
            yield stage
