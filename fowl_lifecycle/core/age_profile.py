"""
Fowl Lifecycle — Age Profile
Age, sex and growth mode resolved into a biological stage and maturity index.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict

from .stage import BiologicalStage, GrowthMode
from ..config import LIFECYCLE


@dataclass(frozen=True)
class AgeProfile:
    """
    A bird's age-derived state at one moment.

    maturity_index is 1.0 at canonical full maturity and keeps rising
    afterwards, so seniors read above 1.0.
    """
    age_in_days: int
    stage: BiologicalStage
    maturity_index: float
    is_male: bool = True
    growth_mode: GrowthMode = GrowthMode.AUTO_BIOLOGICAL

    @classmethod
    def from_days(cls, days: int, is_male: bool = True,
                  growth_mode: GrowthMode = GrowthMode.AUTO_BIOLOGICAL) -> "AgeProfile":
        """Build a profile for a hatched bird of the given age."""
        days = max(0, days)
        return cls(
            age_in_days=days,
            stage=BiologicalStage.from_age_days(days, is_male),
            maturity_index=max(0.0, days / LIFECYCLE.full_maturity_days),
            is_male=is_male,
            growth_mode=growth_mode,
        )

    @classmethod
    def from_weeks(cls, weeks: int, is_male: bool = True,
                   growth_mode: GrowthMode = GrowthMode.AUTO_BIOLOGICAL) -> "AgeProfile":
        return cls.from_days(weeks * 7, is_male, growth_mode)

    @classmethod
    def unhatched(cls, is_male: bool = True,
                  growth_mode: GrowthMode = GrowthMode.AUTO_BIOLOGICAL) -> "AgeProfile":
        """Profile for a bird that is still an egg."""
        return cls(
            age_in_days=0,
            stage=BiologicalStage.EGG,
            maturity_index=0.0,
            is_male=is_male,
            growth_mode=growth_mode,
        )

    @classmethod
    def from_hatch_date(cls, hatch_date: date, on_date: date, is_male: bool = True,
                        growth_mode: GrowthMode = GrowthMode.AUTO_BIOLOGICAL) -> "AgeProfile":
        """
        Profile on a calendar date given the (expected) hatch date.

        Before the hatch date the bird is an egg.
        """
        if on_date < hatch_date:
            return cls.unhatched(is_male, growth_mode)
        return cls.from_days((on_date - hatch_date).days, is_male, growth_mode)

    @property
    def progress(self) -> float:
        """Progress through the current stage (0-1)."""
        return self.stage.progress_in_stage(self.age_in_days)

    @property
    def maturity_percent(self) -> int:
        """Maturity as a whole percentage, capped at 100."""
        return max(0, min(100, int(self.maturity_index * 100)))

    def with_growth_mode(self, growth_mode: GrowthMode) -> "AgeProfile":
        return AgeProfile(
            age_in_days=self.age_in_days,
            stage=self.stage,
            maturity_index=self.maturity_index,
            is_male=self.is_male,
            growth_mode=growth_mode,
        )

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "age_in_days": self.age_in_days,
            "stage": self.stage.name,
            "maturity_index": self.maturity_index,
            "maturity_percent": self.maturity_percent,
            "is_male": self.is_male,
            "growth_mode": self.growth_mode.name,
        }
