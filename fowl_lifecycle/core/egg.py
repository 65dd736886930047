"""
Fowl Lifecycle — Egg Profile
Pre-hatch visual and incubation state. Independent of AgeProfile: a bird is
an egg until its hatch date, then AgeProfile takes over.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional
from enum import Enum, auto
import logging

from ..config import INCUBATION

logger = logging.getLogger(__name__)


class ShellColor(Enum):
    WHITE = auto()
    CREAM = auto()
    TINTED = auto()
    BROWN = auto()
    DARK_BROWN = auto()
    BLUE = auto()
    GREEN = auto()


class FertilityStatus(Enum):
    UNKNOWN = auto()     # Not yet candled
    FERTILE = auto()
    INFERTILE = auto()


class TemperatureStatus(Enum):
    UNKNOWN = auto()     # No reading
    LOW = auto()
    OPTIMAL = auto()
    HIGH = auto()


class CandlingResult(Enum):
    NOT_CANDLED = auto()        # Before candling day
    CLEAR = auto()              # No development (infertile)
    VEINS_VISIBLE = auto()      # Days 7-13
    EMBRYO_DEVELOPING = auto()  # Days 14-17
    LOCKDOWN = auto()           # Day 18 onward, ready to pip


@dataclass(frozen=True)
class EggProfile:
    """Incubation state of a single egg."""
    shell_color: ShellColor
    fertility_status: FertilityStatus
    incubation_progress: float  # 0-1
    incubation_days: int
    hatch_probability: float    # 0-1
    temperature_status: TemperatureStatus
    candling_result: CandlingResult
    predicted_hatch_at: Optional[datetime] = None

    @classmethod
    def from_incubation(cls, days_incubated: int, is_fertile: Optional[bool] = None,
                        temperature_c: Optional[float] = None,
                        set_at: Optional[datetime] = None,
                        shell_color: ShellColor = ShellColor.BROWN) -> "EggProfile":
        """
        Derive egg state from days in the incubator.

        Fertility only becomes known at candling; an egg reported infertile
        is treated as clear from then on.
        """
        days = max(0, min(INCUBATION.incubation_days, days_incubated))
        progress = max(0.0, min(1.0, days / INCUBATION.incubation_days))

        fertility = _fertility_status(days, is_fertile)
        temperature = _temperature_status(temperature_c)
        off_band = temperature in (TemperatureStatus.LOW, TemperatureStatus.HIGH)
        candling = _candling_result(days, fertility)

        if fertility == FertilityStatus.INFERTILE:
            hatch_probability = 0.0
        else:
            if fertility == FertilityStatus.FERTILE:
                hatch_probability = INCUBATION.fertile_hatch_rate
            else:
                hatch_probability = INCUBATION.base_hatch_rate
            if off_band:
                hatch_probability *= INCUBATION.off_band_penalty
        hatch_probability = max(0.0, min(1.0, hatch_probability))

        predicted_hatch_at = None
        if set_at is not None and fertility != FertilityStatus.INFERTILE:
            predicted_hatch_at = set_at + timedelta(days=INCUBATION.incubation_days)

        if off_band:
            logger.debug(f"Egg at day {days}: incubator {temperature.name.lower()} "
                         f"({temperature_c:.1f}C), hatch probability {hatch_probability:.2f}")

        return cls(
            shell_color=shell_color,
            fertility_status=fertility,
            incubation_progress=progress,
            incubation_days=days,
            hatch_probability=hatch_probability,
            temperature_status=temperature,
            candling_result=candling,
            predicted_hatch_at=predicted_hatch_at,
        )

    @property
    def days_remaining(self) -> int:
        return max(0, INCUBATION.incubation_days - self.incubation_days)

    @property
    def is_ready_to_hatch(self) -> bool:
        """Full term and not known to be clear."""
        return (self.incubation_days >= INCUBATION.incubation_days and
                self.fertility_status != FertilityStatus.INFERTILE)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "shell_color": self.shell_color.name,
            "fertility_status": self.fertility_status.name,
            "incubation_progress": self.incubation_progress,
            "incubation_days": self.incubation_days,
            "hatch_probability": self.hatch_probability,
            "temperature_status": self.temperature_status.name,
            "candling_result": self.candling_result.name,
            "predicted_hatch_at": self.predicted_hatch_at.isoformat() if self.predicted_hatch_at else None,
        }


def _fertility_status(days: int, is_fertile: Optional[bool]) -> FertilityStatus:
    if is_fertile is None or days < INCUBATION.candling_day:
        return FertilityStatus.UNKNOWN
    return FertilityStatus.FERTILE if is_fertile else FertilityStatus.INFERTILE


def _temperature_status(temperature_c: Optional[float]) -> TemperatureStatus:
    if temperature_c is None:
        return TemperatureStatus.UNKNOWN
    if temperature_c < INCUBATION.temperature_min_c:
        return TemperatureStatus.LOW
    if temperature_c > INCUBATION.temperature_max_c:
        return TemperatureStatus.HIGH
    return TemperatureStatus.OPTIMAL


def _candling_result(days: int, fertility: FertilityStatus) -> CandlingResult:
    if days < INCUBATION.candling_day:
        return CandlingResult.NOT_CANDLED
    if fertility == FertilityStatus.INFERTILE:
        return CandlingResult.CLEAR
    if days < INCUBATION.embryo_day:
        return CandlingResult.VEINS_VISIBLE
    if days < INCUBATION.lockdown_day:
        return CandlingResult.EMBRYO_DEVELOPING
    return CandlingResult.LOCKDOWN
