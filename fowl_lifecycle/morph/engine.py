"""
Fowl Lifecycle — Morph Engine
Evolves a bird's appearance from its age: looks up the stage envelope, blends
toward the next stage near the boundary, and rewrites the age-driven morph
sliders and part styles. Colors and breed identity are never touched.

All operations are pure functions; ``LifecycleMorphEngine`` groups them for
callers that prefer a single entry point.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
import logging

from ..config import LIFECYCLE
from ..core.stage import BiologicalStage, GrowthMode
from ..core.age_profile import AgeProfile
from ..core.appearance import (
    BackStyle,
    BirdAppearance,
    BreastShape,
    CombStyle,
    LegStyle,
    NailStyle,
    NeckStyle,
    TailStyle,
    WattleStyle,
    WingStyle,
)
from .constraints import (
    StageMorphConstraints,
    for_stage,
    interpolate,
    preserve_or_default,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT RECORDS
# =============================================================================

@dataclass(frozen=True)
class MorphSummary:
    """Human-readable description of a bird's current look."""
    stage_name: str
    emoji: str
    feather_texture: str
    key_features: Tuple[str, ...]
    maturity_percent: int

    def to_dict(self) -> Dict:
        return {
            "stage_name": self.stage_name,
            "emoji": self.emoji,
            "feather_texture": self.feather_texture,
            "key_features": list(self.key_features),
            "maturity_percent": self.maturity_percent,
        }


@dataclass(frozen=True)
class GrowthSnapshot:
    """One point on a growth timeline."""
    age_days: int
    stage: BiologicalStage
    maturity_index: float
    appearance: BirdAppearance
    summary: MorphSummary

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "age_days": self.age_days,
            "stage": self.stage.name,
            "maturity_index": self.maturity_index,
            "appearance": self.appearance.to_dict(),
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class MorphChange:
    """A visible change between two ages, e.g. ("Spurs", "Developing", ...)."""
    feature: str
    change_type: str
    description: str

    def to_dict(self) -> Dict:
        return {
            "feature": self.feature,
            "change_type": self.change_type,
            "description": self.description,
        }


# =============================================================================
# CONSTRAINTS FOR A PROFILE
# =============================================================================

def smoothstep(progress: float) -> float:
    """Hermite ease 3p² - 2p³ on progress clamped to [0, 1]."""
    p = max(0.0, min(1.0, progress))
    return p * p * (3.0 - 2.0 * p)


def get_constraints(profile: AgeProfile) -> StageMorphConstraints:
    """
    Envelope for a bird at its exact age.

    Inside a stage the envelope eases from the current stage's record toward
    the next stage's, so sliders never jump at a boundary. An egg sits at
    progress 0: its own zero sliders with the hatchling's allowed styles.
    SENIOR has nothing to ease toward and returns its own record.
    """
    current = for_stage(profile.stage, profile.is_male)
    next_stage = profile.stage.next_stage
    if next_stage is None:
        return current
    target = for_stage(next_stage, profile.is_male)
    if profile.stage == BiologicalStage.EGG:
        return interpolate(current, target, 0.0)
    return interpolate(current, target, smoothstep(profile.progress))


# =============================================================================
# EVOLUTION
# =============================================================================

def evolve(base: BirdAppearance, profile: AgeProfile) -> BirdAppearance:
    """Apply the profile's growth mode to a base appearance."""
    if profile.stage == BiologicalStage.EGG:
        return base
    if profile.growth_mode == GrowthMode.AUTO_BIOLOGICAL:
        return evolve_automatic(base, profile)
    if profile.growth_mode == GrowthMode.MANUAL_STAGE:
        return constrain_to_stage(base, profile)
    return base


def constrain_to_stage(appearance: BirdAppearance, profile: AgeProfile) -> BirdAppearance:
    """
    Pull a hand-edited appearance back inside the stage envelope.

    Sliders are clamped; part styles the stage does not allow fall back to
    the first allowed style. Free mode returns the appearance untouched.
    """
    if profile.growth_mode == GrowthMode.MANUAL_FREE:
        return appearance

    c = get_constraints(profile)
    changes = {
        name: morph_range.clamp(getattr(appearance, name))
        for name, morph_range in c.ranges().items()
    }
    for name, allowed in c.allowed_sets().items():
        changes[name] = preserve_or_default(getattr(appearance, name), allowed, allowed[0])
    return appearance.copy(**changes)


def evolve_automatic(base: BirdAppearance, profile: AgeProfile) -> BirdAppearance:
    """
    Derive the age-appropriate look from a breed base.

    Every slider takes the envelope default. Part styles follow the stage:
    absent in the young, transitional while growing, and from sub-adult on
    the breed's own choice is kept whenever the stage allows it.
    """
    c = get_constraints(profile)
    stage = profile.stage
    idx = stage.index
    progress = profile.progress
    male = profile.is_male

    changes = {name: morph_range.default_value for name, morph_range in c.ranges().items()}
    changes["body_size"] = c.default_body_size
    changes["stance"] = c.default_stance
    changes["sheen"] = c.default_sheen

    # Comb
    if idx <= BiologicalStage.CHICK.index:
        comb = CombStyle.NONE
    elif stage == BiologicalStage.GROWER:
        if progress > LIFECYCLE.comb_progress_cutoff:
            comb = preserve_or_default(base.comb, c.allowed_combs, CombStyle.PEA)
        else:
            comb = CombStyle.NONE
    else:
        comb = preserve_or_default(base.comb, c.allowed_combs, CombStyle.PEA)
    changes["comb"] = comb

    # Tail
    if idx <= BiologicalStage.HATCHLING.index:
        tail = TailStyle.NONE
    elif stage == BiologicalStage.CHICK:
        tail = TailStyle.SHORT
    elif stage == BiologicalStage.GROWER:
        tail = TailStyle.SICKLE if male and progress > LIFECYCLE.sickle_progress_cutoff else TailStyle.SHORT
    elif male:
        tail = preserve_or_default(base.tail, c.allowed_tails, TailStyle.SICKLE)
    else:
        tail = TailStyle.SHORT
    changes["tail"] = tail

    # Nails / spurs
    if idx < BiologicalStage.CHICK.index:
        nails = NailStyle.NONE
    elif idx < BiologicalStage.SUB_ADULT.index:
        nails = NailStyle.SHORT
    elif male and idx >= BiologicalStage.ADULT.index:
        nails = preserve_or_default(base.nails, c.allowed_nails, NailStyle.LONG_SPUR)
    else:
        nails = NailStyle.SHORT
    changes["nails"] = nails

    # Wattle
    if idx <= BiologicalStage.CHICK.index:
        wattle = WattleStyle.NONE
    elif stage == BiologicalStage.GROWER:
        wattle = WattleStyle.SMALL
    elif stage == BiologicalStage.SUB_ADULT:
        wattle = WattleStyle.MEDIUM if male else WattleStyle.SMALL
    else:
        wattle = preserve_or_default(base.wattle, c.allowed_wattles, WattleStyle.MEDIUM)
    changes["wattle"] = wattle

    # Neck
    if idx <= BiologicalStage.CHICK.index:
        neck = NeckStyle.SHORT
    elif stage == BiologicalStage.GROWER:
        neck = NeckStyle.MEDIUM
    elif male and idx >= BiologicalStage.MATURE_ADULT.index:
        neck = NeckStyle.MUSCULAR
    else:
        neck = preserve_or_default(base.neck, c.allowed_necks, NeckStyle.MEDIUM)
    changes["neck"] = neck

    # Breast
    if idx <= BiologicalStage.GROWER.index:
        breast = BreastShape.FLAT
    elif stage == BiologicalStage.SUB_ADULT:
        breast = BreastShape.ROUND
    elif male:
        breast = preserve_or_default(base.breast, c.allowed_breasts, BreastShape.DEEP)
    else:
        breast = BreastShape.ROUND
    changes["breast"] = breast

    # Back
    if idx < BiologicalStage.SUB_ADULT.index:
        back = BackStyle.SMOOTH
    elif male and idx >= BiologicalStage.ADULT.index:
        back = BackStyle.HACKLE
    elif male:
        back = BackStyle.SADDLE
    else:
        back = BackStyle.SMOOTH
    changes["back"] = back

    # Legs
    if idx < BiologicalStage.SUB_ADULT.index:
        legs = LegStyle.CLEAN
    elif male and idx >= BiologicalStage.ADULT.index:
        legs = LegStyle.SPURRED
    else:
        legs = base.legs
    changes["legs"] = legs

    # Wings
    if idx >= BiologicalStage.SUB_ADULT.index:
        changes["wings"] = WingStyle.TIGHT
    else:
        changes["wings"] = WingStyle.FOLDED

    return base.copy(**changes)


def preview_at_age(base: BirdAppearance, age_days: int, is_male: bool = True) -> BirdAppearance:
    """What ``base`` looks like at ``age_days`` under automatic growth."""
    return evolve(base, AgeProfile.from_days(age_days, is_male))


# =============================================================================
# TIMELINE & SUMMARIES
# =============================================================================

def generate_morph_summary(appearance: BirdAppearance, profile: AgeProfile) -> MorphSummary:
    """Summarize the stage, feather texture and visible features."""
    stage = profile.stage
    male = profile.is_male
    features = []

    if stage.has_hackles and male:
        features.append("Hackle feathers visible")
    if stage.has_spurs and male:
        features.append("Spurs developing")
    if stage.has_sickle_feathers and male:
        features.append("Sickle tail feathers")
    if stage.has_full_plumage:
        features.append("Full plumage achieved")

    if stage == BiologicalStage.HATCHLING:
        features.append("Down-covered, oversized head")
    elif stage == BiologicalStage.CHICK:
        features.append("First feathers emerging")
    elif stage == BiologicalStage.GROWER:
        features.append("Rapid leg growth, patchy feathers")
    elif stage == BiologicalStage.SENIOR:
        features.append("Peak bone thickness, slight feather dulling")

    return MorphSummary(
        stage_name=stage.display_name,
        emoji=stage.emoji,
        feather_texture=for_stage(stage, male).default_feather_texture,
        key_features=tuple(features),
        maturity_percent=profile.maturity_percent,
    )


def generate_growth_timeline(base: BirdAppearance, is_male: bool = True,
                             max_days: int = 730) -> List[GrowthSnapshot]:
    """Snapshots at the key ages up to ``max_days``."""
    timeline = []
    for day in LIFECYCLE.timeline_key_days:
        if day > max_days:
            break
        profile = AgeProfile.from_days(day, is_male)
        appearance = evolve(base, profile)
        timeline.append(GrowthSnapshot(
            age_days=day,
            stage=profile.stage,
            maturity_index=profile.maturity_index,
            appearance=appearance,
            summary=generate_morph_summary(appearance, profile),
        ))
    return timeline


def get_transition_changes(from_days: int, to_days: int, is_male: bool = True) -> List[MorphChange]:
    """
    Visible changes when a bird ages from ``from_days`` to ``to_days``.

    Nothing is reported within a single stage. Defaults are compared between
    the two stage records, not the blended envelopes at those ages.
    """
    before = AgeProfile.from_days(from_days, is_male)
    after = AgeProfile.from_days(to_days, is_male)
    if before.stage == after.stage:
        return []

    old = for_stage(before.stage, is_male)
    new = for_stage(after.stage, is_male)
    threshold = LIFECYCLE.transition_delta_threshold
    changes = []

    def grew(name: str) -> bool:
        return getattr(new, name).default_value > getattr(old, name).default_value + threshold

    if grew("hackle_length"):
        changes.append(MorphChange("Hackle Feathers", "Growing", "Hackle feathers becoming visible"))
    if grew("spur_size") and is_male:
        changes.append(MorphChange("Spurs", "Developing", "Spurs are starting to grow"))
    if grew("chest_depth"):
        changes.append(MorphChange("Chest", "Deepening", "Chest muscles thickening"))
    if grew("feather_density"):
        changes.append(MorphChange("Plumage", "Filling In", "Feather coverage increasing"))

    adult = BiologicalStage.ADULT.index
    if after.stage.index >= adult and before.stage.index < adult:
        changes.append(MorphChange("Feather Quality", "Hardening", "Feathers transitioning to hard/tight"))
    if after.stage == BiologicalStage.SENIOR:
        changes.append(MorphChange("Sheen", "Slight Dulling", "Feather sheen beginning to reduce"))

    logger.debug(f"Transition {before.stage.name} -> {after.stage.name}: {len(changes)} changes")
    return changes


# =============================================================================
# ENGINE NAMESPACE
# =============================================================================

class LifecycleMorphEngine:
    """Entry point gathering the lifecycle morph operations."""

    smoothstep = staticmethod(smoothstep)
    get_constraints = staticmethod(get_constraints)
    evolve = staticmethod(evolve)
    constrain_to_stage = staticmethod(constrain_to_stage)
    evolve_automatic = staticmethod(evolve_automatic)
    preview_at_age = staticmethod(preview_at_age)
    generate_growth_timeline = staticmethod(generate_growth_timeline)
    generate_morph_summary = staticmethod(generate_morph_summary)
    get_transition_changes = staticmethod(get_transition_changes)
