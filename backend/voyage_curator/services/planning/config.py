"""Planning engine configuration: single source for weights, rates and thresholds."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoreWeights:
    """Weights for the destination match score. Sum to 1.0."""
    activities: float = 0.4
    budget: float = 0.2
    climate: float = 0.2
    companions: float = 0.1
    pace: float = 0.1


@dataclass(frozen=True)
class FitScores:
    """Sub-scores awarded when a factor matches or falls back."""
    budget_exact: float = 1.0
    budget_luxury_stretch: float = 0.75    # luxury request, non-budget template
    budget_saver_stretch: float = 0.7      # budget request, non-luxury template
    budget_mismatch: float = 0.4
    climate_match: float = 1.0
    climate_miss: float = 0.25
    companion_match: float = 1.0
    companion_miss: float = 0.5
    pace_match: float = 1.0
    pace_neutral: float = 0.7
    relaxed_tags: frozenset = frozenset({"wellness"})
    fast_paced_tags: frozenset = frozenset({"adventure", "nightlife"})


@dataclass(frozen=True)
class DailyRate:
    """Per-night USD rate band for a budget tier."""
    min: int
    max: int


DAILY_RATES: dict[str, DailyRate] = {
    "budget": DailyRate(min=160, max=260),
    "midrange": DailyRate(min=280, max=420),
    "luxury": DailyRate(min=520, max=780),
}


@dataclass(frozen=True)
class PricingParams:
    even_index_bump: int = 60          # added to base rate for even catalog positions
    option_step: float = 0.18          # per-position multiplier on booking options
    backfill_option_step: float = 0.2  # used when post-processing fills a missing price
    min_billable_nights: int = 3


@dataclass(frozen=True)
class SelectionLimits:
    min_score: float = 0.15       # scores at or below are discarded
    max_results: int = 3
    fallback_count: int = 2
    default_nights: int = 5       # unparseable dates
    min_nights: int = 1
    min_ideal_length: int = 4     # floor for the "ideal trip length" tip
    empty_itinerary_days: int = 4


@dataclass(frozen=True)
class TipTexts:
    relaxed: str = "Build in buffer afternoons for spontaneous downtime."
    cuisine: str = "Reserve at least one chef-driven tasting menu that highlights {cuisines}."
    occasion: str = "Notify hotels and guides about your {occasion} to unlock surprise upgrades."
    mobility: str = (
        "Share mobility considerations when booking tours to ensure accessible transport and pacing."
    )
    ideal_length: str = "Ideal trip length: {days}-day escape."
    occasion_summary: str = "Perfectly suited for celebrating {occasion}."
    lead_summary: str = "Tailored as the lead recommendation for {name}."


@dataclass(frozen=True)
class PlanningConfig:
    """Top-level config aggregating all sub-configs."""
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    fit: FitScores = field(default_factory=FitScores)
    pricing: PricingParams = field(default_factory=PricingParams)
    selection: SelectionLimits = field(default_factory=SelectionLimits)
    tips: TipTexts = field(default_factory=TipTexts)
    currency: str = "USD"


# Singleton, import this everywhere
planning_config = PlanningConfig()
