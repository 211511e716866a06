"""Destination scoring: weighted match between a request and one destination.

Scoring dimensions (see ScoreWeights in config):
  Activities (0.4)  share of the destination's activities the traveler asked for
  Budget (0.2)      exact tier, stretch tier, or mismatch
  Climate (0.2)     any requested climate offered
  Companions (0.1)  destination suits the travel party
  Pace (0.1)        relaxed/wellness or fast-paced/adventure-nightlife pairing
"""

import re
from dataclasses import dataclass
from typing import Iterable

from voyage_curator.data.destinations import DestinationTemplate
from voyage_curator.schemas.vacation import DestinationPlan, VacationRequest
from voyage_curator.services.planning.config import planning_config

cfg = planning_config
weights = cfg.weights
fit = cfg.fit

_NON_TAG_CHARS = re.compile(r"[^a-z\s/-]")


@dataclass
class ScoreBreakdown:
    """How a destination was scored. Components are unweighted 0-1 values."""

    activities: float = 0.0
    budget: float = 0.0
    climate: float = 0.0
    companions: float = 0.0
    pace: float = 0.0

    @property
    def total(self) -> float:
        return (
            weights.activities * self.activities
            + weights.budget * self.budget
            + weights.climate * self.climate
            + weights.companions * self.companions
            + weights.pace * self.pace
        )

    def to_dict(self) -> dict:
        return {
            "activities": round(self.activities, 2),
            "budget": round(self.budget, 2),
            "climate": round(self.climate, 2),
            "companions": round(self.companions, 2),
            "pace": round(self.pace, 2),
            "total": round(self.total, 3),
        }


def normalize_interests(interests: Iterable[str]) -> list[str]:
    """Lowercase and keep only letters, whitespace, '/' and '-'."""
    return [_NON_TAG_CHARS.sub("", item.lower()).strip() for item in interests]


def _activity_score(interests: list[str], activities: list[str]) -> float:
    interest_set = set(normalize_interests(interests))
    plan_activities = normalize_interests(activities)
    shared = sum(1 for activity in plan_activities if activity in interest_set)
    return shared / max(len(plan_activities), 1)


def _budget_score(requested: str, offered: str) -> float:
    if requested == offered:
        return fit.budget_exact
    if requested == "luxury" and offered != "budget":
        return fit.budget_luxury_stretch
    if requested == "budget" and offered != "luxury":
        return fit.budget_saver_stretch
    return fit.budget_mismatch


def _pace_score(pace: str, tags: Iterable[str]) -> float:
    tag_set = set(tags)
    if pace == "relaxed" and tag_set & fit.relaxed_tags:
        return fit.pace_match
    if pace == "fast-paced" and tag_set & fit.fast_paced_tags:
        return fit.pace_match
    return fit.pace_neutral


def score_destination(
    request: VacationRequest,
    destination: DestinationTemplate | DestinationPlan,
) -> ScoreBreakdown:
    """
    Score one destination (template or enriched plan) against a request.

    Only the matchable fields are read: activities, budget, climates,
    ideal_for and tags.
    """
    prefs = request.preferences

    climate_hit = any(climate in destination.climates for climate in prefs.climate)
    companion_hit = request.personal.travel_companions in destination.ideal_for

    return ScoreBreakdown(
        activities=_activity_score(prefs.interests, list(destination.activities)),
        budget=_budget_score(prefs.budget, destination.budget),
        climate=fit.climate_match if climate_hit else fit.climate_miss,
        companions=fit.companion_match if companion_hit else fit.companion_miss,
        pace=_pace_score(prefs.pace, destination.tags),
    )
