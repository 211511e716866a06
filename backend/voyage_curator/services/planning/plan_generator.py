"""Plan generator: ranks the catalog for a request and assembles the VacationPlan.

Pipeline:
    calculate_trip_length → enrich_destination + score_destination (every template)
    → filter (score > min_score) → stable sort → top N → finalize ranked picks

If no template clears the threshold, the first two templates are returned
enriched but unranked, so the response is never empty.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from voyage_curator.data.destinations import DESTINATION_CATALOG, DestinationTemplate
from voyage_curator.schemas.vacation import DailyPlan, DestinationPlan, VacationPlan, VacationRequest
from voyage_curator.services.planning.config import DAILY_RATES, planning_config
from voyage_curator.services.planning.enrichment import enrich_destination
from voyage_curator.services.planning.pricing import booking_option_price, estimate_trip_price
from voyage_curator.services.planning.scoring import ScoreBreakdown, score_destination
from voyage_curator.services.planning.trip_length import calculate_trip_length

logger = logging.getLogger(__name__)

cfg = planning_config
limits = cfg.selection
tips = cfg.tips


@dataclass
class RankedDestination:
    """An enriched destination with its score."""

    destination: DestinationPlan
    score: ScoreBreakdown
    catalog_index: int


def rank_destinations(
    request: VacationRequest,
    nights: int,
    catalog: tuple[DestinationTemplate, ...] = DESTINATION_CATALOG,
) -> list[RankedDestination]:
    """Every template that clears the threshold, best first, catalog order on ties."""
    candidates = []
    for index in range(len(catalog)):
        destination = enrich_destination(request, index, nights, catalog)
        score = score_destination(request, destination)
        logger.debug(f"Scored {destination.destination}: {score.to_dict()}")
        candidates.append(RankedDestination(destination=destination, score=score, catalog_index=index))

    qualified = [c for c in candidates if c.score.total > limits.min_score]
    # list.sort is stable, so equal scores keep catalog order
    qualified.sort(key=lambda c: c.score.total, reverse=True)
    return qualified


def itinerary_length(itinerary: list[DailyPlan]) -> int:
    """Day count of a materialized itinerary (last day number)."""
    if not itinerary:
        return limits.empty_itinerary_days
    return itinerary[-1].day


def _label_itinerary(itinerary: list[DailyPlan]) -> list[DailyPlan]:
    labeled = []
    last = len(itinerary) - 1
    for idx, day in enumerate(itinerary):
        if idx == 0:
            day = day.model_copy(update={"title": f"{day.title} (Arrival Day)"})
        elif idx == last:
            day = day.model_copy(update={"title": f"{day.title} (Farewell)"})
        labeled.append(day)
    return labeled


def finalize_destination(
    destination: DestinationPlan,
    rank: int,
    nights: int,
    request: VacationRequest,
) -> DestinationPlan:
    """Copy of a ranked pick with trip price, day labels, length tip and lead summary."""
    trip_nights = max(itinerary_length(destination.sample_itinerary), nights)
    base_rate = DAILY_RATES[destination.budget].min

    booking_options = [
        option if option.price_estimate else option.model_copy(update={
            "price_estimate": booking_option_price(
                base_rate, position, nights, step=cfg.pricing.backfill_option_step
            ),
        })
        for position, option in enumerate(destination.booking_options)
    ]

    summary = destination.summary
    if rank == 0:
        summary = f"{summary} {tips.lead_summary.format(name=request.personal.full_name)}"

    return destination.model_copy(update={
        "booking_options": booking_options,
        "sample_itinerary": _label_itinerary(destination.sample_itinerary),
        "travel_tips": [
            tips.ideal_length.format(days=max(limits.min_ideal_length, nights)),
            *destination.travel_tips,
        ],
        "summary": summary,
        "price_estimate": estimate_trip_price(destination.budget, trip_nights),
    })


def _iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_vacation_plan(
    request: VacationRequest,
    catalog: tuple[DestinationTemplate, ...] = DESTINATION_CATALOG,
    now: datetime | None = None,
) -> VacationPlan:
    """Score the catalog against a validated request and build the response."""
    nights = calculate_trip_length(request.personal.start_date, request.personal.end_date)

    ranked = rank_destinations(request, nights, catalog)[: limits.max_results]

    if ranked:
        destinations = [
            finalize_destination(item.destination, rank, nights, request)
            for rank, item in enumerate(ranked)
        ]
        logger.info(
            f"Plan for {nights} nights: "
            + ", ".join(f"{item.destination.destination} ({item.score.total:.2f})" for item in ranked)
        )
    else:
        fallback_count = min(limits.fallback_count, len(catalog))
        destinations = [
            enrich_destination(request, index, nights, catalog)
            for index in range(fallback_count)
        ]
        logger.info(
            f"No destination scored above {limits.min_score}; "
            f"falling back to first {fallback_count} catalog entries"
        )

    generated_at = _iso_timestamp(now or datetime.now(timezone.utc))

    return VacationPlan(
        request=request,
        generated_at=generated_at,
        currency=cfg.currency,
        destinations=destinations,
    )
