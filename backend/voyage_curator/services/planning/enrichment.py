"""Destination enrichment: expands a catalog template into a request-specific plan."""

from voyage_curator.data.destinations import DESTINATION_CATALOG, DayTemplate, DestinationTemplate
from voyage_curator.schemas.vacation import BookingOption, DailyPlan, DestinationPlan, VacationRequest
from voyage_curator.services.planning.config import planning_config
from voyage_curator.services.planning.pricing import base_nightly_rate, booking_option_price

tips = planning_config.tips


def build_daily_plan(template_days: tuple[DayTemplate, ...], nights: int) -> list[DailyPlan]:
    """Number days 1..nights, cycling the template days for longer trips."""
    if not template_days:
        return []
    return [
        DailyPlan(
            day=i + 1,
            title=template_days[i % len(template_days)].title,
            description=template_days[i % len(template_days)].description,
        )
        for i in range(nights)
    ]


def personalize_summary(summary: str, request: VacationRequest) -> str:
    occasion = request.preferences.special_occasion
    if not occasion:
        return summary
    return f"{summary} {tips.occasion_summary.format(occasion=occasion.lower())}"


def expand_tips(template_tips: tuple[str, ...], request: VacationRequest) -> list[str]:
    """Template tips first, then request-driven additions. Exact duplicates dropped."""
    prefs = request.preferences
    expanded = dict.fromkeys(template_tips)

    if prefs.pace == "relaxed":
        expanded.setdefault(tips.relaxed)
    if prefs.cuisine_focus:
        expanded.setdefault(tips.cuisine.format(cuisines=", ".join(prefs.cuisine_focus)))
    if prefs.special_occasion:
        expanded.setdefault(tips.occasion.format(occasion=prefs.special_occasion.lower()))
    if prefs.mobility_considerations:
        expanded.setdefault(tips.mobility)

    return list(expanded)


def enrich_destination(
    request: VacationRequest,
    index: int,
    nights: int,
    catalog: tuple[DestinationTemplate, ...] = DESTINATION_CATALOG,
) -> DestinationPlan:
    """Fresh plan for catalog[index]; the template itself is never touched."""
    template = catalog[index]
    base_rate = base_nightly_rate(request.preferences.budget, index)

    booking_options = [
        BookingOption(
            type=option.type,
            name=option.name,
            description=option.description,
            price_estimate=booking_option_price(base_rate, position, nights),
            booking_url=option.booking_url,
        )
        for position, option in enumerate(template.booking_options)
    ]

    return DestinationPlan(
        destination=template.destination,
        country=template.country,
        summary=personalize_summary(template.summary, request),
        highlights=list(template.highlights),
        ideal_for=list(template.ideal_for),
        climates=list(template.climates),
        budget=template.budget,
        activities=list(template.activities),
        tags=list(template.tags),
        booking_options=booking_options,
        sample_itinerary=build_daily_plan(template.sample_itinerary, nights),
        travel_tips=expand_tips(template.travel_tips, request),
        recommended_season=template.recommended_season,
        local_cuisine=list(template.local_cuisine),
    )
