"""Synthesized pricing: booking-option prices and trip price ranges (USD)."""

from decimal import ROUND_HALF_UP, Decimal

from voyage_curator.services.planning.config import DAILY_RATES, planning_config

pricing = planning_config.pricing


def format_usd(amount: float) -> str:
    """Whole-dollar USD string, e.g. 1234.5 -> '$1,235'."""
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${rounded:,}"


def base_nightly_rate(budget: str, catalog_index: int) -> int:
    """Request tier's minimum rate, bumped for even catalog positions."""
    bump = pricing.even_index_bump if catalog_index % 2 == 0 else 0
    return DAILY_RATES[budget].min + bump


def booking_option_price(base_rate: float, position: int, nights: int, step: float | None = None) -> str:
    """Price of the option at `position`; later options cost progressively more."""
    if step is None:
        step = pricing.option_step
    multiplier = 1 + position * step
    return format_usd(base_rate * multiplier * max(pricing.min_billable_nights, nights))


def estimate_trip_price(budget: str, nights: int) -> str:
    """Low-high range for a stay of `nights` at the tier's daily rate band."""
    rate = DAILY_RATES[budget]
    return f"{format_usd(rate.min * nights)} – {format_usd(rate.max * nights)}"
