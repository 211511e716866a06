from voyage_curator.data.destinations import DESTINATION_CATALOG
from voyage_curator.services.planning.enrichment import build_daily_plan, enrich_destination, expand_tips
from voyage_curator.services.planning.pricing import estimate_trip_price, format_usd


def _dollars(price: str) -> int:
    return int(price.replace("$", "").replace(",", ""))


def test_format_usd_rounds_half_up():
    assert format_usd(1234.5) == "$1,235"
    assert format_usd(999.4) == "$999"
    assert format_usd(0) == "$0"


def test_estimate_trip_price_range():
    assert estimate_trip_price("midrange", 4) == "$1,120 – $1,680"


def test_booking_prices_even_index_gets_bump(make_request):
    # Kyoto is index 0: (280 + 60) per night, 4 nights
    plan = enrich_destination(make_request(), 0, 4)
    assert [o.price_estimate for o in plan.booking_options] == ["$1,360", "$1,605", "$1,850"]


def test_booking_prices_odd_index_and_min_billable_nights(make_request):
    # Lisbon is index 1: no bump; 1 night bills as 3
    plan = enrich_destination(make_request(), 1, 1)
    assert plan.booking_options[0].price_estimate == "$840"


def test_booking_prices_strictly_increase(make_request):
    for index in range(len(DESTINATION_CATALOG)):
        plan = enrich_destination(make_request(budget="luxury"), index, 6)
        prices = [_dollars(o.price_estimate) for o in plan.booking_options]
        assert all(later > earlier for earlier, later in zip(prices, prices[1:]))


def test_itinerary_cycles_template_days():
    template = DESTINATION_CATALOG[0].sample_itinerary
    days = build_daily_plan(template, 7)

    assert [d.day for d in days] == [1, 2, 3, 4, 5, 6, 7]
    assert days[6].title == template[(7 - 1) % len(template)].title
    assert days[3].description == template[0].description


def test_itinerary_shorter_than_template():
    days = build_daily_plan(DESTINATION_CATALOG[0].sample_itinerary, 2)
    assert len(days) == 2


def test_summary_mentions_special_occasion(make_request):
    plan = enrich_destination(make_request(special_occasion="Our Anniversary"), 0, 4)
    assert plan.summary.endswith("Perfectly suited for celebrating our anniversary.")


def test_summary_unchanged_without_occasion(make_request):
    plan = enrich_destination(make_request(), 0, 4)
    assert plan.summary == DESTINATION_CATALOG[0].summary


def test_expand_tips_order(make_request):
    request = make_request(
        pace="relaxed",
        cuisine_focus=["Japanese", "Seafood"],
        special_occasion="Honeymoon",
        mobility_considerations="Wheelchair user",
    )
    template_tips = DESTINATION_CATALOG[0].travel_tips
    tips = expand_tips(template_tips, request)

    assert tips[: len(template_tips)] == list(template_tips)
    assert tips[len(template_tips):] == [
        "Build in buffer afternoons for spontaneous downtime.",
        "Reserve at least one chef-driven tasting menu that highlights Japanese, Seafood.",
        "Notify hotels and guides about your honeymoon to unlock surprise upgrades.",
        "Share mobility considerations when booking tours to ensure accessible transport and pacing.",
    ]


def test_expand_tips_drops_exact_duplicates(make_request):
    tip = "Build in buffer afternoons for spontaneous downtime."
    tips = expand_tips((tip, "Other tip.", tip), make_request(pace="relaxed"))
    assert tips == [tip, "Other tip."]


def test_enrichment_leaves_template_untouched(make_request):
    template = DESTINATION_CATALOG[0]
    before = (template.summary, template.travel_tips, template.sample_itinerary)

    plan = enrich_destination(make_request(special_occasion="Birthday", pace="relaxed"), 0, 9)
    plan.travel_tips.append("mutated")

    assert (template.summary, template.travel_tips, template.sample_itinerary) == before
