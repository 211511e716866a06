import pytest

from voyage_curator.data.destinations import find_destination
from voyage_curator.services.planning.scoring import ScoreBreakdown, normalize_interests, score_destination

KYOTO = find_destination("Kyoto", "Japan")
LISBON = find_destination("Lisbon & Sintra", "Portugal")
QUEENSTOWN = find_destination("Queenstown", "New Zealand")
TULUM = find_destination("Tulum", "Mexico")


def test_normalize_interests_strips_punctuation_and_case():
    assert normalize_interests(["Food & Wine", " Culture! ", "Hiking/Outdoors", "Scenic-Drives"]) == [
        "food  wine",
        "culture",
        "hiking/outdoors",
        "scenic-drives",
    ]


def test_kyoto_midrange_temperate_couple(make_request):
    score = score_destination(make_request(), KYOTO)

    assert score.activities == pytest.approx(2 / 6)
    assert score.budget == 1.0
    assert score.climate == 1.0
    assert score.companions == 1.0
    assert score.pace == 0.7
    assert score.total == pytest.approx(0.4 * 2 / 6 + 0.2 + 0.2 + 0.1 + 0.07)


@pytest.mark.parametrize(
    "requested,template,expected",
    [
        ("luxury", QUEENSTOWN, 1.0),
        ("luxury", KYOTO, 0.75),
        ("luxury", LISBON, 0.4),
        ("budget", KYOTO, 0.7),
        ("budget", QUEENSTOWN, 0.4),
        ("midrange", LISBON, 0.4),
        ("midrange", QUEENSTOWN, 0.4),
    ],
)
def test_budget_fit(make_request, requested, template, expected):
    assert score_destination(make_request(budget=requested), template).budget == expected


def test_climate_miss_and_companion_miss(make_request):
    request = make_request({"travelCompanions": "group"}, climate=["arid"])
    score = score_destination(request, KYOTO)
    assert score.climate == 0.25
    assert score.companions == 0.5


def test_pace_fit(make_request):
    assert score_destination(make_request(pace="relaxed"), TULUM).pace == 1.0
    assert score_destination(make_request(pace="relaxed"), KYOTO).pace == 0.7
    assert score_destination(make_request(pace="fast-paced"), QUEENSTOWN).pace == 1.0
    assert score_destination(make_request(pace="fast-paced"), TULUM).pace == 0.7


def test_activity_matching_uses_normalized_tags(make_request):
    request = make_request(interests=["Wine!", "HIKING", "adventure"])
    assert score_destination(request, QUEENSTOWN).activities == pytest.approx(3 / 5)


def test_no_overlap_scores_zero_activities(make_request):
    request = make_request(interests=["spelunking", "opera"])
    assert score_destination(request, KYOTO).activities == 0.0


def test_breakdown_to_dict_rounds_components():
    breakdown = ScoreBreakdown(activities=1 / 3, budget=1.0, climate=1.0, companions=1.0, pace=0.7)
    data = breakdown.to_dict()
    assert data["activities"] == 0.33
    assert data["total"] == round(breakdown.total, 3)


def test_perfect_match_scores_one():
    breakdown = ScoreBreakdown(activities=1.0, budget=1.0, climate=1.0, companions=1.0, pace=1.0)
    assert breakdown.total == pytest.approx(1.0)
