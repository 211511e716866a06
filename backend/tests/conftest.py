import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from voyage_curator.schemas.vacation import VacationRequest


def build_payload(personal: dict | None = None, preferences: dict | None = None) -> dict:
    """Wire-format (camelCase) request body with sensible defaults."""
    return {
        "personal": {
            "fullName": "Ada Traveler",
            "email": "ada@voyagecurator.io",
            "phone": "5551234567",
            "homeAirport": "SFO",
            "travelCompanions": "couple",
            "startDate": "2024-03-01",
            "endDate": "2024-03-05",
            "notes": "",
            **(personal or {}),
        },
        "preferences": {
            "budget": "midrange",
            "climate": ["temperate"],
            "interests": ["culture", "food"],
            "accommodation": "Boutique hotel",
            "pace": "balanced",
            **(preferences or {}),
        },
    }


@pytest.fixture
def make_request():
    def _make(personal: dict | None = None, **preferences) -> VacationRequest:
        return VacationRequest.model_validate(build_payload(personal, preferences))

    return _make


@pytest.fixture
def payload():
    return build_payload()
