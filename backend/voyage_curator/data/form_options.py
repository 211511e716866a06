"""Intake form option lists and the default form state served to the client."""

COMPANION_OPTIONS: list[dict[str, str]] = [
    {"value": "solo", "label": "Solo"},
    {"value": "couple", "label": "Couple"},
    {"value": "family", "label": "Family"},
    {"value": "friends", "label": "Friends"},
    {"value": "group", "label": "Organized Group"},
]

BUDGET_OPTIONS: list[dict[str, str]] = [
    {"value": "budget", "label": "Smart Saver"},
    {"value": "midrange", "label": "Comfort"},
    {"value": "luxury", "label": "Luxury"},
]

PACE_OPTIONS: list[dict[str, str]] = [
    {"value": "relaxed", "label": "Leisurely"},
    {"value": "balanced", "label": "Balanced"},
    {"value": "fast-paced", "label": "Fast Paced"},
]

CLIMATE_OPTIONS: list[dict[str, str]] = [
    {"value": "tropical", "label": "Tropical"},
    {"value": "temperate", "label": "Mild / Temperate"},
    {"value": "coastal", "label": "Coastal Breezes"},
    {"value": "cold", "label": "Cold & Snowy"},
    {"value": "mountainous", "label": "Mountainous"},
    {"value": "arid", "label": "Desert & Arid"},
]

INTEREST_OPTIONS: list[str] = [
    "Beach & Relaxation",
    "Adventure Sports",
    "Cultural Immersion",
    "Historical Sites",
    "Food & Wine",
    "Nightlife",
    "Hiking & Outdoors",
    "Photography",
    "Wellness & Spa",
    "Wildlife Encounters",
    "Water Activities",
    "Family-Friendly Fun",
]

CUISINE_OPTIONS: list[str] = [
    "Mediterranean",
    "Japanese",
    "Latin American",
    "Plant-Based",
    "Seafood",
    "Street Food",
    "Fine Dining",
    "Local Specialties",
]

FORM_STEPS: list[dict[str, str]] = [
    {
        "id": "traveler",
        "title": "Traveler Profile",
        "description": "Tell us about who is traveling and key contact details.",
    },
    {
        "id": "preferences",
        "title": "Trip Preferences",
        "description": "Share the experiences, climates, and cuisine you love.",
    },
    {
        "id": "review",
        "title": "Review & Consent",
        "description": "Confirm details so we can craft your vacation matches.",
    },
]

# Wire (camelCase) shape, matches what the form posts back
DEFAULT_FORM_STATE: dict = {
    "personal": {
        "fullName": "",
        "email": "",
        "phone": "",
        "homeAirport": "",
        "travelCompanions": "couple",
        "startDate": "",
        "endDate": "",
        "notes": "",
    },
    "preferences": {
        "budget": "midrange",
        "climate": ["temperate"],
        "interests": ["Cultural Immersion", "Food & Wine"],
        "accommodation": "Boutique hotel or design-forward stay",
        "cuisineFocus": ["Local Specialties"],
        "pace": "balanced",
        "mobilityConsiderations": "",
        "specialOccasion": "",
    },
}
