"""Planning engine: scores the destination catalog and builds vacation plans.

Modules:
    config          Weights, fit scores, daily rates, thresholds and tip texts
    trip_length     Nights between the requested dates
    scoring         Weighted request/destination match score
    pricing         Booking-option prices and trip price ranges
    enrichment      Template → request-specific DestinationPlan
    plan_generator  Ranking, fallback and final post-processing

Pipeline:
    calculate_trip_length → enrich_destination → score_destination
    → rank_destinations → finalize_destination → VacationPlan
"""
