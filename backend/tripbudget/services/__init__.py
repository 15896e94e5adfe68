"""Budget services.

Modules:
    destination_resolver  Destination profile and travel-style lookup
    budget_estimator      Travel cost and itemized budget breakdown
    request_validator     Strict checks on inbound estimate requests

Pipeline:
    validate_trip_request → BudgetEstimator.estimate
        (resolve_destination, resolve_style, calculate_travel_cost)
"""
