"""
Trip planner: sizes a job into whole drone trips.

A drone covers avg_area_per_trip_sqft per trip when spraying at its
reference rate. A job asking for a heavier application (fewer sq ft per
gallon) covers less area per trip, so more trips are needed.
"""

import math

from .schemas import DroneOpsConfig, TripPlan

# Setup/buffer hour added to every quote
SETUP_BUFFER_HOURS = 1.0


def plan_trips(size_sqft, application_rate, drone_ops):
    # type: (float, float, DroneOpsConfig) -> TripPlan
    """
    Args:
        size_sqft: Placement size in square feet.
        application_rate: Requested coverage, sq ft per gallon. Must be > 0.
        drone_ops: Nominal throughput of one drone. avg_area_per_trip_sqft must be > 0.

    Returns:
        TripPlan with needed_trips (rounded up) and flat_fee_hours.
    """
    coverage_ratio = drone_ops.reference_application_rate_per_trip / application_rate
    needed_trips = math.ceil((size_sqft / drone_ops.avg_area_per_trip_sqft) * coverage_ratio)
    flat_fee_hours = (needed_trips * drone_ops.avg_minutes_per_trip) / 60.0 + SETUP_BUFFER_HOURS
    return TripPlan(needed_trips=needed_trips, flat_fee_hours=flat_fee_hours)
