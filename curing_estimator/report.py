"""
Diagnostic estimate rendering: every EstimateResult field as plain text.

Values keep full precision in EstimateResult; rounding happens only here
and in the email summary.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .schemas import EstimateResult, JobDetails


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round the exact binary value of a float half-up.
    305.775 is stored as 305.77499..., so it rounds to 305.77.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def money(value: float) -> str:
    return f"${round_half_up(value, 2):.2f}"


def hours(value: float) -> str:
    return f"{round_half_up(value, 2):.2f}"


def plain_number(value: float) -> str:
    """5000.0 → '5000', 5000.5 → '5000.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def render_estimate_text(result: EstimateResult, details: Optional[JobDetails] = None) -> str:
    details = details or JobDetails()
    lines = [
        f"Job Name: {details.job_name}",
        f"Address: {details.address}",
        f"Date: {details.date}",
        f"Material: {result.material_type.value}",
        f"Size of Project: {plain_number(result.size_sqft)} sqft",
        f"Needed Drone Trips: {result.needed_trips}",
        f"Flat-Fee Hours: {hours(result.flat_fee_hours)} hrs",
        f"Actual Work Hours: {hours(result.used_actual_hours)} hrs",
        f"Overtime (hrs): {hours(result.overtime_hours)}",
        f"Total Work Hours: {hours(result.total_work_hours)} hrs",
        f"Hourly Labor Cost: {money(result.hourly_labor_cost)}",
        f"Material Unit Cost: {money(result.material_unit_cost)}",
        f"Material Cost: {money(result.material_cost)}",
        f"Total Labor Cost: {money(result.total_labor_cost)}",
        f"Overtime Cost: {money(result.overtime_cost)}",
        f"Mobilization Cost: {money(result.mobilization_cost)}",
        f"Miscellaneous Cost: {money(result.misc_cost)}",
        f"Markup: {money(result.markup)}",
        f"Total Cost: {money(result.total_cost)}",
        f"Total Unit Cost: {money(result.total_unit_cost)}",
        f"User Cost: {money(result.user_cost)}",
    ]
    return "\n".join(lines) + "\n"
