"""
Labor cost model.

Flat-fee hours come from the trip plan. Hours worked beyond them are
overtime, billed at the flat overtime charge instead of the loaded wage.
Commute is billed once per job.
"""

import logging
from typing import Optional

from .schemas import LaborCost, LaborConfig

logger = logging.getLogger(__name__)


# Payroll taxes & benefits (35%) + overhead (25%), applied to the base wage
LABOR_BURDEN_MULTIPLIER = 1.60


def loaded_hourly_rate(base_wage_per_hour: float) -> float:
    """Base wage plus burden."""
    return base_wage_per_hour * LABOR_BURDEN_MULTIPLIER


def calculate_labor(flat_fee_hours, actual_work_hours, labor, overtime_hourly_charge):
    # type: (float, Optional[float], LaborConfig, float) -> LaborCost
    """
    Args:
        flat_fee_hours: From TripPlan.
        actual_work_hours: Hours actually worked, or None to bill flat-fee hours only.
        labor: Wage, power and commute inputs.
        overtime_hourly_charge: $/hr billed for each overtime hour.
    """
    used_actual_hours = flat_fee_hours if actual_work_hours is None else actual_work_hours
    overtime_hours = max(0.0, used_actual_hours - flat_fee_hours)
    if overtime_hours:
        logger.debug("Overtime: %.2f hrs beyond %.2f flat-fee hrs", overtime_hours, flat_fee_hours)

    total_work_hours = flat_fee_hours + overtime_hours + labor.commute_hours
    hourly_labor_cost = loaded_hourly_rate(labor.base_wage_per_hour)
    total_labor_cost = (hourly_labor_cost + labor.hourly_power_cost) * total_work_hours
    overtime_cost = overtime_hours * overtime_hourly_charge

    return LaborCost(
        used_actual_hours=used_actual_hours,
        overtime_hours=overtime_hours,
        total_work_hours=total_work_hours,
        hourly_labor_cost=hourly_labor_cost,
        total_labor_cost=total_labor_cost,
        overtime_cost=overtime_cost,
    )
