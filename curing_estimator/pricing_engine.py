"""
Pricing Engine: the estimate pipeline.

Validates the request once, then runs the four stages in order:
trip planning → labor → material → pricing rollup.
Pure math. No I/O, no state kept between calls.

Input: EstimateRequest
Output: EstimateResult
"""

import logging
import math

from .exceptions import INVALID_REQUIRED_MESSAGE, DivisionHazard, InvalidInput
from .labor_calculator import calculate_labor
from .material_cost import calculate_material_cost
from .models import WAGE_TIERS
from .schemas import (
    EstimateRequest,
    EstimateResult,
    JobSpec,
    LaborCost,
    MaterialCost,
    PricingConfig,
    TripPlan,
)
from .trip_planner import plan_trips

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


class PricingEngine:
    """
    Runs one estimate. Holds no state; every call works only on its own request.
    """

    def estimate(self, request: EstimateRequest) -> EstimateResult:
        """Validate, then run trip planning → labor → material → pricing."""
        try:
            self.validate(request)
        except InvalidInput as e:
            logger.info("Estimate rejected: %s", e)
            raise

        job = request.job
        ops = request.drone_ops

        trip_plan = plan_trips(job.size_sqft, job.application_rate_sqft_per_gal, ops)
        labor_cost = calculate_labor(
            trip_plan.flat_fee_hours,
            request.labor.actual_work_hours,
            request.labor,
            ops.overtime_hourly_charge,
        )
        material = calculate_material_cost(
            job.material_type, job.application_rate_sqft_per_gal, job.size_sqft, request.pricing,
        )
        result = self.aggregate(
            job, trip_plan, labor_cost, material, request.pricing, ops.overtime_hourly_charge,
        )

        logger.info(
            "Estimate for %s sq ft %s: %d trips, %.2f flat-fee hrs, user cost $%.2f",
            job.size_sqft, job.material_type.value, result.needed_trips,
            result.flat_fee_hours, result.user_cost,
        )
        return result

    def validate(self, request: EstimateRequest) -> None:
        """
        Reject inputs the pipeline cannot price. Raises InvalidInput
        (DivisionHazard for zero divisors) before any stage runs.
        """
        job = request.job
        required = {
            "size_sqft": job.size_sqft,
            "application_rate_sqft_per_gal": job.application_rate_sqft_per_gal,
            "base_wage_per_hour": request.labor.base_wage_per_hour,
        }
        bad = [name for name, value in required.items() if not _is_number(value)]
        if bad:
            raise InvalidInput(INVALID_REQUIRED_MESSAGE, fields=bad)

        non_finite = [
            f"{group}.{name}"
            for group, record in (
                ("labor", request.labor),
                ("drone_ops", request.drone_ops),
                ("pricing", request.pricing),
            )
            for name, value in record.model_dump().items()
            if value is not None and not _is_number(value)
        ]
        if non_finite:
            raise InvalidInput(
                f"Non-numeric or non-finite values: {', '.join(non_finite)}",
                fields=non_finite,
            )

        divisors = {
            "size_sqft": job.size_sqft,
            "application_rate_sqft_per_gal": job.application_rate_sqft_per_gal,
            "avg_area_per_trip_sqft": request.drone_ops.avg_area_per_trip_sqft,
        }
        zero = [name for name, value in divisors.items() if value == 0]
        if zero:
            raise DivisionHazard(f"Must not be zero: {', '.join(zero)}", fields=zero)

        negative = [name for name, value in divisors.items() if value < 0]
        if negative:
            raise InvalidInput(f"Must be positive: {', '.join(negative)}", fields=negative)

        # Rejected, never clamped to zero
        below_zero = [
            f"{group}.{name}"
            for group, record in (
                ("labor", request.labor),
                ("drone_ops", request.drone_ops),
                ("pricing", request.pricing),
            )
            for name, value in record.model_dump().items()
            if value is not None and value < 0
        ]
        if below_zero:
            raise InvalidInput(
                f"Must not be negative: {', '.join(below_zero)}",
                fields=below_zero,
            )

        wage = request.labor.base_wage_per_hour
        if wage not in WAGE_TIERS.values():
            raise InvalidInput(
                f"Base wage ${wage} is not a wage tier. "
                f"Available: {sorted(WAGE_TIERS.values())}",
                fields=["base_wage_per_hour"],
            )

    def aggregate(self, job, trip_plan, labor_cost, material, pricing, overtime_hourly_charge):
        # type: (JobSpec, TripPlan, LaborCost, MaterialCost, PricingConfig, float) -> EstimateResult
        """
        Misc, markup and the final price.

        Overtime stays out of the misc and markup bases: it is subtracted from
        total_cost and added back only in user_cost, so it never carries margin.
        Markup excludes material; material is passed through at cost.
        """
        material_cost = material.material_cost
        total_labor_cost = labor_cost.total_labor_cost
        overtime_cost = labor_cost.overtime_cost
        mobilization_cost = pricing.mobilization_cost

        misc_cost = (pricing.misc_rate_pct / 100.0) * (
            material_cost + total_labor_cost + mobilization_cost
        )
        markup = (pricing.markup_rate_pct / 100.0) * (
            total_labor_cost + mobilization_cost + misc_cost
        )
        total_cost = (
            material_cost + total_labor_cost + mobilization_cost + misc_cost + markup
            - overtime_cost
        )
        user_cost = total_cost + overtime_cost

        return EstimateResult(
            material_type=job.material_type,
            size_sqft=job.size_sqft,
            needed_trips=trip_plan.needed_trips,
            flat_fee_hours=trip_plan.flat_fee_hours,
            used_actual_hours=labor_cost.used_actual_hours,
            overtime_hours=labor_cost.overtime_hours,
            total_work_hours=labor_cost.total_work_hours,
            hourly_labor_cost=labor_cost.hourly_labor_cost,
            overtime_hourly_charge=overtime_hourly_charge,
            material_unit_cost=material.unit_cost,
            material_cost=material_cost,
            total_labor_cost=total_labor_cost,
            overtime_cost=overtime_cost,
            mobilization_cost=mobilization_cost,
            misc_cost=misc_cost,
            markup=markup,
            total_cost=total_cost,
            total_unit_cost=total_cost / job.size_sqft,
            user_cost=user_cost,
        )


def estimate(request: EstimateRequest) -> EstimateResult:
    """Run one estimate. See PricingEngine.estimate."""
    return PricingEngine().estimate(request)
