"""
Pricing engine tests: rollup, full pipeline, and input rejection.

Tests:
1-4.   Default FinalCure scenario
5-9.   Pipeline properties (determinism, reconciliation, non-negativity)
10-12. Overtime handling
13-21. Input rejection

No mocks except to prove stages never run on rejected input.
"""

import math
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from curing_estimator.exceptions import INVALID_REQUIRED_MESSAGE, DivisionHazard, InvalidInput
from curing_estimator.models import MaterialType
from curing_estimator.pricing_engine import PricingEngine, estimate
from curing_estimator.schemas import (
    JobSpec,
    LaborCost,
    MaterialCost,
    PricingConfig,
    TripPlan,
)


# ============================================================
# 1-4. Default FinalCure scenario
# ============================================================

def test_scenario_trip_and_hours(scenario_request):
    result = estimate(scenario_request)
    assert result.needed_trips == 5
    assert result.flat_fee_hours == pytest.approx(1.833333, abs=1e-6)
    assert result.used_actual_hours == result.flat_fee_hours
    assert result.overtime_hours == 0
    assert result.total_work_hours == pytest.approx(3.833333, abs=1e-6)


def test_scenario_costs(scenario_request):
    result = estimate(scenario_request)
    assert result.hourly_labor_cost == pytest.approx(48.0)
    assert result.total_labor_cost == pytest.approx(203.17, abs=0.005)
    assert result.material_cost == pytest.approx(305.775)
    assert result.mobilization_cost == 100.0
    assert result.misc_cost == pytest.approx(60.89, abs=0.005)
    assert result.markup == pytest.approx(145.62, abs=0.005)


def test_scenario_totals(scenario_request):
    result = estimate(scenario_request)
    assert result.total_cost == pytest.approx(815.46, abs=0.005)
    assert result.user_cost == pytest.approx(815.46, abs=0.005)
    assert result.total_unit_cost == pytest.approx(result.total_cost / 5000)


def test_engine_class_matches_module_function(scenario_request, engine):
    assert engine.estimate(scenario_request) == estimate(scenario_request)


# ============================================================
# 5-9. Pipeline properties
# ============================================================

def test_repeated_estimates_are_identical(scenario_request):
    first = estimate(scenario_request)
    second = estimate(scenario_request)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_user_cost_reconciles_with_overtime(build_request):
    for hours in (None, 1.0, 2.5, 8.0, 24.0):
        result = estimate(build_request(actual_work_hours=hours))
        assert result.user_cost - result.total_cost == pytest.approx(result.overtime_cost)


def test_quantities_never_negative(build_request):
    for size in (1.0, 800.0, 5000.0, 75000.0):
        for rate in (150.0, 400.0, 1600.0):
            for material in MaterialType:
                result = estimate(build_request(
                    size_sqft=size, application_rate=rate, material_type=material,
                ))
                assert result.overtime_hours >= 0
                assert result.flat_fee_hours >= 1
                assert result.material_cost >= 0
                assert result.total_labor_cost >= 0


def test_markup_excludes_material(build_request):
    """Changing only the material price moves misc, never markup's material share."""
    cheap = estimate(build_request(final_cure_price_per_5gal=50.0))
    pricey = estimate(build_request(final_cure_price_per_5gal=500.0))
    misc_delta = pricey.misc_cost - cheap.misc_cost
    assert pricey.markup - cheap.markup == pytest.approx(0.40 * misc_delta)


def test_result_is_read_only(scenario_request):
    result = estimate(scenario_request)
    with pytest.raises(ValidationError):
        result.user_cost = 0.0


# ============================================================
# 10-12. Overtime handling
# ============================================================

def test_overtime_hours_reach_price_through_labor_hours(build_request):
    """
    4 actual hours on a 1.833 flat-fee job. Overtime hours raise total work
    hours, so labor, misc and markup grow; the overtime cost itself nets out.
    """
    result = estimate(build_request(actual_work_hours=4.0))
    flat = 50 / 60 + 1
    assert result.overtime_hours == pytest.approx(4.0 - flat)
    assert result.overtime_cost == pytest.approx((4.0 - flat) * 65.0)
    assert result.total_labor_cost == pytest.approx(53.0 * 6.0)

    misc = 0.10 * (305.775 + 318.0 + 100.0)
    markup = 0.40 * (318.0 + 100.0 + misc)
    expected_total = 305.775 + 318.0 + 100.0 + misc + markup - result.overtime_cost
    assert result.misc_cost == pytest.approx(misc)
    assert result.markup == pytest.approx(markup)
    assert result.total_cost == pytest.approx(expected_total)
    assert result.user_cost == pytest.approx(expected_total + result.overtime_cost)
    assert result.user_cost == pytest.approx(305.775 + 318.0 + 100.0 + misc + markup)


def test_overtime_charge_never_moves_customer_price(build_request):
    """Overtime cost is subtracted from total_cost and added back in user_cost."""
    request = build_request(actual_work_hours=6.0)
    low = estimate(request.model_copy(update={
        "drone_ops": request.drone_ops.model_copy(update={"overtime_hourly_charge": 40.0}),
    }))
    high = estimate(request.model_copy(update={
        "drone_ops": request.drone_ops.model_copy(update={"overtime_hourly_charge": 90.0}),
    }))
    assert low.misc_cost == high.misc_cost
    assert low.markup == high.markup
    assert low.user_cost == pytest.approx(high.user_cost)
    assert high.total_cost < low.total_cost
    assert high.overtime_cost > low.overtime_cost


def test_aggregate_from_stage_records():
    engine = PricingEngine()
    pricing = PricingConfig(
        mobilization_cost=0.0, misc_rate_pct=0.0, markup_rate_pct=0.0,
        final_cure_price_per_5gal=0.0, evap_retarder_price_per_5gal=0.0,
    )
    result = engine.aggregate(
        JobSpec(size_sqft=1000.0, application_rate_sqft_per_gal=500.0),
        TripPlan(needed_trips=1, flat_fee_hours=1.5),
        LaborCost(
            used_actual_hours=3.5, overtime_hours=2.0, total_work_hours=5.5,
            hourly_labor_cost=48.0, total_labor_cost=200.0, overtime_cost=130.0,
        ),
        MaterialCost(price_per_5gal=100.0, unit_cost=0.04, material_cost=40.0),
        pricing,
        65.0,
    )
    assert result.total_cost == pytest.approx(240.0 - 130.0)
    assert result.user_cost == pytest.approx(240.0)
    assert result.total_unit_cost == pytest.approx(0.11)


# ============================================================
# 13-21. Input rejection
# ============================================================

def _with_job(request, **job_updates):
    return request.model_copy(update={"job": request.job.model_copy(update=job_updates)})


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_size_rejected(scenario_request, value):
    with pytest.raises(InvalidInput) as exc:
        estimate(_with_job(scenario_request, size_sqft=value))
    assert str(exc.value) == INVALID_REQUIRED_MESSAGE
    assert exc.value.fields == ["size_sqft"]


def test_non_finite_wage_rejected(build_request):
    with pytest.raises(InvalidInput) as exc:
        estimate(build_request(base_wage=math.nan))
    assert exc.value.fields == ["base_wage_per_hour"]


def test_zero_application_rate_is_division_hazard(scenario_request):
    with pytest.raises(DivisionHazard) as exc:
        estimate(_with_job(scenario_request, application_rate_sqft_per_gal=0.0))
    assert isinstance(exc.value, InvalidInput)
    assert "application_rate_sqft_per_gal" in exc.value.fields


def test_zero_area_per_trip_is_division_hazard(build_request):
    with pytest.raises(DivisionHazard) as exc:
        estimate(build_request(avg_area_per_trip=0.0))
    assert exc.value.fields == ["avg_area_per_trip_sqft"]


def test_negative_size_rejected(scenario_request):
    with pytest.raises(InvalidInput) as exc:
        estimate(_with_job(scenario_request, size_sqft=-100.0))
    assert not isinstance(exc.value, DivisionHazard)


def test_wage_outside_tiers_rejected(build_request):
    with pytest.raises(InvalidInput, match="not a wage tier"):
        estimate(build_request(base_wage=31.0))


def test_stages_never_run_on_rejected_input(build_request):
    request = build_request(mobilization_cost=math.inf)
    with patch("curing_estimator.pricing_engine.plan_trips") as plan, \
            patch("curing_estimator.pricing_engine.calculate_material_cost") as material:
        with pytest.raises(InvalidInput, match="pricing.mobilization_cost"):
            estimate(request)
    plan.assert_not_called()
    material.assert_not_called()


@pytest.mark.parametrize("overrides, field", [
    ({"mobilization_cost": math.nan}, "pricing.mobilization_cost"),
    ({"actual_work_hours": math.nan}, "labor.actual_work_hours"),
])
def test_non_finite_config_value_is_invalid_input(build_request, overrides, field):
    with pytest.raises(InvalidInput) as exc:
        estimate(build_request(**overrides))
    assert exc.value.fields == [field]


def test_negative_config_value_rejected_not_clamped(build_request):
    request = build_request(mobilization_cost=-50.0, misc_rate_pct=-10.0)
    assert request.pricing.mobilization_cost == -50.0
    with pytest.raises(InvalidInput, match="Must not be negative") as exc:
        estimate(request)
    assert exc.value.fields == ["pricing.mobilization_cost", "pricing.misc_rate_pct"]
