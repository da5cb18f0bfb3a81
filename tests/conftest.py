"""
Shared test fixtures: the default FinalCure scenario and a pricing engine.
"""

import pytest

from curing_estimator.config import Settings
from curing_estimator.models import MaterialType
from curing_estimator.pricing_engine import PricingEngine
from curing_estimator.schemas import (
    DroneOpsConfig,
    EstimateRequest,
    JobDetails,
    JobSpec,
    LaborConfig,
    PricingConfig,
)


def _make_request(size_sqft=5000.0, application_rate=400.0,
                  material_type=MaterialType.FINAL_CURE, actual_work_hours=None,
                  base_wage=30.0, avg_area_per_trip=4500.0, **pricing_overrides):
    """Scenario request built from shop defaults, with per-test overrides."""
    defaults = Settings(_env_file=None)
    return EstimateRequest(
        job=JobSpec(
            size_sqft=size_sqft,
            application_rate_sqft_per_gal=application_rate,
            material_type=material_type,
        ),
        labor=LaborConfig.from_settings(
            defaults, base_wage_per_hour=base_wage, actual_work_hours=actual_work_hours,
        ),
        drone_ops=DroneOpsConfig.from_settings(defaults, avg_area_per_trip_sqft=avg_area_per_trip),
        pricing=PricingConfig.from_settings(defaults, **pricing_overrides),
        details=JobDetails(
            job_name="Riverside Warehouse Slab",
            address="1200 Industrial Pkwy",
            date="06/14/2026",
            customer_email="pm@example.com",
        ),
    )


@pytest.fixture
def scenario_request():
    """5,000 sq ft FinalCure at 400 sq ft/gal, default config, no override."""
    return _make_request()


@pytest.fixture
def engine():
    return PricingEngine()


@pytest.fixture
def build_request():
    """Factory for scenario variants: build_request(size_sqft=9000, actual_work_hours=4)."""
    return _make_request
