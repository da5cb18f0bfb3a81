from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import Settings, settings as default_settings
from .models import MaterialType


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# --- Inputs ---

class JobSpec(_Record):
    size_sqft: float
    application_rate_sqft_per_gal: float
    material_type: MaterialType = MaterialType.FINAL_CURE


class LaborConfig(_Record):
    base_wage_per_hour: float
    hourly_power_cost: float
    commute_hours: float
    actual_work_hours: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings = default_settings, **overrides) -> "LaborConfig":
        values = {
            "base_wage_per_hour": settings.BASE_WAGE_DEFAULT,
            "hourly_power_cost": settings.HOURLY_POWER_COST,
            "commute_hours": settings.COMMUTE_HOURS,
        }
        values.update(overrides)
        return cls(**values)


class DroneOpsConfig(_Record):
    avg_minutes_per_trip: float
    avg_area_per_trip_sqft: float
    reference_application_rate_per_trip: float
    overtime_hourly_charge: float

    @classmethod
    def from_settings(cls, settings: Settings = default_settings, **overrides) -> "DroneOpsConfig":
        values = {
            "avg_minutes_per_trip": settings.AVG_MINUTES_PER_TRIP,
            "avg_area_per_trip_sqft": settings.AVG_AREA_PER_TRIP_SQFT,
            "reference_application_rate_per_trip": settings.REFERENCE_APP_RATE_PER_TRIP,
            "overtime_hourly_charge": settings.OVERTIME_HOURLY_CHARGE,
        }
        values.update(overrides)
        return cls(**values)


class PricingConfig(_Record):
    mobilization_cost: float
    misc_rate_pct: float
    markup_rate_pct: float
    final_cure_price_per_5gal: float
    evap_retarder_price_per_5gal: float

    @classmethod
    def from_settings(cls, settings: Settings = default_settings, **overrides) -> "PricingConfig":
        values = {
            "mobilization_cost": settings.MOBILIZATION_COST,
            "misc_rate_pct": settings.MISC_RATE_PCT,
            "markup_rate_pct": settings.MARKUP_RATE_PCT,
            "final_cure_price_per_5gal": settings.FINAL_CURE_PRICE_PER_5GAL,
            "evap_retarder_price_per_5gal": settings.EVAP_RETARDER_PRICE_PER_5GAL,
        }
        values.update(overrides)
        return cls(**values)


class JobDetails(_Record):
    """Display-only job metadata. Never enters the arithmetic."""
    job_name: str = ""
    address: str = ""
    date: str = ""
    customer_email: Optional[str] = None


class EstimateRequest(_Record):
    """One immutable input snapshot per estimate."""
    job: JobSpec
    labor: LaborConfig
    drone_ops: DroneOpsConfig
    pricing: PricingConfig
    details: JobDetails = Field(default_factory=JobDetails)


# --- Stage outputs ---

class TripPlan(_Record):
    needed_trips: int
    flat_fee_hours: float


class LaborCost(_Record):
    used_actual_hours: float
    overtime_hours: float
    total_work_hours: float
    hourly_labor_cost: float
    total_labor_cost: float
    overtime_cost: float


class MaterialCost(_Record):
    price_per_5gal: float
    unit_cost: float
    material_cost: float


# --- Outputs ---

class EstimateResult(_Record):
    material_type: MaterialType
    size_sqft: float
    needed_trips: int
    flat_fee_hours: float
    used_actual_hours: float
    overtime_hours: float
    total_work_hours: float
    hourly_labor_cost: float
    overtime_hourly_charge: float
    material_unit_cost: float
    material_cost: float
    total_labor_cost: float
    overtime_cost: float
    mobilization_cost: float
    misc_cost: float
    markup: float
    total_cost: float
    total_unit_cost: float
    user_cost: float


class EstimateSummary(_Record):
    """Rounded subset for the customer email. Size and flat-fee hours are whole numbers."""
    job_name: str
    address: str
    date: str
    overtime_hourly_charge: float
    overtime_hours: float
    overtime_cost: float
    total_unit_cost: float
    size: int
    user_cost: float
    flat_fee_hours: int
