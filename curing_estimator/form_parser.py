"""
Estimate form parsing: raw form strings to a validated EstimateRequest.

Every numeric field is parsed exactly once, here. A field that does not
parse is an error; there is no fallback to NaN or to a default. Fields
left out of the form entirely take the shop defaults from Settings.
"""

import logging
import math
from typing import Mapping, Optional

from pydantic import ValidationError

from .config import Settings, settings as default_settings
from .exceptions import INVALID_REQUIRED_MESSAGE, InvalidInput
from .models import MaterialType
from .schemas import (
    DroneOpsConfig,
    EstimateRequest,
    JobDetails,
    JobSpec,
    LaborConfig,
    PricingConfig,
)

logger = logging.getLogger(__name__)

# Form field → Settings attribute supplying its default
_DEFAULTED_FIELDS = {
    "labor_base_wage": "BASE_WAGE_DEFAULT",
    "hourly_power_cost": "HOURLY_POWER_COST",
    "commute_hours": "COMMUTE_HOURS",
    "avg_time_per_trip": "AVG_MINUTES_PER_TRIP",
    "avg_area_per_trip": "AVG_AREA_PER_TRIP_SQFT",
    "app_rate_per_trip": "REFERENCE_APP_RATE_PER_TRIP",
    "overtime_hourly_charge": "OVERTIME_HOURLY_CHARGE",
    "mobilization_cost": "MOBILIZATION_COST",
    "misc_rate": "MISC_RATE_PCT",
    "markup_rate": "MARKUP_RATE_PCT",
    "final_cure_price": "FINAL_CURE_PRICE_PER_5GAL",
    "evaporation_retarder_price": "EVAP_RETARDER_PRICE_PER_5GAL",
}

_REQUIRED_FIELDS = ("size_of_placement", "application_rate", "labor_base_wage")


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value, field: str) -> float:
    """
    Parse a numeric form value. Handles '1,250', '$122.31', ' 40 '.
    Raises InvalidInput for blanks, junk, NaN and infinities.
    """
    if _is_blank(value):
        raise InvalidInput(f"{field} is required", fields=[field])
    if isinstance(value, bool):
        raise InvalidInput(f"Invalid number for {field}: {value!r}", fields=[field])
    try:
        number = float(str(value).strip().lstrip("$").replace(",", ""))
    except (ValueError, TypeError):
        raise InvalidInput(f"Invalid number for {field}: {value!r}", fields=[field])
    if not math.isfinite(number):
        raise InvalidInput(f"Invalid number for {field}: {value!r}", fields=[field])
    return number


def parse_optional_number(value, field: str) -> Optional[float]:
    """Blank means 'not provided'; anything else must parse."""
    if _is_blank(value):
        return None
    return parse_number(value, field)


def parse_estimate_form(form: Mapping[str, object], settings: Settings = default_settings) -> EstimateRequest:
    """
    Build an EstimateRequest from raw form values.

    Expected keys: size_of_placement, application_rate, material_type,
    labor_base_wage, actual_work_hours, the drone/pricing fields listed in
    _DEFAULTED_FIELDS, and the display fields job_name, address, date,
    customer_email.
    """
    values = {
        field: form[field] if field in form else getattr(settings, attr)
        for field, attr in _DEFAULTED_FIELDS.items()
    }

    # Required fields share one user-facing message
    required = {}
    bad = []
    for field in _REQUIRED_FIELDS:
        raw = form.get(field) if field != "labor_base_wage" else values[field]
        try:
            required[field] = parse_number(raw, field)
        except InvalidInput:
            bad.append(field)
    if bad:
        logger.info("Rejected estimate form, bad fields: %s", ", ".join(bad))
        raise InvalidInput(INVALID_REQUIRED_MESSAGE, fields=bad)

    numbers = {
        field: parse_number(values[field], field)
        for field in _DEFAULTED_FIELDS
        if field != "labor_base_wage"
    }
    actual_work_hours = parse_optional_number(form.get("actual_work_hours"), "actual_work_hours")

    try:
        material_type = MaterialType.parse(form.get("material_type") or MaterialType.FINAL_CURE)
    except ValueError as e:
        raise InvalidInput(str(e), fields=["material_type"]) from e

    customer_email = str(form.get("customer_email") or "").strip() or None

    try:
        return EstimateRequest(
            job=JobSpec(
                size_sqft=required["size_of_placement"],
                application_rate_sqft_per_gal=required["application_rate"],
                material_type=material_type,
            ),
            labor=LaborConfig(
                base_wage_per_hour=required["labor_base_wage"],
                hourly_power_cost=numbers["hourly_power_cost"],
                commute_hours=numbers["commute_hours"],
                actual_work_hours=actual_work_hours,
            ),
            drone_ops=DroneOpsConfig(
                avg_minutes_per_trip=numbers["avg_time_per_trip"],
                avg_area_per_trip_sqft=numbers["avg_area_per_trip"],
                reference_application_rate_per_trip=numbers["app_rate_per_trip"],
                overtime_hourly_charge=numbers["overtime_hourly_charge"],
            ),
            pricing=PricingConfig(
                mobilization_cost=numbers["mobilization_cost"],
                misc_rate_pct=numbers["misc_rate"],
                markup_rate_pct=numbers["markup_rate"],
                final_cure_price_per_5gal=numbers["final_cure_price"],
                evap_retarder_price_per_5gal=numbers["evaporation_retarder_price"],
            ),
            details=JobDetails(
                job_name=str(form.get("job_name") or ""),
                address=str(form.get("address") or ""),
                date=str(form.get("date") or ""),
                customer_email=customer_email,
            ),
        )
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        raise InvalidInput(f"Invalid estimate inputs: {', '.join(fields)}", fields=fields) from e
