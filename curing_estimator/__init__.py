"""
Drone curing-compound job estimator.

    from curing_estimator import estimate, parse_estimate_form
    result = estimate(parse_estimate_form({"size_of_placement": "5000", "application_rate": "400"}))
"""

from .exceptions import DivisionHazard, InvalidInput
from .form_parser import parse_estimate_form
from .models import MaterialType
from .pricing_engine import PricingEngine, estimate
from .schemas import (
    DroneOpsConfig,
    EstimateRequest,
    EstimateResult,
    EstimateSummary,
    JobDetails,
    JobSpec,
    LaborConfig,
    PricingConfig,
)

__version__ = "1.0.0"
