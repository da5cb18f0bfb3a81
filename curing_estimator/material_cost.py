"""
Material cost model: curing compound priced per 5-gallon pail.
"""

from .models import MaterialType
from .schemas import MaterialCost, PricingConfig

GALLONS_PER_PAIL = 5.0


def price_per_pail(material_type: MaterialType, pricing: PricingConfig) -> float:
    if material_type is MaterialType.FINAL_CURE:
        return pricing.final_cure_price_per_5gal
    return pricing.evap_retarder_price_per_5gal


def calculate_material_cost(material_type, application_rate, size_sqft, pricing):
    # type: (MaterialType, float, float, PricingConfig) -> MaterialCost
    """
    Cost per sq ft = price per gallon / coverage per gallon.
    application_rate must be > 0; the pipeline rejects zero before this runs.
    """
    pail_price = price_per_pail(material_type, pricing)
    unit_cost = (pail_price / GALLONS_PER_PAIL) / application_rate
    return MaterialCost(
        price_per_5gal=pail_price,
        unit_cost=unit_cost,
        material_cost=unit_cost * size_sqft,
    )
