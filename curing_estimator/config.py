from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "Drone Curing Services"
    EMAIL_SUBJECT: str = "Concrete Curing Estimate"
    LOG_LEVEL: str = "WARNING"

    # Labor defaults
    BASE_WAGE_DEFAULT: float = 30.00  # Entry-Level Skilled tier
    HOURLY_POWER_COST: float = 5.00
    COMMUTE_HOURS: float = 2.0

    # Drone operations, one drone's nominal throughput
    AVG_MINUTES_PER_TRIP: float = 10.0
    AVG_AREA_PER_TRIP_SQFT: float = 4500.0
    REFERENCE_APP_RATE_PER_TRIP: float = 1600.0
    OVERTIME_HOURLY_CHARGE: float = 65.00

    # Pricing
    MOBILIZATION_COST: float = 100.00
    MISC_RATE_PCT: float = 10.0
    MARKUP_RATE_PCT: float = 40.0
    FINAL_CURE_PRICE_PER_5GAL: float = 122.31
    EVAP_RETARDER_PRICE_PER_5GAL: float = 21.87

    class Config:
        env_file = ".env"


settings = Settings()
