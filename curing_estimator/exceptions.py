"""
Estimator errors.

InvalidInput is raised before any pipeline stage runs, so a caller never
sees a partial estimate.
"""


class InvalidInput(ValueError):
    """A required numeric input is missing, unparseable or not finite."""

    def __init__(self, message: str, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])


class DivisionHazard(InvalidInput):
    """A divisor the pipeline relies on (application rate, area per trip) is zero."""


# Shown to the user when size, application rate or base wage will not parse
INVALID_REQUIRED_MESSAGE = (
    "Invalid input. Please enter valid numbers for Size, Application Rate, and Base Wage."
)
