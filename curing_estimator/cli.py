"""
Command line estimate.

Usage:
    curing-estimate --size 5000 --application-rate 400
    curing-estimate --size 5000 --application-rate 400 --actual-work-hours 4 --output html
    curing-estimate ... --customer-email pm@example.com --output url

Option values are passed through as raw strings and parsed by
form_parser, the same as form input. Omitted options use Settings defaults.
"""

import argparse
import logging
import sys

from .config import settings
from .email_summary import build_compose_url, build_summary, render_summary_html
from .exceptions import InvalidInput
from .form_parser import parse_estimate_form
from .models import MaterialType, WAGE_TIERS, wage_tier_label
from .pricing_engine import estimate
from .report import render_estimate_text

logger = logging.getLogger(__name__)

# Form field → --help text
_FORM_OPTIONS = {
    "job_name": "Job name",
    "address": "Job address",
    "date": "Job date, e.g. 06/14/2026",
    "customer_email": "Customer email (required for --output url)",
    "size": "Size of placement, sq ft",
    "application_rate": "Application rate, sq ft per gallon",
    "material_type": "Curing compound: " + " | ".join(m.value for m in MaterialType),
    "labor_base_wage": "Base wage tier, $/hr (see --list-wages)",
    "hourly_power_cost": "Hourly power cost, $",
    "commute_hours": "Commute hours",
    "actual_work_hours": "Actual work hours (omit for flat-fee hours)",
    "avg_time_per_trip": "Average minutes per drone trip",
    "avg_area_per_trip": "Average sq ft covered per trip",
    "app_rate_per_trip": "Drone reference application rate, sq ft per gallon",
    "overtime_hourly_charge": "Overtime charge, $/hr",
    "mobilization_cost": "Mobilization cost, $",
    "misc_rate": "Miscellaneous rate, %%",
    "markup_rate": "Markup rate, %%",
    "final_cure_price": "Final Cure price per 5 gal, $",
    "evaporation_retarder_price": "Evaporation Retarder price per 5 gal, $",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curing-estimate",
        description=f"{settings.COMPANY_NAME}: drone curing compound estimate",
    )
    for field, help_text in _FORM_OPTIONS.items():
        parser.add_argument("--" + field.replace("_", "-"), dest=field, help=help_text)
    parser.add_argument(
        "--output", choices=("text", "html", "url"), default="text",
        help="text: full breakdown; html: customer email body; url: Outlook compose link",
    )
    parser.add_argument("--list-wages", action="store_true", help="List base wage tiers and exit")
    return parser


def _form_from_args(args: argparse.Namespace) -> dict:
    form = {}
    for field in _FORM_OPTIONS:
        value = getattr(args, field)
        if value is not None:
            form["size_of_placement" if field == "size" else field] = value
    return form


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.list_wages:
        for wage in WAGE_TIERS.values():
            print(wage_tier_label(wage))
        return 0

    try:
        request = parse_estimate_form(_form_from_args(args))
        result = estimate(request)
    except InvalidInput as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.output == "text":
        print(render_estimate_text(result, request.details), end="")
        return 0

    summary = build_summary(result, request.details)
    if args.output == "html":
        print(render_summary_html(summary), end="")
        return 0

    try:
        print(build_compose_url(request.details.customer_email, summary))
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2
    return 0
