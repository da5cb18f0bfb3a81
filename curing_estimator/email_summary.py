"""
Customer email summary: the rounded subset of an estimate, its HTML
table body, and an Outlook compose link carrying that body.

Only builds strings. Opening the link is up to the caller.
"""

from html import escape
from typing import Optional
from urllib.parse import quote

from .config import settings
from .report import round_half_up
from .schemas import EstimateResult, EstimateSummary, JobDetails

OUTLOOK_COMPOSE_URL = "ms-outlook://compose"

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "!~*'()"


def build_summary(result: EstimateResult, details: Optional[JobDetails] = None) -> EstimateSummary:
    """Currency and hours to 2 places; size and flat-fee hours to whole numbers."""
    details = details or JobDetails()
    return EstimateSummary(
        job_name=details.job_name,
        address=details.address,
        date=details.date,
        overtime_hourly_charge=round_half_up(result.overtime_hourly_charge, 2),
        overtime_hours=round_half_up(result.overtime_hours, 2),
        overtime_cost=round_half_up(result.overtime_cost, 2),
        total_unit_cost=round_half_up(result.total_unit_cost, 2),
        size=int(round_half_up(result.size_sqft, 0)),
        user_cost=round_half_up(result.user_cost, 2),
        flat_fee_hours=int(round_half_up(result.flat_fee_hours, 0)),
    )


def _whole_dollars(value: float) -> str:
    return f"{int(round_half_up(value, 0)):,}"


def render_summary_html(summary: EstimateSummary) -> str:
    """
    HTML body for the customer email. Size and user cost are shown with
    thousands separators and no decimals.
    """
    rows = [
        ("Job Name", escape(summary.job_name)),
        ("Address", escape(summary.address)),
        ("Date", escape(summary.date)),
        ("Overtime Hourly Charge", f"${summary.overtime_hourly_charge:.2f}"),
        ("Overtime (hrs)", f"{summary.overtime_hours:.2f}"),
        ("Overtime Cost", f"${summary.overtime_cost:.2f}"),
        ("Total Unit Cost", f"${summary.total_unit_cost:.2f}"),
        ("Size of Project", f"{summary.size:,} sqft"),
        ("User Cost", f"${_whole_dollars(summary.user_cost)}"),
    ]
    table_rows = "\n".join(
        f"      <tr><td>{label}</td><td>{value}</td></tr>" for label, value in rows
    )
    hours = summary.flat_fee_hours
    return (
        "<html>\n"
        "  <body>\n"
        '    <table border="1" cellspacing="0" cellpadding="5">\n'
        "      <tr>\n"
        "        <th>Field</th>\n"
        "        <th>Value</th>\n"
        "      </tr>\n"
        f"{table_rows}\n"
        "    </table>\n"
        "    <br/><br/>\n"
        "    <p>\n"
        "      Please note that this estimate assumes no overtime. "
        f"The flat-rate is only applicable for the first {hours} hours.\n"
        f"      After {hours} hours, the overtime rate applies, "
        "which will be reflected in the final invoice.\n"
        "    </p>\n"
        "  </body>\n"
        "</html>\n"
    )


def build_compose_url(customer_email, summary, subject=None):
    # type: (Optional[str], Optional[EstimateSummary], Optional[str]) -> str
    """Outlook compose link with subject and HTML body percent-encoded."""
    if not customer_email or not customer_email.strip():
        raise ValueError("Please enter a valid customer email.")
    if summary is None:
        raise ValueError("Please generate an estimate first.")

    subject = subject or settings.EMAIL_SUBJECT
    body = render_summary_html(summary)
    return (
        f"{OUTLOOK_COMPOSE_URL}?to={quote(customer_email.strip(), safe='@')}"
        f"&subject={quote(subject, safe=_URI_COMPONENT_SAFE)}"
        f"&body={quote(body, safe=_URI_COMPONENT_SAFE)}"
    )
