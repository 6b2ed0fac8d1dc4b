"""Single-column theme covering the common jsonresume sections."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape


TEMPLATE_DIR = Path(__file__).parent
TEMPLATE_NAME = "resume.html.j2"

MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def format_date(date_str: str | None) -> str:
    """Format ISO 8601 date for display."""
    if not date_str:
        return ""

    parts = date_str.split("-")
    if len(parts) == 1:
        return parts[0]

    try:
        month_idx = int(parts[1]) - 1
    except ValueError:
        return date_str
    if 0 <= month_idx < 12:
        return f"{MONTHS[month_idx]} {parts[0]}"
    return date_str


def format_date_range(start: str | None, end: str | None) -> str:
    if not start and not end:
        return ""

    start_str = format_date(start)
    end_str = format_date(end) if end else "Present"

    if start_str and end_str:
        return f"{start_str} - {end_str}"
    return start_str or end_str


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["date"] = format_date
    env.globals["date_range"] = format_date_range
    return env


def render(resume: dict) -> str:
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(resume=resume, basics=resume.get("basics", {}))
