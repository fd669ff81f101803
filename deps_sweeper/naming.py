"""Branch and commit naming for update runs."""

from datetime import date

from deps_sweeper.constants import UPDATE_BRANCH_PREFIX, UPDATE_COMMIT_PREFIX


def format_day(day: date) -> str:
    """Format a date as day-month-year, e.g. 18-10-2026 or 5-3-2026."""
    return f"{day.day}-{day.month}-{day.year}"


def branch_name(day: date) -> str:
    """Update branch name for a calendar day."""
    return f"{UPDATE_BRANCH_PREFIX}-{format_day(day)}"


def commit_message(day: date) -> str:
    """Commit message (and PR body) for a calendar day."""
    return f"{UPDATE_COMMIT_PREFIX} {format_day(day)}"
