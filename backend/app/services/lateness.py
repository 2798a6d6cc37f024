"""
Lateness evaluation for projects.
"""
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    return value


def is_due_date_late(due_on: Optional[DateLike], today: DateLike) -> bool:
    """True when the due date is strictly before today. No due date is never late."""
    if due_on is None:
        return False
    return _as_date(due_on) < _as_date(today)


def is_late(project, today: DateLike) -> bool:
    """
    Check whether a project is past its due date.

    Completion state is not considered; a completed project can still be late.
    """
    return is_due_date_late(project.due_on, today)
