"""FastAPI dependency utilities."""

from datetime import date, datetime

from offboarding.utils import now_in_app_timezone, today_in_app_timezone


def get_today() -> date:
    """Return the current date in the configured application timezone."""

    return today_in_app_timezone()


def get_now() -> datetime:
    """Return the current moment in the configured application timezone."""

    return now_in_app_timezone()


__all__ = ["get_now", "get_today"]
