"""
Market clock utilities for session gating and refresh cadence.

Intraday rules apply on weekdays between the session open and close
(inclusive, minute resolution) in the exchange's local time zone; outside
that window the long-term rules apply.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

from ..config.defaults import MarketClockParams


class MarketMode(str, Enum):
    """Which rule set applies at a given time"""
    INTRADAY = "intraday"
    LONG_TERM = "long_term"


def to_market_time(now: datetime, params: Optional[MarketClockParams] = None) -> datetime:
    """
    Express a timestamp in the market's local time zone.

    Args:
        now: Aware timestamp (converted) or naive timestamp (taken as local)
        params: Session parameters, defaults when omitted

    Returns:
        Local market datetime
    """
    params = params or MarketClockParams()
    if now.tzinfo is None:
        return now
    return now.astimezone(ZoneInfo(params.timezone))


def get_market_time(params: Optional[MarketClockParams] = None) -> datetime:
    """
    Current wall-clock time in the market's local time zone.

    Only for callers that do not inject their own "now".
    """
    params = params or MarketClockParams()
    return datetime.now(ZoneInfo(params.timezone))


def is_intraday_active(now: datetime, params: Optional[MarketClockParams] = None) -> bool:
    """
    Check whether intraday rules should apply at the given time.

    Args:
        now: Timestamp to check
        params: Session parameters, defaults when omitted

    Returns:
        True on Monday-Friday with hour * 100 + minute within
        [session_open, session_close]
    """
    params = params or MarketClockParams()
    local = to_market_time(now, params)

    if local.weekday() >= 5:  # Saturday = 5, Sunday = 6
        return False

    current_time = local.hour * 100 + local.minute
    return params.session_open <= current_time <= params.session_close


def get_market_mode(now: datetime, params: Optional[MarketClockParams] = None) -> MarketMode:
    """Rule set that applies at the given time"""
    if is_intraday_active(now, params):
        return MarketMode.INTRADAY
    return MarketMode.LONG_TERM


def get_refresh_interval(now: datetime, params: Optional[MarketClockParams] = None) -> int:
    """
    Seconds a poller should wait before re-running the engine.

    Returns:
        5 minutes during the session, 1 hour otherwise (by default)
    """
    params = params or MarketClockParams()
    if is_intraday_active(now, params):
        return params.intraday_refresh_seconds
    return params.long_term_refresh_seconds
