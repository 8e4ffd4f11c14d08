"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_clock_time(value: Any) -> bool:
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    hours, minutes = divmod(value, 100)
    return 0 <= hours <= 23 and 0 <= minutes <= 59


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator periods."""
        errors = []

        for field_name in (
            "rsi_period", "ema_fast_period", "ema_slow_period", "ema_trend_period",
            "ema_long_period", "macd_fast_period", "macd_slow_period",
            "macd_signal_period", "volume_window",
        ):
            if field_name in params and not _is_positive_int(params[field_name]):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a positive integer",
                    value=params[field_name]
                ))

        # MACD needs the fast average to be faster than the slow one
        fast = params.get("macd_fast_period")
        slow = params.get("macd_slow_period")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd_fast_period",
                message="Must be smaller than macd_slow_period",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_intraday_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate intraday rule thresholds."""
        errors = []

        # Validate RSI thresholds
        for field_name in ("rsi_buy_below", "rsi_sell_above"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        # Validate volume_multiplier
        if "volume_multiplier" in params:
            value = params["volume_multiplier"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="volume_multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        errors.extend(ConfigValidator._validate_exit_pcts(params))
        return errors

    @staticmethod
    def validate_long_term_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate long-term rule thresholds."""
        errors = []

        for field_name in ("strong_trend_pct", "consolidation_pct", "sideways_macd_spread"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        # Validate currency_symbol
        if "currency_symbol" in params and not isinstance(params["currency_symbol"], str):
            errors.append(ValidationError(
                field="currency_symbol",
                message="Must be a string",
                value=params["currency_symbol"]
            ))

        errors.extend(ConfigValidator._validate_exit_pcts(params))
        return errors

    @staticmethod
    def validate_market_clock_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trading session parameters."""
        errors = []

        # Validate timezone
        if "timezone" in params:
            value = params["timezone"]
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, TypeError, ValueError):
                errors.append(ValidationError(
                    field="timezone",
                    message="Must be an IANA time zone name",
                    value=value
                ))

        # Validate session bounds
        for field_name in ("session_open", "session_close"):
            if field_name in params and not _is_clock_time(params[field_name]):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a clock time encoded as hour * 100 + minute",
                    value=params[field_name]
                ))

        session_open = params.get("session_open")
        session_close = params.get("session_close")
        if (_is_clock_time(session_open) and _is_clock_time(session_close)
                and session_open > session_close):
            errors.append(ValidationError(
                field="session_open",
                message="Must not be later than session_close",
                value=session_open
            ))

        # Validate refresh intervals
        for field_name in ("intraday_refresh_seconds", "long_term_refresh_seconds"):
            if field_name in params and not _is_positive_int(params[field_name]):
                errors.append(ValidationError(
                    field=field_name,
                    message="Must be a positive integer",
                    value=params[field_name]
                ))

        return errors

    @staticmethod
    def _validate_exit_pcts(params: dict[str, Any]) -> list[ValidationError]:
        errors = []
        for field_name in ("target_pct", "stop_loss_pct"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value <= 0 or value >= 1:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a positive number between 0 and 1",
                        value=value
                    ))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "intraday" in config:
            errors.extend(ConfigValidator.validate_intraday_params(config["intraday"]))

        if "long_term" in config:
            errors.extend(ConfigValidator.validate_long_term_params(config["long_term"]))

        if "market_clock" in config:
            errors.extend(ConfigValidator.validate_market_clock_params(config["market_clock"]))

        return errors
