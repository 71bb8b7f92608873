"""Custom exception hierarchy for findate."""


class DateError(Exception):
    """Base exception for all findate errors."""


# --- Input ---
class InvalidInput(DateError, ValueError):
    """Out-of-range field, impossible date, unparseable text or unsupported argument."""


# --- Configuration ---
class ConfigError(DateError):
    """Invalid or unreadable configuration."""
