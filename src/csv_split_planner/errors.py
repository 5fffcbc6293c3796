"""Exception types raised by split planning."""


class SplitPlannerError(Exception):
    """Base class for split planning failures."""


class ConfigurationError(SplitPlannerError, ValueError):
    """Invalid delimiter, separator or lines-per-split setting."""


class InputError(SplitPlannerError):
    """An input path is missing or is not a regular file."""
