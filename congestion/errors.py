"""Exception hierarchy for the congestion tax calculator."""


class CongestionTaxError(Exception):
    """Base class for all calculator errors."""

    def __init__(self, message, error_code=None, details=None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ConfigError(CongestionTaxError):
    """Malformed fee band or exemption table."""


class InvalidInputError(CongestionTaxError):
    """Absent vehicle, unknown category or empty crossing list."""


class ComputationError(CongestionTaxError):
    """Unexpected fault while aggregating a day of crossings."""
