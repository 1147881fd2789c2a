from __future__ import annotations


class ChartDataError(ValueError):
    pass


class InvalidDomainError(ChartDataError):
    """Raised when a domain cannot be stepped into a finite synthetic series."""
