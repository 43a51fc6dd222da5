from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class InvalidArgument(AppError, ValueError):
    """Raised for malformed or out-of-domain input (negative amounts, bad HH:MM, bad records)."""


class RoutingUnavailable(AppError):
    """Raised when the external routing service fails. Always recovered by fallback."""


class NoViableStrategy(AppError):
    """Raised when every candidate of the auto selector failed or timed out."""


class NotRegistered(AppError):
    """Raised when a strategy or estimator name is not registered."""
