"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class GenerationInfeasibleError(AppError):
    """Requested sum range cannot be satisfied (or was not hit within the retry limit)."""

    def __init__(self, message: str = "Generation infeasible", details: Any | None = None) -> None:
        super().__init__(code="generation_infeasible", message=message, status_code=422, details=details)


class HistoryLoadingError(AppError):
    """History data is still being loaded."""

    def __init__(self, message: str = "History data is loading", details: Any | None = None) -> None:
        super().__init__(code="history_loading", message=message, status_code=503, details=details)


class HistoryUnavailableError(AppError):
    """History data could not be loaded."""

    def __init__(self, message: str = "History data unavailable", details: Any | None = None) -> None:
        super().__init__(code="history_unavailable", message=message, status_code=503, details=details)
