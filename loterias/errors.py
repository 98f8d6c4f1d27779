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

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ScrapeError(AppError):
    """The results page could not be scraped."""

    def __init__(
        self,
        message: str = "Scraping failed",
        details: Any | None = None,
        code: str = "scrape_error",
    ) -> None:
        super().__init__(code=code, message=message, status_code=502, details=details)


class NavigationError(ScrapeError):
    """The results page could not be loaded."""

    def __init__(self, message: str = "Could not load results page", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="navigation_error")


class ScrapeTimeoutError(ScrapeError):
    """Result cards did not show up within the selector wait."""

    def __init__(self, message: str = "Timed out waiting for result cards", details: Any | None = None) -> None:
        super().__init__(message=message, details=details, code="scrape_timeout")


class TransactionError(AppError):
    """Saving scraped results failed and was rolled back."""

    def __init__(self, message: str = "Error saving results to the database", details: Any | None = None) -> None:
        super().__init__(code="transaction_error", message=message, status_code=500, details=details)


class QueryError(AppError):
    """Reading stored results failed."""

    def __init__(self, message: str = "Error retrieving results", details: Any | None = None) -> None:
        super().__init__(code="query_error", message=message, status_code=500, details=details)
