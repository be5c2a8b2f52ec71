"""Custom exception classes for the application."""

from typing import Any


class SiteArchitectError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Input Errors
class KeywordInputError(SiteArchitectError):
    """Keyword input rejected before classification."""

    pass


class EmptyKeywordInputError(KeywordInputError):
    """No keywords could be parsed from the input."""

    def __init__(self) -> None:
        super().__init__("Please enter at least one keyword.")


class KeywordLimitExceededError(KeywordInputError):
    """Too many keywords for a single analysis."""

    def __init__(self, limit: int, count: int) -> None:
        super().__init__(
            f"Please limit the input to {limit} keywords per analysis (received {count}).",
            details={"limit": limit, "count": count},
        )


# External API Errors
class ExternalAPIError(SiteArchitectError):
    """Error calling external API."""

    def __init__(self, api_name: str, message: str) -> None:
        self.api_name = api_name
        super().__init__(f"{api_name} API error: {message}")


class ClassificationError(ExternalAPIError):
    """Keyword classification provider failed."""

    USER_MESSAGE = (
        "Keyword architecture analysis failed. Check the API key or reduce the "
        "number of keywords and retry."
    )

    def __init__(self, api_name: str = "Classification") -> None:
        super().__init__(api_name, self.USER_MESSAGE)
        self.user_message = self.USER_MESSAGE


# Analysis Errors
class AnalysisInProgressError(SiteArchitectError):
    """Another analysis is still awaiting its classification call."""

    def __init__(self) -> None:
        super().__init__("An analysis is already in progress")


class AnalysisNotFoundError(SiteArchitectError):
    """No completed analysis is available."""

    def __init__(self) -> None:
        super().__init__("No analysis results available")
