"""Custom exception hierarchy for the music scraper.

Provides structured exceptions with error context and correction hints so a
failed run can be diagnosed from the log alone.
"""

from typing import Any


class ScraperError(Exception):
    """Base exception for all scraper errors.

    Attributes:
        message: Human-readable error message.
        error_data: Structured error information.
        suggestion: Hint for how to resolve the error.
    """

    def __init__(
        self,
        message: str,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize the scraper error.

        Args:
            message: Human-readable error message.
            error_data: Structured context (URLs, selectors, paths, etc.).
            suggestion: Actionable correction hint.
        """
        super().__init__(message)
        self.message = message
        self.error_data = error_data or {}
        self.suggestion = suggestion

    def __str__(self) -> str:
        """Return formatted error message with suggestion if available."""
        base = self.message
        if self.suggestion:
            return f"{base}\nSuggestion: {self.suggestion}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to structured dictionary for logging.

        Returns:
            Dictionary with error type, message, data, and suggestion.
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_data": self.error_data,
            "suggestion": self.suggestion,
        }


class BrowserError(ScraperError):
    """Headless browser failures.

    Examples:
        - Chromium could not be launched
        - Navigation timed out
        - Selector to click was not found
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        selector: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize browser error.

        Args:
            message: Human-readable error message.
            url: The URL being visited.
            selector: The CSS selector involved (if any).
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"url": url, "selector": selector})

        default_suggestion = suggestion or (
            f"The element '{selector}' may no longer exist on the page. "
            "Check the selector against the live site."
            if selector
            else (
                "Ensure Chromium is installed ('playwright install chromium') "
                "and that the site is reachable."
            )
        )

        super().__init__(message, data, default_suggestion)
        self.url = url
        self.selector = selector


class ParseError(ScraperError):
    """HTML parsing failures (structure doesn't match expectations).

    Examples:
        - Missing expected table columns
        - Empty venue or city names
        - Misaligned columns
    """

    def __init__(
        self,
        message: str,
        country: str | None = None,
        row_index: int | None = None,
        field: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize parse error.

        Args:
            message: Human-readable error message.
            country: Country whose table was being parsed (if applicable).
            row_index: Index of the table row (if applicable).
            field: Field name that failed to parse.
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"country": country, "row_index": row_index, "field": field})

        default_suggestion = suggestion or (
            "The table layout may have changed. Review the parser implementation."
        )

        super().__init__(message, data, default_suggestion)
        self.country = country
        self.row_index = row_index
        self.field = field


class StorageError(ScraperError):
    """Failures reading or writing output files.

    Examples:
        - Output directory not writable
        - Existing file is not valid JSON
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        operation: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize storage error.

        Args:
            message: Human-readable error message.
            path: The file path involved.
            operation: "read", "write" or "remove".
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"path": path, "operation": operation})

        default_suggestion = suggestion or (
            f"Check that '{path}' is accessible and contains valid JSON."
            if path
            else "Check the output directory permissions."
        )

        super().__init__(message, data, default_suggestion)
        self.path = path
        self.operation = operation


class ConfigurationError(ScraperError):
    """Invalid configuration or CLI arguments."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        error_data: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Human-readable error message.
            parameter: Parameter name that's invalid.
            error_data: Additional context.
            suggestion: How to resolve the error.
        """
        data = error_data or {}
        data.update({"parameter": parameter})

        default_suggestion = suggestion or (
            "Check the command-line arguments and configuration."
        )

        super().__init__(message, data, default_suggestion)
        self.parameter = parameter
