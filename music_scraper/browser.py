from types import TracebackType
from typing import Any

import structlog
from playwright.sync_api import Browser as PlaywrightBrowser
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, Playwright, sync_playwright

from .config import BROWSER_TIMEOUT_MS, BROWSER_WAIT_UNTIL
from .exceptions import BrowserError

logger = structlog.get_logger(__name__)


class Browser:
    """A single headless Chromium page driven through Playwright.

    Use as a context manager so the browser is closed even when a scrape
    fails half-way:

        with Browser() as browser:
            browser.goto(url)
            html = browser.content()
    """

    def __init__(
        self, headless: bool = True, timeout_ms: int = BROWSER_TIMEOUT_MS
    ) -> None:
        """Initializes the Browser.

        Args:
            headless: Run Chromium without a window.
            timeout_ms: Default timeout for navigation and element lookups.
        """
        self.headless = headless
        self.timeout_ms = timeout_ms
        self._playwright: Playwright | None = None
        self._browser: PlaywrightBrowser | None = None
        self._page: Page | None = None

    def __enter__(self) -> "Browser":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def start(self) -> None:
        """Launches Chromium and opens a blank page."""
        logger.info("browser_starting", headless=self.headless)
        try:
            self._playwright = sync_playwright().start()
            self._browser = self._playwright.chromium.launch(headless=self.headless)
            self._page = self._browser.new_page()
        except PlaywrightError as e:
            self.close()
            raise BrowserError(f"Failed to launch browser: {e}") from e

        self._page.set_default_timeout(self.timeout_ms)
        # Messages logged by in-page scripts would otherwise be lost.
        self._page.on(
            "console", lambda msg: logger.debug("browser_console", text=msg.text)
        )
        logger.info("browser_started")

    def close(self) -> None:
        """Closes the browser and stops Playwright. Safe to call twice."""
        if self._browser:
            try:
                self._browser.close()
            except PlaywrightError as e:
                logger.warning("browser_close_failed", error=str(e))
        if self._playwright:
            try:
                self._playwright.stop()
            except PlaywrightError as e:
                logger.warning("playwright_stop_failed", error=str(e))
        if self._browser or self._playwright:
            logger.info("browser_closed")
        self._page = None
        self._browser = None
        self._playwright = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise BrowserError(
                "Browser is not started",
                suggestion="Call start() or use the Browser as a context manager.",
            )
        return self._page

    @property
    def url(self) -> str:
        return self.page.url

    def goto(self, url: str) -> None:
        """Navigates to a URL and waits for the load event."""
        logger.info("navigating", url=url)
        try:
            self.page.goto(url, wait_until=BROWSER_WAIT_UNTIL)
        except PlaywrightError as e:
            raise BrowserError(f"Navigation to {url} failed: {e}", url=url) from e

    def click(self, selector: str) -> None:
        """Clicks an element that triggers a page navigation.

        The navigation wait is armed before the click is issued. Waiting only
        after the click races the page's own navigation and can hang until the
        timeout in headless mode.
        """
        page = self.page
        logger.debug("clicking", selector=selector, url=page.url)
        try:
            with page.expect_navigation(wait_until=BROWSER_WAIT_UNTIL):
                page.click(selector)
        except PlaywrightError as e:
            raise BrowserError(
                f"Click on {selector} failed: {e}", url=page.url, selector=selector
            ) from e

    def content(self) -> str:
        """Returns the rendered HTML of the current page."""
        try:
            return self.page.content()
        except PlaywrightError as e:
            raise BrowserError(
                f"Could not read page content: {e}", url=self.page.url
            ) from e

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        """Evaluates a JavaScript expression in the page.

        Returns:
            The JSON-serializable result of the expression.
        """
        try:
            return self.page.evaluate(expression, arg)
        except PlaywrightError as e:
            raise BrowserError(
                f"Script evaluation failed: {e}", url=self.page.url
            ) from e
