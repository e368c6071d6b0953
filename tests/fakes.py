"""A stand-in for music_scraper.browser.Browser serving canned pages."""

from music_scraper.exceptions import BrowserError


class FakeBrowser:
    """Serves canned HTML per URL in place of a live Chromium page.

    Clicking a selector navigates to the URL mapped to it in links. Setting
    fail_on makes navigating to that URL raise a BrowserError.
    """

    def __init__(
        self,
        pages: dict[str, str],
        links: dict[str, str] | None = None,
        fail_on: str | None = None,
    ):
        self.pages = pages
        self.links = links or {}
        self.fail_on = fail_on
        self.url = "about:blank"
        self.visited: list[str] = []

    def __enter__(self) -> "FakeBrowser":
        return self

    def __exit__(self, *exc_info: object) -> None:
        pass

    def goto(self, url: str) -> None:
        if url == self.fail_on:
            raise BrowserError(f"Navigation to {url} failed: timeout", url=url)
        self.visited.append(url)
        self.url = url

    def click(self, selector: str) -> None:
        self.goto(self.links[selector])

    def content(self) -> str:
        return self.pages.get(self.url, "<html><body></body></html>")
