import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from ..config import GENRE_ANCHOR_SELECTOR, GENRE_TAG_SELECTOR
from ..models import Genre

# Genre detail pages look like /genre/12/Rock/. Navigation and review links
# also contain "genre" but lack the numeric id.
GENRE_URL_PATTERN = re.compile(r"/genre/\d+/.+/")


def is_genre_url(url: str) -> bool:
    return GENRE_URL_PATTERN.search(url) is not None


def parse_genre_list(html: str, base_url: str) -> list[Genre]:
    """Parses the genres listed in the "browse genres" pop-up.

    Args:
        html: Rendered HTML of the page with the pop-up open.
        base_url: URL of that page, used to resolve relative links.

    Returns:
        One Genre per anchor pointing to a genre detail page, in page order.
    """
    soup = BeautifulSoup(html, "lxml")
    genres = []
    for anchor in soup.select(GENRE_ANCHOR_SELECTOR):
        url = urljoin(base_url, anchor.get("href", ""))
        if not is_genre_url(url):
            continue
        genres.append(Genre(name=anchor.get_text(strip=True), url=url))
    return genres


def parse_genre_tags(html: str) -> list[str]:
    """Returns the tag labels of a genre detail page, in page order."""
    soup = BeautifulSoup(html, "lxml")
    return [tag.get_text(strip=True) for tag in soup.select(GENRE_TAG_SELECTOR)]
