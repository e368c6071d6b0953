import pytest

from music_scraper.models import Genre
from music_scraper.sources.genre_parser import (
    is_genre_url,
    parse_genre_list,
    parse_genre_tags,
)

SPUTNIK = "https://www.sputnikmusic.com/"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://site/genre/12/rock/", True),
        ("https://www.sputnikmusic.com/genre/27/Jazz/", True),
        ("https://site/genreviews/", False),
        ("https://site/genre/", False),
        ("https://site/genre/rock/", False),
        ("https://site/genre/12/", False),
        ("https://site/browsegenre.php", False),
    ],
)
def test_is_genre_url(url: str, expected: bool) -> None:
    assert is_genre_url(url) is expected


def test_parse_genre_list(sputnik_home_html: str) -> None:
    genres = parse_genre_list(sputnik_home_html, SPUTNIK)

    assert genres == [
        Genre(name="Rock", url="https://www.sputnikmusic.com/genre/12/Rock/"),
        Genre(name="Jazz", url="https://www.sputnikmusic.com/genre/27/Jazz/"),
        Genre(name="Metal", url="https://www.sputnikmusic.com/genre/31/Metal/"),
    ]


def test_parse_genre_list_without_genres() -> None:
    html = '<html><body><a href="/news.php">News</a></body></html>'
    assert parse_genre_list(html, SPUTNIK) == []


def test_parse_genre_tags(sputnik_genre_html: str) -> None:
    assert parse_genre_tags(sputnik_genre_html) == [
        "Hard Rock",
        "Blues Rock",
        "Psychedelic Rock",
    ]


def test_parse_genre_tags_empty_page() -> None:
    assert parse_genre_tags("<html><body><h1>Rock</h1></body></html>") == []
