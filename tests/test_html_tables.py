from bs4 import BeautifulSoup

from music_scraper.config import COUNTRY_HEADER_SELECTOR, VENUE_TABLE_SELECTOR
from music_scraper.models import SkipReason, Venue
from music_scraper.sources.venue_parser import parse_venue_tables
from music_scraper.utils.html import (
    cell_from_tag,
    extract_venue_tables,
    header_text,
    table_from_tag,
)


def _tag(html: str, name: str):
    return BeautifulSoup(html, "lxml").find(name)


def test_cell_from_td_keeps_child_nodes() -> None:
    tag = _tag(
        '<table><tr><td><a href="/wiki/A">Alpha Arena</a> (formerly X)<sup>[1]</sup>'
        "</td></tr></table>",
        "td",
    )
    cell = cell_from_tag(tag)

    assert cell.is_header is False
    assert cell.text == "Alpha Arena (formerly X)[1]"
    assert cell.children == ("Alpha Arena", " (formerly X)", "[1]")
    assert cell.child_count == 3


def test_cell_from_th_is_header() -> None:
    cell = cell_from_tag(_tag("<table><tr><th>Unknown</th></tr></table>", "th"))
    assert cell.is_header is True
    assert cell.children == ("Unknown",)


def test_cell_text_is_untrimmed() -> None:
    cell = cell_from_tag(_tag("<table><tr><td>\n80,000\n</td></tr></table>", "td"))
    assert cell.text == "\n80,000\n"


def test_table_rows_and_cells_in_document_order() -> None:
    table = table_from_tag(
        _tag(
            "<table><tr><th>Opened</th><th>Venue</th></tr>"
            "<tr><th>Unknown</th><td>Gamma</td><td>300</td></tr></table>",
            "table",
        )
    )
    assert len(table.rows) == 2
    last = table.rows[1]
    assert [c.text for c in last.cells] == ["Unknown", "Gamma", "300"]
    assert [c.text for c in last.data_cells] == ["Gamma", "300"]
    assert [c.text for c in last.header_cells] == ["Unknown"]


def test_header_text_uses_first_child() -> None:
    tag = _tag(
        '<h3><span class="mw-headline">Testland</span>'
        '<span class="mw-editsection">[edit]</span></h3>',
        "h3",
    )
    assert header_text(tag) == "Testland"


def test_empty_header_is_none() -> None:
    assert header_text(_tag("<h3></h3>", "h3")) is None


def test_extract_venue_tables_pairs_tables_and_headers(venues_html: str) -> None:
    tables, headers = extract_venue_tables(
        venues_html, VENUE_TABLE_SELECTOR, COUNTRY_HEADER_SELECTOR
    )
    assert len(tables) == 4
    assert headers == ["Testland", "Emptyland", None, "Secondland"]
    assert len(tables[0].rows) == 8


def test_parse_fixture_page(venues_html: str) -> None:
    tables, headers = extract_venue_tables(
        venues_html, VENUE_TABLE_SELECTOR, COUNTRY_HEADER_SELECTOR
    )
    result = parse_venue_tables(tables, headers)

    assert result.venues == {
        "Testland": [
            Venue(venue="Alpha Arena", city="Springfield", capacity="80,000"),
            Venue(venue="Beta Hall", city="Springfield", capacity="10,000"),
            Venue(venue="Gamma Club", city="Springfield", capacity="9,000"),
            Venue(venue="Epsilon Theatre", city="Capital City", capacity="9,000"),
        ],
        "Secondland": [
            Venue(venue="Eta Hall", city="Ogdenville", capacity="2,500"),
        ],
    }
    assert [(s.country, s.row_index, s.reason) for s in result.skipped] == [
        ("Testland", 5, SkipReason.MISALIGNED_COLUMNS),
        ("Testland", 7, SkipReason.EMPTY_VENUE),
        ("Emptyland", 2, SkipReason.NO_DATA_CELLS),
        ("Emptyland", None, SkipReason.NO_VENUES),
        (None, None, SkipReason.MISSING_COUNTRY),
        ("Secondland", 2, SkipReason.EMPTY_CITY),
    ]
