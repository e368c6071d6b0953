"""Conversion of rendered HTML into the detached table representation.

The venue parser never touches BeautifulSoup; it only sees Cell/Row/Table, so
it can be tested with hand-written tables.
"""

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

from ..models import Cell, Row, Table


def dom_text(node: PageElement) -> str:
    """Text content of any DOM node (element, text node or comment)."""
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def cell_from_tag(tag: Tag) -> Cell:
    """Builds a Cell from a <td> or <th> element."""
    return Cell(
        text=tag.get_text(),
        children=tuple(dom_text(child) for child in tag.contents),
        is_header=tag.name == "th",
    )


def table_from_tag(tag: Tag) -> Table:
    """Builds a Table from a <table> element.

    Rows and cells are collected from all descendants in document order, so
    the column indices match what the live DOM reports for the same markup.
    """
    rows = []
    for tr in tag.find_all("tr"):
        cells = tuple(cell_from_tag(c) for c in tr.find_all(["td", "th"]))
        rows.append(Row(cells=cells))
    return Table(rows=tuple(rows))


def header_text(tag: Tag) -> str | None:
    """Trimmed text of a heading's first child node.

    Headings carry trailing edit links and anchors after the title itself,
    so only the first child is used.
    """
    if not tag.contents:
        return None
    return dom_text(tag.contents[0]).strip()


def extract_venue_tables(
    html: str, table_selector: str, header_selector: str
) -> tuple[list[Table], list[str | None]]:
    """Extracts the per-country tables and their headings from a page.

    Args:
        html: Rendered page HTML.
        table_selector: CSS selector of the venue tables.
        header_selector: CSS selector of the country headings, paired with the
            tables by position.

    Returns:
        The tables, and the country names (None where a heading is empty).
    """
    soup = BeautifulSoup(html, "lxml")
    tables = [table_from_tag(t) for t in soup.select(table_selector)]
    headers = [header_text(h) for h in soup.select(header_selector)]
    return tables, headers
