"""Venue table parsing for the Wikipedia list of music venues.

Each country has its own table. Cells that repeat the value of the row above
(the city, sometimes the capacity) are simply left out of later rows, with no
rowspan to say so, and an unknown "Opened" date is rendered as a <th> instead
of a <td>. The layout of a row therefore has to be inferred from how many data
cells it has. Every rule below is best-effort: a row that doesn't fit is
dropped and recorded as a SkippedRow, never raised.
"""

import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from ..exceptions import ParseError
from ..models import (
    Cell,
    Row,
    SkippedRow,
    SkipReason,
    Table,
    Venue,
    VenueParseResult,
)

logger = structlog.get_logger(__name__)

# The first two rows of every table are column headings.
HEADER_ROW_COUNT = 2

# Capacity can be:
# - a simple number (80,000)
# - a range (9,000-10,000), we take the first
# - a number with a reference (20,000[2]), we take the number
# - several values, we take the first
CAPACITY_PATTERN = re.compile(r"^\d+,\d+|^\d+", re.ASCII)

CAPACITY_COLUMN_INDEX = 3
CITY_COLUMN_INDEX = 2

# A row with this many data cells or fewer has no city cell of its own.
MAX_CELLS_WITHOUT_CITY = 3


class RowSkipped(ParseError):
    """A table row that cannot be turned into a Venue."""

    def __init__(self, reason: SkipReason, message: str, field: str | None = None):
        super().__init__(message, field=field, error_data={"reason": reason.value})
        self.reason = reason


@dataclass(frozen=True)
class CarryOver:
    """Values of the last accepted row, reused when a row omits them."""

    city: str = ""
    capacity: str = ""


def includes_opened_column(row: Row) -> bool:
    """Whether the "Opened" column is a data cell.

    An unknown opening date is rendered as a header cell, which removes it
    from the data cells and shifts every other column one to the left.
    """
    return not row.header_cells


def venue_column_index(includes_opened: bool) -> int:
    return 1 if includes_opened else 0


def cell_value(cell: Cell) -> str:
    """Trimmed value of a venue or city cell.

    A cell with several child nodes is a link followed by annotations
    (footnotes, former names); only the link text is the value.
    """
    if cell.child_count > 1:
        return cell.children[0].strip()
    return cell.text.strip()


def resolve_capacity_column(cells: Sequence[Cell]) -> tuple[Cell | None, int]:
    """Finds the capacity cell of a row.

    Capacity is in the 4th column when the city is present, the 3rd when the
    city was reused, and the 2nd when the opening date is also unknown.

    Returns:
        The capacity cell (None if the row is too short) and the offset to
        apply to the city column: 0, or -1 when a fallback column was used.
    """
    if len(cells) > CAPACITY_COLUMN_INDEX:
        return cells[CAPACITY_COLUMN_INDEX], 0
    if len(cells) > 2:
        return cells[2], -1
    if len(cells) > 1:
        return cells[1], -1
    return None, -1


def extract_capacity(text: str) -> str | None:
    """First numeric token at the start of the raw cell text.

    >>> extract_capacity("9,000-10,000")
    '9,000'
    >>> extract_capacity("20,000[2]")
    '20,000'
    """
    match = CAPACITY_PATTERN.match(text)
    return match.group(0) if match else None


def is_misaligned(venue_name: str) -> bool:
    """A venue name that looks like a capacity means the columns shifted."""
    return CAPACITY_PATTERN.match(venue_name) is not None


def is_city_column_reused(
    city_offset: int, includes_opened: bool, data_cell_count: int
) -> bool:
    return city_offset != 0 and (
        not includes_opened or data_cell_count <= MAX_CELLS_WITHOUT_CITY
    )


def city_column_index(city_offset: int) -> int:
    return CITY_COLUMN_INDEX + city_offset


def parse_row(row: Row, carry: CarryOver) -> Venue:
    """Parses one table row.

    Args:
        row: The row to parse.
        carry: City and capacity of the previous accepted row in the table.

    Returns:
        The parsed Venue.

    Raises:
        RowSkipped: If the row doesn't yield a complete venue.
    """
    cells = row.data_cells
    if not cells:
        raise RowSkipped(SkipReason.NO_DATA_CELLS, "No columns detected")

    includes_opened = includes_opened_column(row)
    venue_index = venue_column_index(includes_opened)
    if venue_index >= len(cells):
        raise RowSkipped(
            SkipReason.MISSING_VENUE_COLUMN,
            f"No venue column at index {venue_index}",
            field="venue",
        )

    venue_name = cell_value(cells[venue_index])
    if not venue_name:
        raise RowSkipped(SkipReason.EMPTY_VENUE, "No venue name detected", "venue")

    capacity_cell, city_offset = resolve_capacity_column(cells)
    if capacity_cell is None:
        raise RowSkipped(
            SkipReason.MISSING_CAPACITY_COLUMN,
            f"No capacity column for venue {venue_name}",
            field="capacity",
        )

    capacity = extract_capacity(capacity_cell.text) or carry.capacity
    if not capacity:
        raise RowSkipped(
            SkipReason.EMPTY_CAPACITY,
            f"No capacity detected for venue {venue_name}",
            field="capacity",
        )

    # Happens when the "Opened" cell is shared with the row above as well.
    if is_misaligned(venue_name):
        raise RowSkipped(
            SkipReason.MISALIGNED_COLUMNS,
            f"Venue name {venue_name!r} looks like a capacity",
            field="venue",
        )

    if is_city_column_reused(city_offset, includes_opened, len(cells)):
        city = carry.city
    else:
        city_index = city_column_index(city_offset)
        city = cell_value(cells[city_index]) if city_index < len(cells) else ""
        city = city or carry.city

    if not city:
        raise RowSkipped(
            SkipReason.EMPTY_CITY,
            f"No city name detected for venue {venue_name}",
            field="city",
        )

    return Venue(venue=venue_name, city=city, capacity=capacity)


def parse_table(country: str, table: Table) -> tuple[list[Venue], list[SkippedRow]]:
    """Parses the rows of one country's table.

    Reused values are carried from row to row within this table only.
    """
    venues: list[Venue] = []
    skipped: list[SkippedRow] = []
    carry = CarryOver()

    for row_index, row in enumerate(
        table.rows[HEADER_ROW_COUNT:], start=HEADER_ROW_COUNT
    ):
        try:
            venue = parse_row(row, carry)
        except RowSkipped as e:
            logger.info(
                "row_skipped",
                country=country,
                row_index=row_index,
                reason=e.reason.value,
                detail=e.message,
            )
            skipped.append(SkippedRow(country, row_index, e.reason, e.message))
            continue

        carry = CarryOver(city=venue.city, capacity=venue.capacity)
        logger.debug(
            "venue_added",
            country=country,
            venue=venue.venue,
            city=venue.city,
            capacity=venue.capacity,
        )
        venues.append(venue)

    return venues, skipped


def parse_venue_tables(
    tables: Sequence[Table], country_names: Sequence[str | None]
) -> VenueParseResult:
    """Parses all country tables into a country -> venues mapping.

    Args:
        tables: One table per country.
        country_names: Country headings, paired with the tables by position.

    Returns:
        The venues by country (countries without venues are left out) and
        every table or row that was skipped.
    """
    logger.info("processing_tables", count=len(tables))
    result = VenueParseResult()

    for index, table in enumerate(tables):
        name = country_names[index] if index < len(country_names) else None
        country = (name or "").strip()
        if not country:
            logger.info("table_skipped", table_index=index, reason="missing_country")
            result.skipped.append(
                SkippedRow(
                    None,
                    None,
                    SkipReason.MISSING_COUNTRY,
                    f"No country found for table {index}",
                )
            )
            continue

        venues, skipped = parse_table(country, table)
        result.skipped.extend(skipped)

        if venues:
            result.venues[country] = venues
            continue

        # A later table for the same country replaces the earlier one.
        result.venues.pop(country, None)
        logger.info("country_removed", country=country, reason="no_venues")
        result.skipped.append(
            SkippedRow(
                country, None, SkipReason.NO_VENUES, f"No venues parsed for {country}"
            )
        )

    logger.info(
        "tables_processed",
        countries=len(result.venues),
        venues=sum(len(v) for v in result.venues.values()),
        skipped=len(result.skipped),
    )
    return result


def summarize_skips(skipped: Sequence[SkippedRow]) -> dict[str, int]:
    """Counts skipped tables and rows by reason."""
    return dict(Counter(s.reason.value for s in skipped))
