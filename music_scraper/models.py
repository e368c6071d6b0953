from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict


class VenueDict(TypedDict):
    """Dictionary representation of a Venue as written to venues.json."""

    venue: str
    city: str
    capacity: str


# Country name -> venues, as written to venues.json
VenuesDict = dict[str, list[VenueDict]]

# Country name -> distinct cities, as written to countries.json
CountriesDict = dict[str, list[str]]

# Dataset key -> ISO 8601 timestamp, as written to last-update-time.json
LedgerDict = dict[str, str]


@dataclass(frozen=True)
class Cell:
    """A single table cell, detached from the live DOM.

    Attributes:
        text: Full text content of the cell, untrimmed.
        children: Text content of each child node (elements, text nodes and
            comments alike), in document order.
        is_header: True for <th> cells, False for <td>.
    """

    text: str
    children: tuple[str, ...] = ()
    is_header: bool = False

    @property
    def child_count(self) -> int:
        return len(self.children)


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...] = ()

    @property
    def data_cells(self) -> list[Cell]:
        """The <td> cells of the row; column indices refer to these."""
        return [c for c in self.cells if not c.is_header]

    @property
    def header_cells(self) -> list[Cell]:
        return [c for c in self.cells if c.is_header]


@dataclass(frozen=True)
class Table:
    rows: tuple[Row, ...] = ()


@dataclass(frozen=True)
class Venue:
    """A concert venue parsed from a country table.

    Capacity is kept as the first numeric token of the cell (e.g. "9,000" for
    "9,000-10,000"), since the source mixes ranges, footnotes and multiple
    values in the same column.
    """

    venue: str
    city: str
    capacity: str

    def to_dict(self) -> VenueDict:
        return VenueDict(venue=self.venue, city=self.city, capacity=self.capacity)


class SkipReason(str, Enum):
    """Why a table or row was left out of the venue mapping."""

    MISSING_COUNTRY = "missing_country"
    NO_VENUES = "no_venues"
    NO_DATA_CELLS = "no_data_cells"
    MISSING_VENUE_COLUMN = "missing_venue_column"
    EMPTY_VENUE = "empty_venue"
    MISSING_CAPACITY_COLUMN = "missing_capacity_column"
    EMPTY_CAPACITY = "empty_capacity"
    MISALIGNED_COLUMNS = "misaligned_columns"
    EMPTY_CITY = "empty_city"


@dataclass(frozen=True)
class SkippedRow:
    """A recovered anomaly. row_index is None for table-level skips."""

    country: str | None
    row_index: int | None
    reason: SkipReason
    detail: str = ""


@dataclass
class VenueParseResult:
    venues: dict[str, list[Venue]] = field(default_factory=dict)
    skipped: list[SkippedRow] = field(default_factory=list)

    def to_dict(self) -> VenuesDict:
        return {
            country: [v.to_dict() for v in venues]
            for country, venues in self.venues.items()
        }


@dataclass(frozen=True)
class Genre:
    """A genre discovered on the Sputnik Music landing page."""

    name: str
    url: str


@dataclass(frozen=True)
class ScrapedGenre:
    name: str
    tags: tuple[str, ...] = ()

    def to_dict(self, tags_key: str = "compatible") -> dict[str, str | list[str]]:
        return {"name": self.name, tags_key: list(self.tags)}
