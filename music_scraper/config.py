"""Static configuration for the scrapers.

Selectors and column layouts mirror the markup of the live pages at the time of
writing; when a page changes, this is the first place to look.
"""

# Output
DEFAULT_OUTPUT_DIR = ".."
DEFAULT_LOG_FILE = "scraper.log"

VENUES_FILE = "venues.json"
COUNTRIES_FILE = "countries.json"
GENRES_FILE = "genres.json"
LAST_UPDATE_FILE = "last-update-time.json"

# Ledger keys (one per dataset)
VENUES_KEY = "venues"
COUNTRIES_KEY = "countries"
GENRES_KEY = "genres"

# Browser
BROWSER_TIMEOUT_MS = 30000
BROWSER_WAIT_UNTIL = "load"

# Wikipedia: List of music venues
VENUES_URL = "https://en.wikipedia.org/wiki/List_of_music_venues"
VENUE_TABLE_SELECTOR = "#mw-content-text > div > table"
COUNTRY_HEADER_SELECTOR = "#mw-content-text > div > h3"

# Sputnik Music
SPUTNIK_URL = "https://www.sputnikmusic.com/"
BROWSE_GENRE_SELECTOR = "#browsegenre"
GENRE_ANCHOR_SELECTOR = 'a[href*="genre"]'
GENRE_TAG_SELECTOR = ".tag"

# genres.json uses "compatible"; the older results file used "related".
GENRE_TAG_KEYS = ("compatible", "related")
DEFAULT_GENRE_TAG_KEY = "compatible"
