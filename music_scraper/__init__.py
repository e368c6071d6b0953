"""Music Scraper - genre and concert-venue data scraper.

This package drives a headless browser over Sputnik Music and the Wikipedia
list of music venues, producing compact JSON files (genres, venues, countries
and a last-update ledger) for consumption by the game client.
"""

__version__ = "0.1.0"
