"""Simple environment configuration for HTTP and headless browser fetches."""

import os

# Desktop browser identity; the recruiting sites reject the default requests UA
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 6.1) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/41.0.2228.0 Safari/537.36"
)
USER_AGENT = os.environ.get("CFB_STATS_USER_AGENT", DEFAULT_USER_AGENT)

# Seconds before a plain HTTP fetch gives up
REQUEST_TIMEOUT = float(os.environ.get("CFB_STATS_TIMEOUT", "30"))

# Set CFB_STATS_HEADLESS=0 to watch the browser while debugging a page
BROWSER_HEADLESS = os.environ.get("CFB_STATS_HEADLESS", "1") != "0"

# Incremental scroll loop defaults
SCROLL_TARGET_ROWS = 250
SCROLL_MAX_ATTEMPTS = 20
SCROLL_DISTANCE_PX = 100
SCROLL_INTERVAL_SECONDS = 0.5


def browser_headers() -> dict[str, str]:
    """Headers sent to the recruiting-ranking websites."""
    return {"User-Agent": USER_AGENT}
