"""Shared client defaults.

Centralizes the URL, timeout and paging constants used by the transport,
the argument models and the pagination driver so they stay in one place.
"""

from __future__ import annotations

BASE_URL = "https://slack.com/api/"

# Seconds; per-request total timeout handed to aiohttp
DEFAULT_TIMEOUT = 30.0

# Cursor pagination: `limit` is a natural number capped by the server
MAX_CURSOR_LIMIT = 1000

# Traditional paging defaults (page is 1-based)
DEFAULT_PAGE = 1
DEFAULT_COUNT = 100

# Timeline pagination page size when the caller does not pass `count`
DEFAULT_TIMELINE_PAGE_SIZE = 100
