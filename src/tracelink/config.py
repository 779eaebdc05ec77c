"""
Global Configuration and Link Budgets.

This module centralizes the fixed limits applied when a vertex's trace IDs
are packed into a single trace-search URL. They protect the link from
exceeding what browsers and proxies accept, and keep the search page from
loading an unbounded number of traces.
"""

from .search.url import get_search_url

# --- Link Budgets ---
# Most trace IDs a single "View traces" link may carry
MAX_LINKED_TRACES = 35

# Longest URL accepted by every mainstream browser
MAX_LENGTH = 2083

# Length of the search URL before any trace ID is appended
MIN_LENGTH = len(get_search_url())

# Overhead each trace ID adds besides its own characters
PARAM_NAME_LENGTH = len("&traceID=")

# --- Interaction ---
# Delay before a pointer leave is reported as an un-hover
HOVER_DEBOUNCE_SECONDS = 0.15

# --- Settings ---
# Where the CLI looks for runtime settings
DEFAULT_SETTINGS_PATH = ".tracelink/config.yaml"
