"""Module: artgrid.config.data

Date: 2026-10-19

Data source and selection defaults.
"""

# =====================================
# ARTWORKS API
# =====================================

API_BASE_URL = "https://api.artic.edu/api/v1"
API_ARTWORKS_ENDPOINT = "artworks"
API_REQUEST_TIMEOUT = 15  # seconds
API_USER_AGENT = "artgrid/1.0"

# =====================================
# PAGINATION
# =====================================

DEFAULT_PAGE_SIZE = 10
FIRST_PAGE_INDEX = 1

# =====================================
# SELECTION
# =====================================

DEFAULT_SELECTION_LIMIT = 5
MIN_SELECTION_LIMIT = 1
