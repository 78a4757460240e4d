"""Constants for the radio-browser directory adapter.

API Documentation: https://api.radio-browser.info/
"""

# Parameters applied to every directory query; caller parameters win
DEFAULT_QUERY_PARAMS = {
    "hidebroken": "true",
    "limit": "1000",
}

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
