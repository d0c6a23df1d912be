"""Root conftest — shared test configuration."""

import os

# Tests assert on default display settings; ignore a developer's local overrides
os.environ.setdefault("CURRENCY_SYMBOL", "₹")
os.environ.setdefault("IMAGE_PLACEHOLDER_URL", "/static/img/placeholder.png")
os.environ.setdefault("LOG_FORMAT", "text")
