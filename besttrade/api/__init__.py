"""HTTP API for best-trade selection."""
