"""HTTP API for the payout calculator."""
