"""HTTP API for the ETS CSV export."""
