"""HTTP API for the Stakeguard engine."""
