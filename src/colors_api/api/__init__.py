"""HTTP API for palette generation and export."""
