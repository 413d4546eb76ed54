"""HTTP endpoints (one module per controller)."""
