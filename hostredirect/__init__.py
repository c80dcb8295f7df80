"""Host/path redirect table: validation, loading and lookup."""
