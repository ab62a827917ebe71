"""Date arithmetic and numeric duration helpers."""
