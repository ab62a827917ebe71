"""String helpers and JSON shortcuts."""
