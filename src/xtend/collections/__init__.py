"""Collection helpers: bit fields, list slices, sequence splitting and closing."""
