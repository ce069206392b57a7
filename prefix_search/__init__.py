"""In-memory prefix search and autocomplete over a precomputed corpus."""
