"""Region metadata records, catalog loading and indexing."""
