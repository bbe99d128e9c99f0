"""Post collection, curated index and structural checks."""
