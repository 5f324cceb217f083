"""Per-kind element readers and writers, registered on import."""
