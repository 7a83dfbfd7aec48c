"""Record store backends, entity mappers, query builders and repositories."""
