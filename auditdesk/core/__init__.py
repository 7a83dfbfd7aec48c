"""Request-scoped context shared with logging."""
