"""Domain-specific filter translators."""
