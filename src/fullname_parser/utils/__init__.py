"""Shared utilities: error taxonomy, default vocabularies and logging."""
