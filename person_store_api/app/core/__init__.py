"""Core infrastructure: settings, logging, error taxonomy and storage."""
