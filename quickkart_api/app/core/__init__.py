"""Core infrastructure: settings, logging, data store and errors."""
