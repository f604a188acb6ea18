"""Shared infrastructure: settings, logging and observability context."""
