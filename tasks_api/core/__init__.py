"""Core modules for Tasks API."""
