"""Database models for Tasks API."""
