"""Persistence repositories for Tasks API."""
