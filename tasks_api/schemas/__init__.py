"""Pydantic schemas for Tasks API."""
