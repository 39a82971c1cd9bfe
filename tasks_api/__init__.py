"""Tasks API - CRUD microservice for task records."""

__version__ = "1.0.0"
