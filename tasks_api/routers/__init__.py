"""API routers for Tasks API."""
