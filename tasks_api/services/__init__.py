"""Business services for Tasks API."""
