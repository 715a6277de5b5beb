"""Exercise tracker REST API."""
