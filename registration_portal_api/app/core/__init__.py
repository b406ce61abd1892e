"""Core infrastructure: configuration, logging, CORS and the admin gate."""
