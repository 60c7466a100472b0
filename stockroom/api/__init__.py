"""HTTP API for the inventory service."""
