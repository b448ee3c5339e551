"""Napiprojekt.pl API adapter."""

from napisy.infrastructure.napiprojekt.client import NapiprojektClient, create_http_client

__all__ = ["NapiprojektClient", "create_http_client"]
