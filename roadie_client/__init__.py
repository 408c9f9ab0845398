"""
Roadie API Client

Typed client for the Roadie same-day delivery API: estimates and shipments.

Usage:
    from roadie_client import new_client, with_access_token, with_env_vars

    client = new_client(with_env_vars, with_access_token(token))
    estimate = client.estimates.create(request)
    shipment = client.shipments.get(12345)
"""

from .client import (
    DEFAULT_ROADIE_HOST,
    DEFAULT_ROADIE_VERSION,
    DEFAULT_TIMEOUT,
    Client,
    ClientOption,
    new_client,
    with_access_token,
    with_async_http_client,
    with_env_vars,
    with_host,
    with_http_client,
    with_http_headers,
    with_timeout,
    with_transport,
    with_version,
)
from .errors import APIError, ConfigurationError, RoadieError

__version__ = "0.1.0"

__all__ = (
    "APIError",
    "Client",
    "ClientOption",
    "ConfigurationError",
    "DEFAULT_ROADIE_HOST",
    "DEFAULT_ROADIE_VERSION",
    "DEFAULT_TIMEOUT",
    "RoadieError",
    "new_client",
    "with_access_token",
    "with_async_http_client",
    "with_env_vars",
    "with_host",
    "with_http_client",
    "with_http_headers",
    "with_timeout",
    "with_transport",
    "with_version",
)
