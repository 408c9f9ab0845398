"""
Roadie API Client

Holds connection configuration (host, API version, timeout, custom headers,
access token) and the httpx clients used as transport. Built through
`new_client(*options)`, where each option is a callable applied in order.

Usage:
    from roadie_client import new_client, with_access_token

    client = new_client(with_access_token(token))
    estimate = client.estimates.create(request)
"""

import logging
import threading
from collections.abc import Callable, Generator, Mapping
from typing import Any, Optional, TypeVar, Union

import httpx

from .api.estimates import EstimateService
from .api.shipments import ShipmentsService
from .config import RoadieSettings
from .errors import APIError, ConfigurationError
from .models.error_response import ErrorResponse

logger = logging.getLogger(__name__)

# Roadie production endpoint
DEFAULT_ROADIE_HOST = "https://connect.roadie.com"

DEFAULT_ROADIE_VERSION = "v1"

# Seconds, applies to every client this module builds
DEFAULT_TIMEOUT = 60.0

USER_AGENT = "roadie-client-python/0.1.0"

T = TypeVar("T")

ClientOption = Callable[["Client"], None]
Transport = Union[httpx.BaseTransport, httpx.AsyncBaseTransport]


class BearerAuth(httpx.Auth):
    """Injects `Authorization: Bearer <token>` into every request."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class Client:
    """
    Client used to perform all operations with the Roadie API.

    Handles:
    - Connection configuration set once at construction
    - Building and sending requests for the sub-services
    - Decoding responses and raising APIError on failure

    Access token rotation through `update_access_token` swaps the transport
    under a lock; requests already in flight finish on the old transport.
    """

    def __init__(self):
        self._host = DEFAULT_ROADIE_HOST
        self._version = DEFAULT_ROADIE_VERSION
        self._custom_version = False
        self._custom_http_headers: dict[str, str] = {}
        self._access_token: Optional[str] = None
        self._timeout = DEFAULT_TIMEOUT
        self._auth: Optional[httpx.Auth] = None
        self._transport: Optional[Transport] = None
        self._http_client: Optional[httpx.Client] = None
        self._async_http_client: Optional[httpx.AsyncClient] = None
        self._retired: list[Union[httpx.Client, httpx.AsyncClient]] = []
        self._lock = threading.Lock()

        self.estimates = EstimateService(self)
        self.shipments = ShipmentsService(self)

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def host(self) -> str:
        return self._host

    @property
    def version(self) -> str:
        return self._version

    @property
    def custom_version(self) -> bool:
        """True when the version was chosen explicitly, even if it equals the default."""
        return self._custom_version

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def timeout(self) -> float:
        return self._timeout

    def get_custom_http_headers(self) -> dict[str, str]:
        """Return a copy of the custom headers sent with every request."""
        return dict(self._custom_http_headers)

    def update_access_token(self, access_token: str) -> None:
        """Replace an outdated access token.

        Later requests carry the new bearer token. A custom http client set
        through `with_http_client` is replaced by one built by this client.
        """
        _validate_token(access_token)
        with self._lock:
            stale = self._retire_clients()
            self._access_token = access_token
            self._auth = BearerAuth(access_token)
        for http_client in stale:
            if isinstance(http_client, httpx.Client):
                http_client.close()
        logger.info("Roadie access token updated")

    # =========================================================================
    # Transport
    # =========================================================================

    def _build_http_client(self) -> httpx.Client:
        transport = self._transport if isinstance(self._transport, httpx.BaseTransport) else None
        return httpx.Client(timeout=self._timeout, auth=self._auth, transport=transport)

    def _build_async_http_client(self) -> httpx.AsyncClient:
        transport = self._transport if isinstance(self._transport, httpx.AsyncBaseTransport) else None
        return httpx.AsyncClient(timeout=self._timeout, auth=self._auth, transport=transport)

    def _retire_clients(self) -> list[Union[httpx.Client, httpx.AsyncClient]]:
        """Move the current clients to the retired generation.

        The previous retired generation is returned for closing. Clients
        retired by the latest rotation stay open, since another thread may
        still be sending on them. Async clients cannot be awaited from here
        and are left to `aclose()` or garbage collection.
        """
        stale = self._retired
        self._retired = [c for c in (self._http_client, self._async_http_client) if c is not None]
        self._http_client = None
        self._async_http_client = None
        return stale

    def get_httpx_client(self) -> httpx.Client:
        """Get the underlying httpx.Client, constructing a new one if not previously set"""
        with self._lock:
            if self._http_client is None:
                self._http_client = self._build_http_client()
            return self._http_client

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get the underlying httpx.AsyncClient, constructing a new one if not previously set"""
        with self._lock:
            if self._async_http_client is None:
                self._async_http_client = self._build_async_http_client()
            return self._async_http_client

    def close(self) -> None:
        """Close the sync http clients held by this client."""
        with self._lock:
            clients = [self._http_client, *self._retired]
            self._http_client = None
            self._retired = [c for c in self._retired if isinstance(c, httpx.AsyncClient)]
        for http_client in clients:
            if isinstance(http_client, httpx.Client):
                http_client.close()

    async def aclose(self) -> None:
        """Close the async http clients held by this client."""
        with self._lock:
            clients = [self._async_http_client, *self._retired]
            self._async_http_client = None
            self._retired = [c for c in self._retired if isinstance(c, httpx.Client)]
        for http_client in clients:
            if isinstance(http_client, httpx.AsyncClient):
                await http_client.aclose()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any, **kwargs: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *args: Any, **kwargs: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Request / Response
    # =========================================================================

    def create_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Request:
        """
        Build a request against `{host}/{version}/{path}`.

        Args:
            method: HTTP method
            path: Resource path relative to the API version, e.g. "estimates"
            body: Model with `to_dict()` or a plain mapping, sent as JSON
            params: Query string parameters
            timeout: Seconds allowed for this call, overriding the client timeout

        Returns:
            An unsent httpx.Request carrying standard and custom headers
        """
        url = f"{self._host}/{self._version}/{path.lstrip('/')}"
        headers = httpx.Headers(
            {
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            }
        )
        # Custom headers replace standard ones whatever their casing.
        for key, value in self._custom_http_headers.items():
            headers[key] = value

        payload = None
        if body is not None:
            payload = body.to_dict() if hasattr(body, "to_dict") else dict(body)

        extensions = {}
        if timeout is not None:
            extensions["timeout"] = httpx.Timeout(timeout).as_dict()

        return httpx.Request(
            method,
            url,
            params=params,
            headers=headers,
            json=payload,
            extensions=extensions,
        )

    @staticmethod
    def _prepare(request: httpx.Request, http_client: Union[httpx.Client, httpx.AsyncClient]) -> None:
        # Requests built outside the httpx client miss its defaults.
        request.extensions.setdefault("timeout", http_client.timeout.as_dict())
        for key, value in http_client.headers.items():
            if key not in request.headers:
                request.headers[key] = value

    def do(self, request: httpx.Request, destination: Optional[Callable[[Any], T]] = None) -> Optional[T]:
        """
        Send `request` and decode the response.

        Args:
            request: Request from `create_request`
            destination: Callable turning the decoded JSON into the result,
                typically a model's `from_dict`

        Returns:
            The decoded result, or None when there is no destination or no body

        Raises:
            APIError: If the API answers with a non-2xx status
            httpx.HTTPError: If the transport fails or times out
            ValueError: If a 2xx body is not JSON, or is JSON null while a
                destination expects a value
        """
        http_client = self.get_httpx_client()
        self._prepare(request, http_client)
        logger.debug(f"Roadie request: {request.method} {request.url}")
        response = http_client.send(request)
        return self._handle_response(response, destination)

    async def do_async(
        self, request: httpx.Request, destination: Optional[Callable[[Any], T]] = None
    ) -> Optional[T]:
        """Async variant of `do`; cancelling the awaiting task cancels the call."""
        http_client = self.get_async_httpx_client()
        self._prepare(request, http_client)
        logger.debug(f"Roadie request: {request.method} {request.url}")
        response = await http_client.send(request)
        return self._handle_response(response, destination)

    def _handle_response(self, response: httpx.Response, destination: Optional[Callable[[Any], T]]) -> Optional[T]:
        logger.debug(f"Roadie response: {response.status_code} for {response.request.method} {response.request.url}")

        if not response.is_success:
            raise self._api_error(response)

        if destination is None or not response.content:
            return None
        data = response.json()
        if data is None:
            raise ValueError(f"expected a JSON body from {response.request.url}, got null")
        return destination(data)

    @staticmethod
    def _api_error(response: httpx.Response) -> APIError:
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if isinstance(payload, list):
            payload = {"errors": payload}
        try:
            error_response = ErrorResponse.from_dict(payload) if isinstance(payload, Mapping) else ErrorResponse()
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            logger.debug(f"Unrecognized Roadie error body: {e}")
            error_response = ErrorResponse()

        error = APIError(response.status_code, error_response, response.content)
        logger.warning(f"Roadie API error: {error}")
        return error


# =============================================================================
# Construction
# =============================================================================


def new_client(*options: ClientOption) -> Client:
    """
    Create a Client with the given options applied in order.

    Later options override earlier ones for the same setting.

    Raises:
        ConfigurationError: If an option rejects its input
    """
    client = Client()
    for option in options:
        option(client)
    return client


def _validate_token(access_token: str) -> None:
    if not access_token or any(ch.isspace() for ch in access_token):
        raise ConfigurationError("access token must be a non-empty string without whitespace")


def with_access_token(access_token: str) -> ClientOption:
    """Authorize every request with the given bearer token.

    Replaces the transport with a bearer-injecting one, dropping any custom
    http client set earlier.
    """

    def apply(c: Client) -> None:
        _validate_token(access_token)
        c._access_token = access_token
        c._auth = BearerAuth(access_token)
        c._http_client = None
        c._async_http_client = None

    return apply


def with_http_client(http_client: Optional[httpx.Client]) -> ClientOption:
    """Use a custom httpx.Client. None leaves the current one in place."""

    def apply(c: Client) -> None:
        if http_client is not None:
            c._http_client = http_client

    return apply


def with_async_http_client(http_client: Optional[httpx.AsyncClient]) -> ClientOption:
    """Use a custom httpx.AsyncClient. None leaves the current one in place."""

    def apply(c: Client) -> None:
        if http_client is not None:
            c._async_http_client = http_client

    return apply


def with_transport(transport: Optional[Transport]) -> ClientOption:
    """Send through a custom httpx transport, e.g. httpx.MockTransport.

    Used by the clients this module builds; replaces any custom http client
    set earlier. A transport serves only the clients of its kind: an
    httpx.BaseTransport such as httpx.HTTPTransport backs the sync client,
    an httpx.AsyncBaseTransport backs the async one, and the other client
    keeps httpx's default network transport. httpx.MockTransport is both.
    """

    def apply(c: Client) -> None:
        if transport is None:
            return
        c._transport = transport
        c._http_client = None
        c._async_http_client = None

    return apply


def with_timeout(seconds: float) -> ClientOption:
    """Override the default one-minute timeout. Replaces any custom http client set earlier."""

    def apply(c: Client) -> None:
        if seconds <= 0:
            raise ConfigurationError(f"timeout must be positive, got {seconds}")
        c._timeout = float(seconds)
        c._http_client = None
        c._async_http_client = None

    return apply


def with_host(host: str) -> ClientOption:
    """Use a custom Roadie API host. An empty host keeps the current one."""

    def apply(c: Client) -> None:
        if not host:
            return
        if not host.startswith(("http://", "https://")):
            raise ConfigurationError(f"host must start with http:// or https://, got {host!r}")
        c._host = host.rstrip("/")

    return apply


def with_version(version: str) -> ClientOption:
    """Use a custom Roadie API version. An empty version keeps the current one."""

    def apply(c: Client) -> None:
        if not version:
            return
        c._version = version.strip("/")
        c._custom_version = True

    return apply


def with_http_headers(headers: Optional[Mapping[str, str]]) -> ClientOption:
    """Send these headers with every request, replacing any set earlier."""

    def apply(c: Client) -> None:
        if headers:
            c._custom_http_headers = dict(headers)

    return apply


def with_env_vars(c: Client) -> None:
    """Apply host/version overrides from ROADIE_HOST and ROADIE_API_VERSION when set."""
    settings = RoadieSettings()
    if settings.host:
        with_host(settings.host)(c)
    if settings.api_version:
        with_version(settings.api_version)(c)
