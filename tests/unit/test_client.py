"""
Unit tests for client construction, options and the request pipeline.

Tests run against httpx.MockTransport; nothing touches the network.
"""

import httpx
import pytest

from roadie_client import (
    DEFAULT_ROADIE_HOST,
    DEFAULT_ROADIE_VERSION,
    DEFAULT_TIMEOUT,
    ConfigurationError,
    new_client,
    with_access_token,
    with_env_vars,
    with_host,
    with_http_client,
    with_http_headers,
    with_timeout,
    with_transport,
    with_version,
)
from roadie_client.models import Shipment


@pytest.mark.unit
class TestClientDefaults:
    """Tests for a client built without options."""

    def test_defaults(self):
        """A bare client points at production v1 with a one-minute timeout."""
        client = new_client()

        assert client.host == DEFAULT_ROADIE_HOST
        assert client.version == DEFAULT_ROADIE_VERSION
        assert client.custom_version is False
        assert client.timeout == DEFAULT_TIMEOUT == 60.0
        assert client.access_token is None
        assert client.get_custom_http_headers() == {}

    def test_sub_services_point_back_to_client(self):
        client = new_client()

        assert client.estimates.client is client
        assert client.shipments.client is client

    def test_default_http_client_has_one_minute_timeout(self):
        client = new_client()

        assert client.get_httpx_client().timeout == httpx.Timeout(60.0)


@pytest.mark.unit
class TestClientOptions:
    """Tests for option ordering, no-op arguments and validation."""

    def test_later_host_overrides_earlier(self):
        client = new_client(with_host("https://a.example.com"), with_host("https://b.example.com"))

        assert client.host == "https://b.example.com"

    def test_host_trailing_slash_is_stripped(self):
        client = new_client(with_host("https://sandbox.example.com/"))

        assert client.host == "https://sandbox.example.com"

    def test_host_without_scheme_fails_construction(self):
        with pytest.raises(ConfigurationError):
            new_client(with_host("connect.roadie.com"))

    def test_empty_host_keeps_default(self):
        client = new_client(with_host(""))

        assert client.host == DEFAULT_ROADIE_HOST

    def test_version_marks_custom_even_when_equal_to_default(self):
        """Choosing the default value explicitly still counts as a custom version."""
        client = new_client(with_version(DEFAULT_ROADIE_VERSION))

        assert client.version == DEFAULT_ROADIE_VERSION
        assert client.custom_version is True

    def test_later_version_overrides_earlier(self):
        client = new_client(with_version("v1"), with_version("v2"))

        assert client.version == "v2"

    def test_empty_version_keeps_default(self):
        client = new_client(with_version(""))

        assert client.version == DEFAULT_ROADIE_VERSION
        assert client.custom_version is False

    def test_empty_headers_keep_default(self):
        assert new_client(with_http_headers({})).get_custom_http_headers() == {}
        assert new_client(with_http_headers(None)).get_custom_http_headers() == {}

    def test_later_headers_replace_earlier(self):
        client = new_client(
            with_http_headers({"X-Tenant": "acme", "X-Trace": "1"}),
            with_http_headers({"X-Tenant": "globex"}),
        )

        assert client.get_custom_http_headers() == {"X-Tenant": "globex"}

    def test_get_custom_http_headers_returns_copy(self):
        """Mutating the returned mapping must not leak into the client."""
        client = new_client(with_http_headers({"X-Tenant": "acme"}))

        headers = client.get_custom_http_headers()
        headers["X-Tenant"] = "mutated"
        headers["X-New"] = "1"

        assert client.get_custom_http_headers() == {"X-Tenant": "acme"}

    def test_headers_option_copies_its_input(self):
        source = {"X-Tenant": "acme"}
        client = new_client(with_http_headers(source))
        source["X-Tenant"] = "mutated"

        assert client.get_custom_http_headers() == {"X-Tenant": "acme"}

    def test_none_http_client_is_noop(self):
        custom = httpx.Client()
        client = new_client(with_http_client(custom), with_http_client(None))

        assert client.get_httpx_client() is custom
        custom.close()

    def test_custom_http_client_is_used(self):
        custom = httpx.Client()
        client = new_client(with_http_client(custom))

        assert client.get_httpx_client() is custom
        custom.close()

    def test_access_token_replaces_custom_http_client(self):
        custom = httpx.Client()
        client = new_client(with_http_client(custom), with_access_token("tok"))

        assert client.get_httpx_client() is not custom
        assert client.access_token == "tok"
        custom.close()

    @pytest.mark.parametrize("token", ["", "two words", "line\nbreak"])
    def test_malformed_token_fails_construction(self, token):
        with pytest.raises(ConfigurationError):
            new_client(with_access_token(token))

    def test_failing_option_stops_later_options(self):
        applied = []

        def record(c):
            applied.append(c)

        with pytest.raises(ConfigurationError):
            new_client(with_host("nope"), record)

        assert applied == []

    @pytest.mark.parametrize("seconds", [0, -5])
    def test_non_positive_timeout_fails_construction(self, seconds):
        with pytest.raises(ConfigurationError):
            new_client(with_timeout(seconds))

    def test_custom_timeout(self):
        client = new_client(with_timeout(5))

        assert client.timeout == 5.0
        assert client.get_httpx_client().timeout == httpx.Timeout(5.0)


@pytest.mark.unit
class TestEnvVars:
    """Tests for the environment-derived option."""

    @pytest.fixture(autouse=True)
    def isolated_env(self, monkeypatch, tmp_path):
        # Keep a stray .env in the working directory out of the way.
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("ROADIE_HOST", raising=False)
        monkeypatch.delenv("ROADIE_API_VERSION", raising=False)

    def test_unset_variables_leave_defaults(self):
        client = new_client(with_env_vars)

        assert client.host == DEFAULT_ROADIE_HOST
        assert client.version == DEFAULT_ROADIE_VERSION
        assert client.custom_version is False

    def test_variables_override_host_and_version(self, monkeypatch):
        monkeypatch.setenv("ROADIE_HOST", "https://connect-sandbox.roadie.com")
        monkeypatch.setenv("ROADIE_API_VERSION", "v2")

        client = new_client(with_env_vars)

        assert client.host == "https://connect-sandbox.roadie.com"
        assert client.version == "v2"
        assert client.custom_version is True

    def test_blank_variable_is_ignored(self, monkeypatch):
        monkeypatch.setenv("ROADIE_HOST", "   ")

        assert new_client(with_env_vars).host == DEFAULT_ROADIE_HOST

    def test_malformed_host_variable_fails_construction(self, monkeypatch):
        monkeypatch.setenv("ROADIE_HOST", "connect.roadie.com")

        with pytest.raises(ConfigurationError):
            new_client(with_env_vars)

    def test_later_option_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("ROADIE_HOST", "https://from-env.example.com")

        client = new_client(with_env_vars, with_host("https://explicit.example.com"))

        assert client.host == "https://explicit.example.com"


@pytest.mark.unit
class TestRequestPipeline:
    """Tests for create_request/do against a mock transport."""

    def test_url_is_host_version_path(self):
        client = new_client(with_host("https://api.example.com"), with_version("v9"))

        request = client.create_request("GET", "shipments/12")

        assert str(request.url) == "https://api.example.com/v9/shipments/12"

    def test_standard_and_custom_headers_attached(self, respond_with, sent_requests):
        client = new_client(
            with_transport(respond_with(200, json_body={})),
            with_http_headers({"X-Tenant": "acme"}),
        )

        client.do(client.create_request("POST", "estimates", body={"a": 1}))

        sent = sent_requests[0]
        assert sent.headers["Accept"] == "application/json"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["X-Tenant"] == "acme"
        assert sent.headers["User-Agent"].startswith("roadie-client-python/")

    def test_no_authorization_without_token(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})))

        client.do(client.create_request("GET", "shipments"))

        assert "Authorization" not in sent_requests[0].headers

    def test_access_token_sent_as_bearer(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})), with_access_token("abc123"))

        client.do(client.create_request("GET", "shipments"))

        assert sent_requests[0].headers["Authorization"] == "Bearer abc123"

    def test_update_access_token_used_by_next_request(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})), with_access_token("old-token"))

        client.do(client.create_request("GET", "shipments"))
        client.update_access_token("new-token")
        client.do(client.create_request("GET", "shipments"))

        assert sent_requests[0].headers["Authorization"] == "Bearer old-token"
        assert sent_requests[1].headers["Authorization"] == "Bearer new-token"
        assert client.access_token == "new-token"

    def test_update_access_token_rejects_malformed_token(self):
        client = new_client(with_access_token("good"))

        with pytest.raises(ConfigurationError):
            client.update_access_token("")

        assert client.access_token == "good"

    @pytest.mark.asyncio
    async def test_update_access_token_applies_to_async_requests(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})), with_access_token("old-token"))

        client.update_access_token("new-token")
        await client.do_async(client.create_request("GET", "shipments"))

        assert sent_requests[0].headers["Authorization"] == "Bearer new-token"

    def test_default_timeout_reaches_transport(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})))

        client.do(client.create_request("GET", "shipments"))

        assert sent_requests[0].extensions["timeout"] == httpx.Timeout(60.0).as_dict()

    def test_per_call_timeout_wins(self, respond_with, sent_requests):
        client = new_client(with_transport(respond_with(200, json_body={})))

        client.do(client.create_request("GET", "shipments", timeout=2.5))

        assert sent_requests[0].extensions["timeout"] == httpx.Timeout(2.5).as_dict()

    def test_do_without_destination_returns_none(self, respond_with):
        client = new_client(with_transport(respond_with(200, json_body={"ignored": True})))

        assert client.do(client.create_request("GET", "shipments")) is None

    def test_custom_headers_replace_standard_headers_case_insensitively(self, respond_with, sent_requests):
        client = new_client(
            with_transport(respond_with(200, json_body={})),
            with_http_headers({"accept": "application/vnd.roadie+json", "user-agent": "acme-dispatch/2.0"}),
        )

        client.do(client.create_request("GET", "shipments"))

        sent = sent_requests[0]
        assert sent.headers.get_list("Accept") == ["application/vnd.roadie+json"]
        assert sent.headers.get_list("User-Agent") == ["acme-dispatch/2.0"]

    def test_null_success_body_raises_value_error(self, respond_with):
        client = new_client(with_transport(respond_with(200, content=b"null")))

        with pytest.raises(ValueError, match="null"):
            client.do(client.create_request("GET", "shipments/1"), Shipment.from_dict)

    def test_null_success_body_without_destination_returns_none(self, respond_with):
        client = new_client(with_transport(respond_with(200, content=b"null")))

        assert client.do(client.create_request("DELETE", "shipments/1")) is None

    def test_sync_only_transport_leaves_async_client_on_default_transport(self):
        transport = httpx.HTTPTransport()
        client = new_client(with_transport(transport))

        assert client.get_httpx_client()._transport is transport
        assert client.get_async_httpx_client()._transport is not transport

    def test_mock_transport_backs_both_clients(self, respond_with):
        transport = respond_with(200, json_body={})
        client = new_client(with_transport(transport))

        assert client.get_httpx_client()._transport is transport
        assert client.get_async_httpx_client()._transport is transport

    def test_token_rotation_closes_older_generations(self):
        client = new_client(with_access_token("token-0"))
        first = client.get_httpx_client()

        for i in range(1, 51):
            client.update_access_token(f"token-{i}")
            client.get_httpx_client()

        assert len(client._retired) <= 2
        assert first.is_closed

    def test_token_rotation_keeps_latest_retired_client_open(self):
        client = new_client(with_access_token("token-0"))
        first = client.get_httpx_client()

        client.update_access_token("token-1")

        assert not first.is_closed
        assert client._http_client is None
        assert client._async_http_client is None

    def test_context_manager_closes_http_client(self):
        with new_client() as client:
            http_client = client.get_httpx_client()

        assert http_client.is_closed

    def test_close_also_closes_clients_retired_by_token_rotation(self):
        client = new_client(with_access_token("first"))
        first = client.get_httpx_client()
        client.update_access_token("second")
        second = client.get_httpx_client()

        client.close()

        assert first.is_closed
        assert second.is_closed

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_async_client(self):
        async with new_client() as client:
            http_client = client.get_async_httpx_client()

        assert http_client.is_closed
