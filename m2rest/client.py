"""Magento 2 REST API transport client."""

import logging
import time
from functools import lru_cache
from typing import Any, TypeVar, get_origin

import requests
from pydantic import TypeAdapter
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .cancellation import current_cancel_event, is_cancelled
from .config import AuthenticationType, StoreConfig
from .errors import InvalidUsage, MagentoClientError, RequestCancelled, RequestTimeout, TransportError
from .models import to_payload
from .normalizer import error_for_response, trim_surrounding_quotes

T = TypeVar("T")


class MagentoRetry(Retry):
    """urllib3 Retry with a backoff floor and a cancellable backoff sleep."""

    def __init__(self, *args, backoff_min: float = 0, **kwargs):
        super().__init__(*args, **kwargs)
        self.backoff_min = backoff_min

    def new(self, **kw) -> "MagentoRetry":
        retry = super().new(**kw)
        retry.backoff_min = self.backoff_min
        return retry

    def get_backoff_time(self) -> float:
        return min(self.backoff_max, max(self.backoff_min, super().get_backoff_time()))

    def sleep(self, response=None) -> None:
        delay = self.get_backoff_time()
        if response is not None and self.respect_retry_after_header:
            retry_after = self.get_retry_after(response)
            if retry_after:
                delay = min(self.backoff_max, max(self.backoff_min, retry_after))

        event = current_cancel_event()
        if event is None:
            time.sleep(delay)
        elif event.wait(delay):
            raise RequestCancelled("cancelled while waiting to retry")


@lru_cache(maxsize=128)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _check_model(model: Any) -> None:
    if isinstance(model, type) or get_origin(model) is not None:
        return
    raise InvalidUsage(f"response model must be a type, got a {type(model).__name__} instance")


class MagentoClient:
    """HTTP client for the Magento 2 REST API.

    One client can be shared by many accessors and threads. It holds no state
    besides the session and the bearer token.
    """

    TIMEOUT = 30  # seconds
    POOL_MAXSIZE = 10
    RETRY_TOTAL = 3
    RETRY_BACKOFF = 5  # seconds
    RETRY_BACKOFF_MAX = 20  # seconds
    RETRY_STATUS_CODES = frozenset({500, 503})
    RETRY_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})

    def __init__(
        self,
        store: StoreConfig,
        token: str | None = None,
        *,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
        pool_maxsize: int | None = None,
    ):
        """Initialize client for one store.

        Args:
            store: Store endpoint (scheme, host, store code)
            token: Bearer token; None for anonymous access
            timeout: Per-request timeout in seconds
            logger: Logger for request/response records (default: "m2rest")
            pool_maxsize: Connections kept per host, size to the worker count
        """
        self.store = store
        self.base_url = store.base_url
        self.timeout = timeout or self.TIMEOUT
        self.logger = logger or logging.getLogger("m2rest")
        self.token: str | None = None
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": "m2rest",
            }
        )

        # Only 500/503 are retried; read errors are re-raised unchanged
        retry_strategy = MagentoRetry(
            total=self.RETRY_TOTAL,
            connect=0,
            read=False,
            other=0,
            status=self.RETRY_TOTAL,
            backoff_factor=self.RETRY_BACKOFF,
            backoff_min=self.RETRY_BACKOFF,
            backoff_max=self.RETRY_BACKOFF_MAX,
            status_forcelist=self.RETRY_STATUS_CODES,
            allowed_methods=self.RETRY_METHODS,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_maxsize=pool_maxsize or self.POOL_MAXSIZE)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        if token:
            self.set_token(token)

    def __repr__(self) -> str:
        return f"<MagentoClient {self.base_url}>"

    @classmethod
    def without_authentication(cls, store: StoreConfig, **kwargs) -> "MagentoClient":
        """Anonymous client, enough for guest carts."""
        client = cls(store, **kwargs)
        client.logger.info(f"Created API client without authentication for {client.base_url}")
        return client

    @classmethod
    def from_integration(cls, store: StoreConfig, bearer: str, **kwargs) -> "MagentoClient":
        """Client using an integration access token."""
        client = cls(store, token=bearer, **kwargs)
        client.logger.info(f"Created API client from integration for {client.base_url}")
        return client

    @classmethod
    def from_authentication(
        cls,
        store: StoreConfig,
        username: str,
        password: str,
        kind: AuthenticationType = AuthenticationType.ADMIN,
        **kwargs,
    ) -> "MagentoClient":
        """Exchange username/password for a token and return an authenticated client.

        Raises:
            BadRequest: If Magento rejects the credentials
        """
        client = cls(store, **kwargs)
        client.logger.info(f"Authenticating API client against {kind.route}")
        token = client.post_text(
            kind.route,
            {"username": username, "password": password},
            operation=f"authenticate {kind.name.lower()}",
            log_payload=False,
        )
        client.set_token(token)
        client.logger.info(f"API client authenticated successfully against {kind.route}")
        return client

    def set_token(self, token: str) -> None:
        self.token = token
        self.session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, route: str) -> str:
        """Build full API URL; absolute URLs pass through."""
        if route.startswith(("http://", "https://")):
            return route
        if not route.startswith("/"):
            route = "/" + route
        return f"{self.base_url}{route}"

    def request(
        self,
        method: str,
        route: str,
        *,
        body: Any = None,
        operation: str,
        timeout: float | None = None,
        log_payload: bool = True,
    ) -> requests.Response:
        """Send a request and normalize the outcome.

        Returns:
            The successful response (status < 400).

        Raises:
            RequestCancelled: The active cancel event was set
            RequestTimeout: No response within the timeout
            TransportError: Connection-level failure
            NotFound: HTTP 404
            BadRequest: Any other error status, after 500/503 retries
        """
        url = self._url(route)
        timeout = timeout or self.timeout

        if is_cancelled():
            self.logger.warning(f"{method} {route} cancelled before sending")
            raise RequestCancelled(operation=operation)

        payload = to_payload(body)
        if payload is not None and log_payload:
            self.logger.debug(f"{method} {route} payload={payload}")
        else:
            self.logger.debug(f"{method} {route}")

        started = time.monotonic()
        try:
            response = self.session.request(method, url, json=payload, timeout=timeout)
        except RequestCancelled as e:
            self.logger.warning(f"{method} {route} cancelled during retry backoff")
            raise RequestCancelled(str(e), operation=operation) from e
        except requests.exceptions.Timeout as e:
            self.logger.error(f"Timeout on {method} {route} after {timeout}s")
            raise RequestTimeout(f"no response within {timeout}s", operation=operation) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{method} {route} failed: {e}")
            raise TransportError(str(e), operation=operation) from e

        elapsed = time.monotonic() - started
        self.logger.info(
            f"{method} {route} -> {response.status_code} in {elapsed:.3f}s",
            extra={"method": method, "route": route, "status": response.status_code, "elapsed": elapsed},
        )

        if is_cancelled():
            self.logger.warning(f"{method} {route} cancelled while in flight")
            raise RequestCancelled("cancelled while in flight", operation=operation)

        error = error_for_response(response, operation, self.logger)
        if error is not None:
            raise error
        return response

    def _decode(self, response: requests.Response, model: type[T], operation: str) -> T:
        try:
            return _adapter(model).validate_python(response.json())
        except ValueError as e:
            self.logger.error(f"Unexpected response body while trying to {operation}: {response.text}")
            raise MagentoClientError(f"unexpected response body: {e}", operation) from e

    def get(self, route: str, model: type[T], *, operation: str) -> T:
        """GET ``route`` and decode the JSON body into ``model``."""
        _check_model(model)
        response = self.request("GET", route, operation=operation)
        return self._decode(response, model, operation)

    def post(self, route: str, body: Any, model: type[T], *, operation: str) -> T:
        """POST ``body`` as JSON and decode the response into ``model``."""
        _check_model(model)
        response = self.request("POST", route, body=body, operation=operation)
        return self._decode(response, model, operation)

    def put(self, route: str, body: Any, model: type[T], *, operation: str) -> T:
        """PUT ``body`` as JSON and decode the response into ``model``."""
        _check_model(model)
        response = self.request("PUT", route, body=body, operation=operation)
        return self._decode(response, model, operation)

    def delete(self, route: str, *, operation: str) -> None:
        self.request("DELETE", route, operation=operation)

    def post_text(self, route: str, body: Any = None, *, operation: str, log_payload: bool = True) -> str:
        """POST and return the raw body with surrounding quotes removed."""
        response = self.request("POST", route, body=body, operation=operation, log_payload=log_payload)
        return trim_surrounding_quotes(response.text)

    def put_text(self, route: str, body: Any = None, *, operation: str) -> str:
        """PUT and return the raw body with surrounding quotes removed."""
        response = self.request("PUT", route, body=body, operation=operation)
        return trim_surrounding_quotes(response.text)

    def test_connection(self) -> bool:
        """Test API connection by fetching store config.

        Returns:
            True if connection successful, False otherwise.
        """
        try:
            self.request("GET", "/store/storeConfigs", operation="test connection")
        except MagentoClientError as e:
            self.logger.error(f"Magento API connection test failed: {e}")
            return False
        self.logger.info("Magento API connection test successful")
        return True
