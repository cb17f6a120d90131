"""Translate completed HTTP responses into typed client errors."""

import logging

import requests

from .errors import BadRequest, MagentoClientError, NotFound

logger = logging.getLogger("m2rest")


def error_for_response(
    response: requests.Response,
    operation: str,
    log: logging.Logger | None = None,
) -> MagentoClientError | None:
    """Classify a response.

    Returns None for statuses below 400, :class:`NotFound` for 404 and
    :class:`BadRequest` (carrying status code and raw body) for anything else.
    The response is only inspected, never consumed or modified.
    """
    log = log or logger
    status = response.status_code
    endpoint = response.request.url if response.request is not None else response.url

    if status < 400:
        log.debug(f"{operation}: {endpoint} returned {status}")
        return None

    if status == 404:
        log.warning(f"Not found while trying to {operation}: {endpoint} returned 404: {response.text}")
        return NotFound(operation=operation)

    log.error(f"Bad request while trying to {operation}: {endpoint} returned {status}: {response.text}")
    return BadRequest(status, response.text, operation=operation)


def trim_surrounding_quotes(value: str) -> str:
    """Strip one pair of surrounding double quotes.

    Magento returns some identifiers (quote ids, order ids, option ids,
    tokens) as a bare JSON string rather than an object.
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value
