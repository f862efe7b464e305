from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from shrine_upload.config import get_timeout
from shrine_upload.errors import BadStatus, BadUrl, NetworkError, Timeout

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_client(client: httpx.AsyncClient | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client untouched, or a short-lived one closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=get_timeout()) as owned_client:
        yield owned_client


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: Any,
) -> httpx.Response:
    logger.debug("Sending %s %s", method, url)
    try:
        response = await client.request(method, url, **kwargs)
    except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
        raise BadUrl(url) from exc
    except httpx.TimeoutException as exc:
        logger.warning("%s %s timed out", method, url)
        raise Timeout(str(exc) or "Request timed out") from exc
    except httpx.RequestError as exc:
        logger.warning("%s %s failed without a response: %s", method, url, exc)
        raise NetworkError(str(exc) or exc.__class__.__name__) from exc

    if not response.is_success:
        logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
        raise BadStatus(response.status_code, response.text)

    logger.debug("%s %s returned HTTP %s", method, url, response.status_code)
    return response
