from __future__ import annotations

import logging

import httpx

from shrine_upload.config import get_base_url
from shrine_upload.errors import BadUrl
from shrine_upload.schemas.upload import UploadSettings, decode_upload_settings
from shrine_upload.services.files import LocalFile
from shrine_upload.services.http_client import open_client, send_request

logger = logging.getLogger(__name__)


def build_signing_url(signing_endpoint: str, *, base_url: str | None = None) -> str:
    resolved_base_url = base_url or get_base_url()
    if not resolved_base_url:
        raise BadUrl(signing_endpoint)
    return f"{resolved_base_url.rstrip('/')}/{signing_endpoint}"


async def get_upload_settings(
    file: LocalFile,
    signing_endpoint: str,
    *,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> UploadSettings:
    """Ask the application's signing endpoint for presigned POST parameters.

    Sends ``GET <base_url>/<signing_endpoint>?filename=<name>&type=<mime>`` with no
    custom headers and decodes the JSON answer. Raises an ``UploadHttpError``
    subclass on any failure; a 2xx body that does not match the expected shape
    raises ``BadBody`` carrying the raw text.
    """
    url = build_signing_url(signing_endpoint, base_url=base_url)
    params = {"filename": file.name, "type": file.mime_type}

    async with open_client(client) as http_client:
        response = await send_request(http_client, "GET", url, params=params)

    settings = decode_upload_settings(response.content)
    logger.debug("Received upload settings for %s (key=%s)", file.name, settings.fields.key)
    return settings
