from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import httpx

from shrine_upload.errors import UploadHttpError
from shrine_upload.schemas.upload import FileUpload
from shrine_upload.services.files import LocalFile
from shrine_upload.services.http_client import open_client
from shrine_upload.services.s3_uploader import build_file_upload, upload_file
from shrine_upload.services.signing_client import get_upload_settings

logger = logging.getLogger(__name__)


async def upload(
    file: LocalFile,
    signing_endpoint: str,
    *,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> FileUpload:
    async with open_client(client) as http_client:
        settings = await get_upload_settings(
            file,
            signing_endpoint,
            base_url=base_url,
            client=http_client,
        )
        await upload_file(settings, file, client=http_client)

    result = build_file_upload(settings, file)
    logger.debug("Stored %s as %s/%s", file.name, result.storage, result.id)
    return result


async def upload_many(
    files: Sequence[LocalFile],
    signing_endpoint: str,
    *,
    limit: int | None = None,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[FileUpload | UploadHttpError]:
    """Upload every file independently and report each outcome in input order.

    A failed file shows up as its ``UploadHttpError`` in the returned list and
    never cancels the others. ``limit`` caps how many uploads run at once.
    """
    if limit is not None and limit < 1:
        raise ValueError("limit must be a positive integer")
    semaphore = asyncio.Semaphore(limit) if limit else None

    async def _run(file: LocalFile) -> FileUpload:
        if semaphore is None:
            return await upload(file, signing_endpoint, base_url=base_url, client=client)
        async with semaphore:
            return await upload(file, signing_endpoint, base_url=base_url, client=client)

    outcomes = await asyncio.gather(*(_run(file) for file in files), return_exceptions=True)

    results: list[FileUpload | UploadHttpError] = []
    for file, outcome in zip(files, outcomes):
        if isinstance(outcome, UploadHttpError):
            logger.warning("Upload of %s failed: %s", file.name, outcome)
        elif isinstance(outcome, BaseException):
            raise outcome
        results.append(outcome)
    return results
