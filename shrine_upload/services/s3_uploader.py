from __future__ import annotations

import logging

import httpx

from shrine_upload.config import get_apply_headers
from shrine_upload.schemas.upload import FileUpload, Metadata, UploadSettings
from shrine_upload.services.files import LocalFile
from shrine_upload.services.http_client import open_client, send_request

logger = logging.getLogger(__name__)

# S3 checks the policy against the form in this order; "file" must come last.
_FORM_FIELD_ORDER = (
    ("key", "key"),
    ("policy", "policy"),
    ("content-type", "content_type"),
    ("content-disposition", "disposition"),
    ("x-amz-credential", "credential"),
    ("x-amz-algorithm", "algorithm"),
    ("x-amz-date", "date"),
    ("x-amz-signature", "signature"),
)


def build_upload_form(
    settings: UploadSettings,
    file: LocalFile,
) -> tuple[dict[str, str], dict[str, tuple[str, bytes, str]]]:
    data = {form_name: getattr(settings.fields, attr) for form_name, attr in _FORM_FIELD_ORDER}
    files = {"file": (file.name, file.content, file.mime_type)}
    return data, files


def build_upload_headers(settings: UploadSettings) -> dict[str, str]:
    # httpx owns the multipart Content-Type (it carries the boundary).
    return {name: value for name, value in settings.headers.items() if name.lower() != "content-type"}


async def upload_file(
    settings: UploadSettings,
    file: LocalFile,
    *,
    client: httpx.AsyncClient | None = None,
    apply_headers: bool | None = None,
) -> str:
    data, files = build_upload_form(settings, file)
    if apply_headers is None:
        apply_headers = get_apply_headers()
    headers = build_upload_headers(settings) if apply_headers else None

    async with open_client(client) as http_client:
        response = await send_request(
            http_client,
            settings.method,
            settings.url,
            data=data,
            files=files,
            headers=headers,
        )

    logger.debug("Uploaded %s (%d bytes) to %s", file.name, file.size, settings.url)
    return response.text


def parse_object_key(key: str) -> tuple[str, str]:
    """Split ``"<storage>/<id>"`` into ``(storage, id)``.

    A key without a slash yields ``("", key)``. With several slashes only the
    segment right after the first one is kept as the id.
    """
    segments = key.split("/")
    if len(segments) < 2:
        return "", key
    return segments[0], segments[1]


def build_file_upload(settings: UploadSettings, file: LocalFile) -> FileUpload:
    storage, upload_id = parse_object_key(settings.fields.key)
    return FileUpload(
        id=upload_id,
        storage=storage,
        metadata=Metadata(size=file.size, filename=file.name, mime_type=file.mime_type),
    )
