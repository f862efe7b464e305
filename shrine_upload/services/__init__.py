from shrine_upload.services.direct_upload import upload, upload_many
from shrine_upload.services.files import LocalFile
from shrine_upload.services.s3_uploader import (
    build_file_upload,
    build_upload_form,
    build_upload_headers,
    parse_object_key,
    upload_file,
)
from shrine_upload.services.signing_client import build_signing_url, get_upload_settings

__all__ = [
    "upload",
    "upload_many",
    "LocalFile",
    "get_upload_settings",
    "build_signing_url",
    "upload_file",
    "build_upload_form",
    "build_upload_headers",
    "parse_object_key",
    "build_file_upload",
]
