from shrine_upload.errors import BadBody, BadStatus, BadUrl, NetworkError, Timeout, UploadHttpError
from shrine_upload.schemas.upload import (
    FileUpload,
    Metadata,
    SigningData,
    UploadSettings,
    decode_file_upload,
    decode_upload_settings,
    encode_file_upload,
)
from shrine_upload.services import (
    LocalFile,
    build_file_upload,
    get_upload_settings,
    parse_object_key,
    upload,
    upload_file,
    upload_many,
)

__all__ = [
    "upload",
    "upload_many",
    "get_upload_settings",
    "upload_file",
    "build_file_upload",
    "parse_object_key",
    "LocalFile",
    "UploadSettings",
    "SigningData",
    "FileUpload",
    "Metadata",
    "decode_upload_settings",
    "decode_file_upload",
    "encode_file_upload",
    "UploadHttpError",
    "BadUrl",
    "Timeout",
    "BadStatus",
    "NetworkError",
    "BadBody",
]
