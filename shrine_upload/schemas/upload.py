from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shrine_upload.errors import BadBody


class SigningData(BaseModel):
    """Presigned POST fields, forwarded verbatim to the object store."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    policy: str
    credential: str = Field(alias="x-amz-credential")
    algorithm: str = Field(alias="x-amz-algorithm")
    date: str = Field(alias="x-amz-date")
    signature: str = Field(alias="x-amz-signature")
    disposition: str = Field(alias="Content-Disposition")
    content_type: str = Field(alias="Content-Type")


class UploadSettings(BaseModel):
    method: str
    url: str
    fields: SigningData
    headers: dict[str, str]


class Metadata(BaseModel):
    size: int = Field(ge=0)
    filename: str
    mime_type: str


class FileUpload(BaseModel):
    id: str
    storage: str
    metadata: Metadata


def _as_text(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def decode_upload_settings(raw: str | bytes) -> UploadSettings:
    try:
        return UploadSettings.model_validate_json(raw)
    except ValidationError as exc:
        raise BadBody(_as_text(raw), reason=_summarize_errors(exc)) from exc


def decode_file_upload(raw: str | bytes) -> FileUpload:
    try:
        return FileUpload.model_validate_json(raw)
    except ValidationError as exc:
        raise BadBody(_as_text(raw), reason=_summarize_errors(exc)) from exc


def encode_file_upload(upload: FileUpload) -> str:
    """Serialize to the attachment JSON Shrine reads from a cached form field."""
    return upload.model_dump_json()


def _summarize_errors(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)
