import json

import pytest

from shrine_upload.errors import BadBody
from shrine_upload.schemas.upload import (
    FileUpload,
    Metadata,
    decode_file_upload,
    decode_upload_settings,
    encode_file_upload,
)


def _settings_payload() -> dict:
    return {
        "method": "POST",
        "url": "https://bucket.s3.amazonaws.com",
        "fields": {
            "key": "cache/xyz.jpg",
            "policy": "P",
            "x-amz-credential": "C",
            "x-amz-algorithm": "A",
            "x-amz-date": "D",
            "x-amz-signature": "S",
            "Content-Disposition": "inline",
            "Content-Type": "image/jpeg",
        },
        "headers": {"Cache-Control": "max-age=60"},
    }


def test_decode_upload_settings_renames_signing_fields():
    settings = decode_upload_settings(json.dumps(_settings_payload()))

    assert settings.method == "POST"
    assert settings.url == "https://bucket.s3.amazonaws.com"
    assert settings.headers == {"Cache-Control": "max-age=60"}
    assert settings.fields.key == "cache/xyz.jpg"
    assert settings.fields.policy == "P"
    assert settings.fields.credential == "C"
    assert settings.fields.algorithm == "A"
    assert settings.fields.date == "D"
    assert settings.fields.signature == "S"
    assert settings.fields.disposition == "inline"
    assert settings.fields.content_type == "image/jpeg"


def test_decode_upload_settings_ignores_unknown_fields():
    payload = _settings_payload()
    payload["expires_at"] = "2030-01-01T00:00:00Z"
    payload["fields"]["success_action_status"] = "201"

    settings = decode_upload_settings(json.dumps(payload).encode())

    assert settings.fields.key == "cache/xyz.jpg"


def test_decode_upload_settings_missing_field_raises_bad_body_with_raw_text():
    payload = _settings_payload()
    del payload["fields"]["x-amz-signature"]
    raw = json.dumps(payload)

    with pytest.raises(BadBody) as exc_info:
        decode_upload_settings(raw)

    assert exc_info.value.body == raw
    assert "x-amz-signature" in str(exc_info.value)


def test_decode_upload_settings_mistyped_field_raises_bad_body():
    payload = _settings_payload()
    payload["fields"]["policy"] = 42
    raw = json.dumps(payload)

    with pytest.raises(BadBody) as exc_info:
        decode_upload_settings(raw)

    assert exc_info.value.body == raw


def test_decode_upload_settings_rejects_non_string_header_values():
    payload = _settings_payload()
    payload["headers"] = {"Content-Length": 10}

    with pytest.raises(BadBody):
        decode_upload_settings(json.dumps(payload))


def test_decode_upload_settings_invalid_json_raises_bad_body():
    with pytest.raises(BadBody) as exc_info:
        decode_upload_settings(b"<html>oops</html>")

    assert exc_info.value.body == "<html>oops</html>"


def test_encode_file_upload_matches_shrine_attachment_shape():
    upload = FileUpload(
        id="xyz.jpg",
        storage="cache",
        metadata=Metadata(size=12, filename="photo.jpg", mime_type="image/jpeg"),
    )

    encoded = encode_file_upload(upload)

    assert json.loads(encoded) == {
        "id": "xyz.jpg",
        "storage": "cache",
        "metadata": {"size": 12, "filename": "photo.jpg", "mime_type": "image/jpeg"},
    }
    assert decode_file_upload(encoded) == upload


def test_decode_file_upload_rejects_negative_size():
    raw = '{"id": "a", "storage": "cache", "metadata": {"size": -1, "filename": "a", "mime_type": "text/plain"}}'

    with pytest.raises(BadBody) as exc_info:
        decode_file_upload(raw)

    assert exc_info.value.body == raw
