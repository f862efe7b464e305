from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from pathlib import Path

_DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class LocalFile:
    name: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> LocalFile:
        file_path = Path(path)
        if not mime_type:
            guessed, _ = mimetypes.guess_type(file_path.name)
            mime_type = guessed or _DEFAULT_MIME_TYPE
        return cls(name=file_path.name, mime_type=mime_type, content=file_path.read_bytes())
