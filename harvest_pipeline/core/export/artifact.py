"""
Export Artifact
A named, typed blob ready to be written to disk or handed to a browser.
"""

import re
from dataclasses import dataclass

CSV_MIME_TYPE = "text/csv;charset=utf-8"
ZIP_MIME_TYPE = "application/zip"

_UNSAFE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def safe_name(value: str, max_length: int = 0) -> str:
    """Replaces every character outside [a-zA-Z0-9] with '_' and optionally caps the length."""
    name = _UNSAFE.sub("_", value or "")
    return name[:max_length] if max_length else name


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    mime_type: str
    content: bytes

    def __repr__(self) -> str:
        return f"ExportArtifact(filename={self.filename!r}, mime_type={self.mime_type!r}, size={len(self.content)})"
