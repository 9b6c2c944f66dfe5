from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedFile:
    """One file of an upload batch, either on disk or already in memory."""

    name: str
    path: Path | None = None
    content: bytes | None = None

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        return cls(name=path.name, path=path)
