from pathlib import Path

from abo_descrambler.processor.exceptions import FileReadError
from abo_descrambler.processor.models import UploadedFile


class FileLoader:
    """Resolves the filesystem path of an uploaded file and reads its bytes."""

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root

    def load(self, uploaded: UploadedFile) -> bytes:
        """Return the raw contents of an uploaded file.

        In-memory content is returned as is; otherwise the path is resolved
        against ``files_root`` (when configured) and read from disk.

        Raises:
            FileReadError: if there is no content and no path, or the file
                cannot be read.
        """
        if uploaded.content is not None:
            return uploaded.content
        if uploaded.path is None:
            raise FileReadError(f"Uploaded file '{uploaded.name}' has no path or content")
        path = self._resolve_path(uploaded.path)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc

    def _resolve_path(self, path: Path) -> Path:
        if self._files_root is None or path.is_absolute():
            return path
        return self._files_root / path
