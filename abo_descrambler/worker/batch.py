from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from abo_descrambler.config.settings import Settings
from abo_descrambler.logging.logger import Log
from abo_descrambler.parser.models import ProcessedFile
from abo_descrambler.processor.models import UploadedFile
from abo_descrambler.processor.processor import Processor


class BatchOrchestrator:
    """Process every file of an upload batch and keep the latest result set."""

    def __init__(self, processor: Processor, settings: Settings) -> None:
        self._processor = processor
        self._settings = settings
        self._latest: tuple[ProcessedFile, ...] = ()

    @property
    def latest(self) -> tuple[ProcessedFile, ...]:
        """Result set of the most recently completed batch."""
        return self._latest

    def process_batch(self, files: Sequence[UploadedFile]) -> tuple[ProcessedFile, ...]:
        """Parse all files, possibly concurrently, returning results in upload order.

        A file that fails contributes an empty ProcessedFile; the rest of the
        batch is unaffected. The completed result set replaces ``latest``.
        """
        Log.info(f"Processing batch of {len(files)} files")
        if not files:
            self._latest = ()
            return self._latest

        workers = min(self._settings.max_concurrent_reads, len(files))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order regardless of completion order.
            results = tuple(pool.map(self._process_one, files))

        self._latest = results
        total = sum(len(result.transactions) for result in results)
        Log.info(f"Batch complete: {len(results)} files, {total} transactions")
        return results

    def _process_one(self, uploaded: UploadedFile) -> ProcessedFile:
        try:
            return self._processor.process(uploaded)
        except Exception as exc:
            Log.error(f"Unexpected error processing {uploaded.name}: {exc}")
            return ProcessedFile(original_name=uploaded.name)
