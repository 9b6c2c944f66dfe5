from abo_descrambler.logging.logger import Log
from abo_descrambler.parser.fields import extract_transactions
from abo_descrambler.parser.records import RECORD_DELIMITER, split_records
from abo_descrambler.processor.file_loader import FileLoader
from abo_descrambler.processor.pipeline import PipelineContext, PipelineStep


class LoadFileStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.uploaded)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes from {context.uploaded.name}")
        return context


class SplitRecordsStep(PipelineStep):
    def __init__(self, delimiter: bytes = RECORD_DELIMITER) -> None:
        self._delimiter = delimiter

    def run(self, context: PipelineContext) -> PipelineContext:
        context.records = split_records(context.raw_bytes, self._delimiter)
        Log.debug(f"Split {context.uploaded.name} into {len(context.records)} records")
        return context


class ExtractTransactionsStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.transactions = extract_transactions(context.records)
        Log.info(
            f"Extracted {len(context.transactions)} transactions from "
            f"{context.uploaded.name}"
        )
        return context
