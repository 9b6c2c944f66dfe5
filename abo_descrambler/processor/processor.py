from abo_descrambler.config.settings import Settings
from abo_descrambler.logging.logger import Log
from abo_descrambler.parser.models import ProcessedFile
from abo_descrambler.processor.exceptions import ProcessorError
from abo_descrambler.processor.file_loader import FileLoader
from abo_descrambler.processor.models import UploadedFile
from abo_descrambler.processor.pipeline import PipelineContext, PipelineStep
from abo_descrambler.processor.steps import (
    ExtractTransactionsStep,
    LoadFileStep,
    SplitRecordsStep,
)


class Processor:
    """Runs one uploaded file through the pipeline steps.

    Pipeline: load -> split -> extract.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, uploaded: UploadedFile) -> ProcessedFile:
        """Parse one file. A file that cannot be read yields no transactions."""
        Log.info(f"Processing {uploaded.name}")
        context = PipelineContext(uploaded=uploaded)
        try:
            for step in self._steps:
                context = step.run(context)
        except ProcessorError as exc:
            context.error_message = str(exc)
            Log.error(f"Failed to process {uploaded.name}: {context.error_message}")
            return ProcessedFile(original_name=uploaded.name)

        return ProcessedFile(
            original_name=uploaded.name,
            transactions=tuple(context.transactions),
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the default ABO pipeline."""
    file_loader = FileLoader(files_root=settings.files_root)
    return Processor(
        steps=[
            LoadFileStep(file_loader=file_loader),
            SplitRecordsStep(),
            ExtractTransactionsStep(),
        ]
    )
