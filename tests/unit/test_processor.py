from pathlib import Path
from unittest.mock import MagicMock

from abo_descrambler.config.settings import Settings
from abo_descrambler.parser.models import ProcessedFile
from abo_descrambler.processor.exceptions import FileReadError
from abo_descrambler.processor.file_loader import FileLoader
from abo_descrambler.processor.models import UploadedFile
from abo_descrambler.processor.pipeline import PipelineContext
from abo_descrambler.processor.processor import Processor, build_processor
from abo_descrambler.processor.steps import (
    ExtractTransactionsStep,
    LoadFileStep,
    SplitRecordsStep,
)


def _make_processor(raw_bytes: bytes = b"") -> tuple[Processor, MagicMock]:
    file_loader = MagicMock(spec=FileLoader)
    file_loader.load.return_value = raw_bytes
    steps = [
        LoadFileStep(file_loader=file_loader),
        SplitRecordsStep(),
        ExtractTransactionsStep(),
    ]
    return Processor(steps=steps), file_loader


class TestProcessorPipeline:
    def test_parses_transactions_in_record_order(self, abo_file_bytes: bytes) -> None:
        processor, file_loader = _make_processor(abo_file_bytes)
        uploaded = UploadedFile(name="march.gpc", path=Path("march.gpc"))

        result = processor.process(uploaded)

        file_loader.load.assert_called_once_with(uploaded)
        assert result.original_name == "march.gpc"
        assert [t.transaction_id for t in result.transactions] == [
            "0000000000001",
            "0000000000002",
        ]
        assert result.transactions[1].other_account == "9010000000000000"
        assert result.transactions[1].note.rstrip() == "SECOND"

    def test_empty_file_yields_no_transactions(self) -> None:
        processor, _loader = _make_processor(b"")

        result = processor.process(UploadedFile(name="empty.gpc", content=b""))

        assert result == ProcessedFile(original_name="empty.gpc")

    def test_read_failure_yields_empty_result(self) -> None:
        processor, file_loader = _make_processor()
        file_loader.load.side_effect = FileReadError("disk gone")

        result = processor.process(UploadedFile(name="broken.gpc", path=Path("broken.gpc")))

        assert result == ProcessedFile(original_name="broken.gpc", transactions=())

    def test_runs_steps_in_order(self) -> None:
        call_order: list[str] = []

        def _step(name: str) -> MagicMock:
            step = MagicMock()
            step.run.side_effect = lambda ctx: (call_order.append(name), ctx)[1]
            return step

        processor = Processor(steps=[_step("load"), _step("split"), _step("extract")])

        processor.process(UploadedFile(name="a.gpc", content=b""))

        assert call_order == ["load", "split", "extract"]


class TestSteps:
    def test_split_step_fills_records(self) -> None:
        context = PipelineContext(uploaded=UploadedFile(name="a.gpc"), raw_bytes=b"a\r\nb")

        context = SplitRecordsStep().run(context)

        assert context.records == [b"a", b"b"]

    def test_extract_step_skips_foreign_records(self, make_transaction_record) -> None:
        context = PipelineContext(
            uploaded=UploadedFile(name="a.gpc"),
            records=[b"074header", make_transaction_record()],
        )

        context = ExtractTransactionsStep().run(context)

        assert len(context.transactions) == 1


class TestBuildProcessor:
    def test_reads_relative_paths_from_files_root(
        self, tmp_path: Path, abo_file_bytes: bytes
    ) -> None:
        (tmp_path / "march.gpc").write_bytes(abo_file_bytes)
        processor = build_processor(Settings(files_root=tmp_path))

        result = processor.process(UploadedFile(name="march.gpc", path=Path("march.gpc")))

        assert len(result.transactions) == 2
