from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from abo_descrambler.parser.models import Transaction
from abo_descrambler.processor.models import UploadedFile


@dataclass(slots=True)
class PipelineContext:
    uploaded: UploadedFile
    raw_bytes: bytes = b""
    records: list[bytes] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
