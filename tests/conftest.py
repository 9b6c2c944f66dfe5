from collections.abc import Callable

import pytest

TransactionRecordFactory = Callable[..., bytes]


def _build_transaction_record(
    own_account: str = "0000001234567890",
    other_account: str = "0123456789012345",
    transaction_id: str = "0000000000042",
    amount: str = "000000012345",
    variable_symbol: str = "0000001234",
    bank_code: str = "0800",
    note: str = "RENT MARCH",
) -> bytes:
    """Assemble a full-length '075' record with fields at their fixed offsets."""
    record = (
        "075"
        + own_account.rjust(16, "0")
        + other_account.rjust(16, "0")
        + transaction_id.rjust(13, "0")
        + amount.rjust(12, "0")
        + "1"
        + variable_symbol.rjust(10, "0")
        + "00"
        + bank_code.rjust(4, "0")
        + "0" * 20
        + note.ljust(20)
        + "1503250000000000"
    )
    return record.encode("latin-1")


@pytest.fixture()
def make_transaction_record() -> TransactionRecordFactory:
    return _build_transaction_record


@pytest.fixture()
def header_record() -> bytes:
    """A '074' statement header record, which the parser must skip."""
    return b"0740000001234567890ACME S.R.O.         01032500000000001000+"


@pytest.fixture()
def abo_file_bytes(make_transaction_record: TransactionRecordFactory, header_record: bytes) -> bytes:
    """A small statement: header, two transactions, trailing CR LF."""
    first = make_transaction_record(transaction_id="1", note="FIRST")
    second = make_transaction_record(
        transaction_id="2",
        other_account="0000000000000019",
        amount="000000000500",
        note="SECOND",
    )
    return b"\r\n".join([header_record, first, second]) + b"\r\n"
