from abo_descrambler.logging.logger import Log
from abo_descrambler.parser.descrambler import descramble
from abo_descrambler.parser.models import Transaction
from abo_descrambler.parser.sign import signed_amount

TRANSACTION_RECORD_TYPE = "075"
RECORD_TYPE_SLICE = slice(0, 3)

OWN_ACCOUNT_SLICE = slice(3, 19)
# The debit/credit classification reads the same bytes as the own account.
TYPE_CODE_SLICE = slice(3, 19)
OTHER_ACCOUNT_SLICE = slice(19, 35)
TRANSACTION_ID_SLICE = slice(35, 48)
AMOUNT_SLICE = slice(48, 60)
VARIABLE_SYMBOL_SLICE = slice(61, 71)
BANK_CODE_SLICE = slice(73, 77)
NOTE_SLICE = slice(97, 117)

TRANSACTION_RECORD_LENGTH = NOTE_SLICE.stop


def _text(record: bytes, span: slice) -> str:
    return record[span].decode("latin-1")


def record_type(record: bytes) -> str:
    return _text(record, RECORD_TYPE_SLICE)


def extract_transaction(record: bytes) -> Transaction | None:
    """Read a ``075`` record into a Transaction; other record types give None.

    Records shorter than the full layout are not rejected: fields past the end
    of the record come back truncated or empty.
    """
    if record_type(record) != TRANSACTION_RECORD_TYPE:
        return None

    if len(record) < TRANSACTION_RECORD_LENGTH:
        Log.debug(
            f"Short transaction record ({len(record)} of "
            f"{TRANSACTION_RECORD_LENGTH} bytes), tail fields truncated"
        )

    scrambled = _text(record, OTHER_ACCOUNT_SLICE)
    return Transaction(
        own_account=_text(record, OWN_ACCOUNT_SLICE),
        other_account_scrambled=scrambled,
        other_account=descramble(scrambled),
        transaction_id=_text(record, TRANSACTION_ID_SLICE),
        amount=signed_amount(_text(record, TYPE_CODE_SLICE), _text(record, AMOUNT_SLICE)),
        variable_symbol=_text(record, VARIABLE_SYMBOL_SLICE),
        bank_code=_text(record, BANK_CODE_SLICE),
        note=_text(record, NOTE_SLICE),
    )


def extract_transactions(records: list[bytes]) -> list[Transaction]:
    transactions = []
    for record in records:
        transaction = extract_transaction(record)
        if transaction is None:
            Log.debug(f"Skipping record of type '{record_type(record)}'")
            continue
        transactions.append(transaction)
    return transactions
