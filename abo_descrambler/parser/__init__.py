from abo_descrambler.parser.descrambler import descramble, descramble_for_display
from abo_descrambler.parser.fields import extract_transaction, extract_transactions
from abo_descrambler.parser.models import ProcessedFile, Transaction
from abo_descrambler.parser.records import split_records
from abo_descrambler.parser.sign import resolve_sign

__all__ = [
    "ProcessedFile",
    "Transaction",
    "descramble",
    "descramble_for_display",
    "extract_transaction",
    "extract_transactions",
    "resolve_sign",
    "split_records",
]
