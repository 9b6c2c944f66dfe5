from typing import Literal

Sign = Literal["+", "-"]

DEBIT_TYPE_CODES: frozenset[str] = frozenset({"1", "4"})


def resolve_sign(type_code: str) -> Sign:
    """Classify a debit/credit type code; unknown or empty codes are credits."""
    return "-" if type_code in DEBIT_TYPE_CODES else "+"


def signed_amount(type_code: str, magnitude: str) -> str:
    return "-" + magnitude if resolve_sign(type_code) == "-" else magnitude
