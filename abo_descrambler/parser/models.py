from dataclasses import dataclass, field


@dataclass(frozen=True)
class Transaction:
    """One ``075`` record of an ABO statement. All fields are raw text."""

    own_account: str
    other_account_scrambled: str
    other_account: str
    transaction_id: str
    amount: str  # magnitude in hundredths, "-" prefixed for debits
    variable_symbol: str
    bank_code: str
    note: str


@dataclass(frozen=True)
class ProcessedFile:
    """Transactions parsed from one uploaded file, in record order."""

    original_name: str
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
