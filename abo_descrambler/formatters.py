"""Text and JSON formatters for parsed ABO files.

Leading zeros are stripped here and only here; parsed Transactions keep the
exact fixed-width text of the statement.
"""

import json

from abo_descrambler.parser.descrambler import strip_leading_zeros
from abo_descrambler.parser.models import ProcessedFile, Transaction

COLUMNS: tuple[tuple[str, str], ...] = (
    ("own_account", "Own Acc"),
    ("other_account_scrambled", "Other Acc Scramble"),
    ("other_account", "Other Acc Proper"),
    ("amount", "Amount"),
    ("variable_symbol", "VS"),
    ("note", "Note"),
)


def format_amount(amount: str) -> str:
    """Render an amount in hundredths with a decimal comma.

    Example: ``-000000012345`` -> ``-123,45``
    """
    sign = "-" if amount.startswith("-") else ""
    digits = strip_leading_zeros(amount.removeprefix("-")).rjust(3, "0")
    return f"{sign}{digits[:-2]},{digits[-2:]}"


def format_other_account(transaction: Transaction) -> str:
    return f"{strip_leading_zeros(transaction.other_account)}/{transaction.bank_code}"


def transaction_to_row(transaction: Transaction) -> dict[str, str]:
    return {
        "own_account": strip_leading_zeros(transaction.own_account),
        "other_account_scrambled": strip_leading_zeros(transaction.other_account_scrambled),
        "other_account": format_other_account(transaction),
        "amount": format_amount(transaction.amount),
        "variable_symbol": transaction.variable_symbol,
        "note": transaction.note,
    }


def format_processed_file(processed: ProcessedFile) -> str:
    """Format one file's transactions as an aligned text table.

    Columns are padded to their widest cell. The header line names the file
    and its transaction count, e.g. ``statement.gpc | 2 transactions``.
    """
    count = len(processed.transactions)
    lines = [f"{processed.original_name} | {count} transaction{'s' if count != 1 else ''}"]
    if not processed.transactions:
        return "\n".join(lines)

    rows = [transaction_to_row(t) for t in processed.transactions]
    widths = {
        key: max(len(title), *(len(row[key]) for row in rows))
        for key, title in COLUMNS
    }
    lines.append("")
    lines.append("  ".join(title.ljust(widths[key]) for key, title in COLUMNS).rstrip())
    for row in rows:
        lines.append("  ".join(row[key].ljust(widths[key]) for key, _ in COLUMNS).rstrip())
    return "\n".join(lines)


def format_batch_table(results: tuple[ProcessedFile, ...]) -> str:
    return "\n\n".join(format_processed_file(processed) for processed in results)


def format_batch_json(results: tuple[ProcessedFile, ...]) -> str:
    payload = [
        {
            "file": processed.original_name,
            "transactions": [transaction_to_row(t) for t in processed.transactions],
        }
        for processed in results
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2)
