"""Česká spořitelna account number descrambling.

ABO exports from Česká spořitelna carry the counter-party account number with
its digits reordered. The two documented layouts are, slot by slot::

    P1 P2 P3 P4 P5 P6 C1 C2 C3 C4 C5 C6 C7 C8 C9 C0
    C0 C8 C9 C6 C1 C2 C3 C4 C5 C7 P1 P2 P3 P4 P5 P6

``P1..P6`` are the prefix digits and ``C0..C9`` the base account digits. Only
the second layout is handled.

See https://www.csas.cz/static_internet/cs/Obchodni_informace-Produkty/Prime_bankovnictvi/Spolecne/Prilohy/ABO_format.pdf
"""

ACCOUNT_LENGTH = 16

SCRAMBLE_SLOTS: tuple[str, ...] = (
    "C0", "C8", "C9", "C6", "C1", "C2", "C3", "C4",
    "C5", "C7", "P1", "P2", "P3", "P4", "P5", "P6",
)

# Output position -> offset in the padded scrambled number.
SCRAMBLE_OFFSETS: tuple[int, ...] = (15, 13, 14, 11, 6, 7, 8, 9, 10, 12, 0, 1, 2, 3, 4, 5)

_SEPARATORS = str.maketrans("", "", "/-")


def normalize_account_number(account: str) -> str:
    """Drop ``/`` and ``-`` separators and left-pad with zeros to 16 characters."""
    return account.translate(_SEPARATORS).rjust(ACCOUNT_LENGTH, "0")


def descramble(scrambled: str) -> str:
    """Reorder a scrambled account number into the canonical digit order.

    Characters are moved, never checked: non-digit input comes back reordered
    but otherwise untouched. Leading zeros are preserved.
    """
    padded = normalize_account_number(scrambled)
    return "".join(padded[offset] for offset in SCRAMBLE_OFFSETS)


def strip_leading_zeros(value: str) -> str:
    return value.lstrip("0")


def descramble_for_display(account: str) -> str:
    """Descramble a free-typed account number and drop its leading zeros."""
    return strip_leading_zeros(descramble(account))
