"""Fixed-point money helpers.

All settlement arithmetic happens in integer cents so that balances always sum
to exactly zero. Decimals only appear at the boundaries.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> int:
    """
    Convert a Decimal currency amount to integer cents.
    Uses ROUND_HALF_UP for consistency.

    Args:
        amount: Currency amount as Decimal

    Returns:
        Amount in cents (integer)
    """
    cents = Decimal(amount) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-decimal Decimal amount."""
    return (Decimal(cents) / 100).quantize(CENTS)


def split_cents(total_cents: int, parts: int) -> list[int]:
    """
    Split an amount into `parts` shares that sum exactly to the amount.

    The leftover cents from integer division are handed out one each to the
    last shares, e.g. 1000 split 3 ways -> [333, 333, 334].

    Args:
        total_cents: Amount to split, in cents
        parts: Number of shares (must be positive)

    Returns:
        List of shares in cents
    """
    if parts <= 0:
        raise ValueError(f"Cannot split into {parts} parts")

    base, remainder = divmod(total_cents, parts)
    return [base + (1 if i >= parts - remainder else 0) for i in range(parts)]


def is_settled(cents: int, tolerance_cents: int = 0) -> bool:
    """Check whether a balance is within the tolerance band around zero."""
    return abs(cents) <= tolerance_cents


def divide_cents(total_cents: int, parts: int) -> int:
    """Divide an amount into `parts`, rounding the quotient ROUND_HALF_UP."""
    if parts <= 0:
        raise ValueError(f"Cannot divide into {parts} parts")

    quotient = Decimal(total_cents) / parts
    return int(quotient.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
