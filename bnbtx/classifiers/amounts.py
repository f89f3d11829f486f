from __future__ import annotations

from decimal import Decimal, InvalidOperation

BINANCE_DECIMALS = 8


def decimal_exp(amount: str | None, exp: int = BINANCE_DECIMALS) -> str:
    """Shift a fixed-point integer string ``exp`` places right, e.g. "1" -> "0.00000001".

    Blank input is read as zero. Raises ValueError for anything that is not a finite number.
    """
    if amount is None or not amount.strip():
        return "0"
    try:
        value = Decimal(amount.strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount {amount!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid amount {amount!r}")

    text = format(value.scaleb(-exp), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
