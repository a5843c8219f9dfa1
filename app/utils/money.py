# app/utils/money.py
"""
Kwoty pieniezne jako liczby calkowite w jednostkach drobnych (grosze, centy).

Decimal pojawia sie tylko na granicy prezentacji i przy zamianie kwot
wpisanych przez czlowieka na jednostki drobne. Float nigdy nie trafia
do bazy ani do porownan.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Union

from app.utils.settings import CURRENCY_SYMBOL

MINOR_UNITS_EXPONENT = 2

AMOUNT_POSITIVE = "positive"
AMOUNT_NEGATIVE = "negative"
AMOUNT_NIL = "nil"

Amount = Union[Decimal, float, int, str]


def to_minor_units(amount: Amount) -> int:
    """
    Zamienia kwote dziesietna na jednostki drobne, remisy zaokraglane od zera.

    Float przechodzi przez str(), wiec 12.345 liczy sie jako dziesietne
    12.345 (-> 1235), a nie jako jego binarne przyblizenie.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    if not value.is_finite():
        raise ValueError(f"Kwota musi byc skonczona liczba, otrzymano {amount!r}")

    scaled = value.scaleb(MINOR_UNITS_EXPONENT)
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(minor: int) -> Decimal:
    # scaleb jest dokladne, 12345 -> Decimal("123.45")
    return Decimal(int(minor)).scaleb(-MINOR_UNITS_EXPONENT)


def format_amount(minor: int, currency_symbol: str = CURRENCY_SYMBOL) -> str:
    """-1234567890, "£" -> "-12,345,678.90 £"."""
    return f"{from_minor_units(minor):,.2f} {currency_symbol}"


def amount_type(minor: int) -> str:
    if minor > 0:
        return AMOUNT_POSITIVE
    if minor < 0:
        return AMOUNT_NEGATIVE
    return AMOUNT_NIL


def amount_info(minor: int, currency_symbol: str = CURRENCY_SYMBOL) -> Dict[str, object]:
    formatted = format_amount(minor, currency_symbol)

    # formatted_minus jest identyczny z formatted, klienci na tym polegaja
    return {
        "raw": from_minor_units(minor),
        "formatted": formatted,
        "formatted_minus": formatted,
        "type": amount_type(minor),
    }
