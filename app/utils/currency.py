"""Currency conversion and display formatting.

Settings travel as an explicit `CurrencySettings` value; nothing here keeps
module-level mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping

SUPPORTED_CURRENCIES: dict[str, tuple[str, str]] = {
    "USD": ("US Dollar", "$"),
    "EUR": ("Euro", "€"),
    "GBP": ("British Pound", "£"),
    "CAD": ("Canadian Dollar", "C$"),
    "AUD": ("Australian Dollar", "A$"),
    "JPY": ("Japanese Yen", "¥"),
    "CNY": ("Chinese Yuan", "¥"),
    "INR": ("Indian Rupee", "₹"),
    "MXN": ("Mexican Peso", "$"),
    "BRL": ("Brazilian Real", "R$"),
}

DEFAULT_EXCHANGE_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        "USD": Decimal("1"),
        "EUR": Decimal("0.85"),
        "GBP": Decimal("0.73"),
        "CAD": Decimal("1.25"),
        "AUD": Decimal("1.35"),
        "JPY": Decimal("110"),
        "CNY": Decimal("6.5"),
        "INR": Decimal("75"),
        "MXN": Decimal("20"),
        "BRL": Decimal("5.2"),
    }
)

ZERO_DECIMAL_CURRENCIES = frozenset({"JPY"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CurrencySettings:
    base_currency: str = "USD"
    display_currency: str = "USD"
    exchange_rates: Mapping[str, Decimal] = field(default_factory=lambda: DEFAULT_EXCHANGE_RATES)
    last_updated: datetime = field(default_factory=_utcnow)

    def with_updates(self, **changes) -> "CurrencySettings":
        """Return a copy with changes applied and a fresh timestamp."""
        if "exchange_rates" in changes:
            merged = dict(self.exchange_rates)
            merged.update({code.upper(): Decimal(str(rate)) for code, rate in changes["exchange_rates"].items()})
            changes["exchange_rates"] = MappingProxyType(merged)
        changes.setdefault("last_updated", _utcnow())
        return replace(self, **changes)


def _parse_amount(amount: str | int | float | Decimal | None) -> Decimal | None:
    if amount is None:
        return None
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def convert_currency(
    amount: str | int | float | Decimal,
    from_currency: str,
    to_currency: str,
    settings: CurrencySettings,
) -> Decimal:
    """Convert through the base currency; unknown rates count as 1."""
    value = _parse_amount(amount)
    if value is None:
        return Decimal("0")
    if from_currency == to_currency:
        return value
    from_rate = settings.exchange_rates.get(from_currency) or Decimal("1")
    to_rate = settings.exchange_rates.get(to_currency) or Decimal("1")
    return value / from_rate * to_rate


def currency_symbol(currency_code: str) -> str:
    entry = SUPPORTED_CURRENCIES.get(currency_code.upper())
    return entry[1] if entry else "$"


def format_currency(
    amount: str | int | float | Decimal | None,
    settings: CurrencySettings,
    currency_code: str | None = None,
) -> str:
    """Render an amount stored in the base currency for display.

    Unparseable input renders as `$0.00`.
    """
    value = _parse_amount(amount)
    if value is None:
        return "$0.00"

    currency = (currency_code or settings.display_currency).upper()
    if currency != settings.base_currency and currency in settings.exchange_rates:
        value = convert_currency(value, settings.base_currency, currency, settings)

    places = 0 if currency in ZERO_DECIMAL_CURRENCIES else 2
    quantum = Decimal(1).scaleb(-places)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(rounded):,.{places}f}"
