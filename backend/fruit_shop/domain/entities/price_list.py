"""Static price table used to total an order."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class PriceList:
    """Per-item unit prices plus a flat price for bundle items.

    An item whose identifier starts with ``bundle_prefix`` is a bundle and
    costs ``bundle_price`` regardless of the table. Unknown items cost
    ``default_price``.
    """

    unit_prices: Mapping[str, Decimal] = field(default_factory=dict)
    default_price: Decimal = Decimal("2.99")
    bundle_price: Decimal = Decimal("8.99")
    bundle_prefix: str = "bundle_"

    def price_of(self, item: str) -> Decimal:
        if item.startswith(self.bundle_prefix):
            return self.bundle_price
        return self.unit_prices.get(item, self.default_price)

    def total(self, items: Iterable[str]) -> Decimal:
        amount = sum((self.price_of(item) for item in items), Decimal("0"))
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)
