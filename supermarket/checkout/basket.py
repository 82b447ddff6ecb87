"""
supermarket/checkout/basket.py
------------------------------
One customer's in-progress scan accumulation.

A Basket copies the pricing rules it is given at construction time, so a
cart stays price-frozen even if the registry is edited afterwards.

Counts structure:
{
    "<ITEM_CODE>": int,   ← number of units scanned
    ...
}

Two requests may target the same cart at once (double-clicks, retries),
so every method runs under the basket's own lock.
"""
import threading
from typing import Dict, Iterable, Tuple

from supermarket.errors import NotFoundError, ValidationError
from supermarket.pricing.rules import PricingRule


class Basket:
    """Multiset of scanned item codes bound to a rules snapshot."""

    def __init__(self, pricing_rules: Iterable[PricingRule]):
        self._lock   = threading.Lock()
        # Duplicate codes: the last rule given wins.
        self._rules  = {rule.item_code.upper(): rule for rule in pricing_rules}
        self._counts = {}

    # ── Read ──────────────────────────────────────────────────────

    @property
    def pricing_rules(self) -> Tuple[PricingRule, ...]:
        return tuple(self._rules.values())

    @property
    def scanned_items(self) -> Dict[str, int]:
        """Copy of the current counts; mutating it does not touch the basket."""
        with self._lock:
            return dict(self._counts)

    def get_total_price(self) -> int:
        with self._lock:
            return self._total()

    def summary(self) -> Tuple[int, Dict[str, int]]:
        """(total, counts) read together so they always agree."""
        with self._lock:
            return self._total(), dict(self._counts)

    def _total(self) -> int:
        return sum(
            self._rules[code].calculate_price(count)
            for code, count in self._counts.items()
        )

    # ── Write ─────────────────────────────────────────────────────

    def scan(self, item: str) -> None:
        """
        Add one unit of `item`. Raises ValidationError for a blank code
        and NotFoundError for a code missing from this basket's rules.
        """
        if not isinstance(item, str) or not item.strip():
            raise ValidationError('Item code cannot be empty')

        code = item.strip().upper()
        if code not in self._rules:
            raise NotFoundError(f'Unknown item: {code}')

        with self._lock:
            self._counts[code] = self._counts.get(code, 0) + 1

    def clear(self) -> None:
        """Empty the counts. The rules snapshot is kept, so the basket can be reused."""
        with self._lock:
            self._counts.clear()
