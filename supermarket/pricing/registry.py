"""
supermarket/pricing/registry.py
-------------------------------
In-memory registry of pricing rules, shared by every cart in the process.

One instance lives in `app.extensions['rule_registry']`. Every read and
write holds a single lock; operations are microsecond-scale so a coarse
lock is enough. Rules are immutable values, so handing them out of the
lock is safe.
"""
import logging
import threading
from typing import Iterable, List, Optional

from supermarket.errors import ConflictError
from supermarket.pricing.rules import (
    PricingRule, SpecialOffer, default_rules, normalize_item_code,
)


logger = logging.getLogger(__name__)


class RuleRegistry:
    """Mutable keyed collection of PricingRule with reset-to-defaults."""

    def __init__(self, rules: Optional[Iterable[PricingRule]] = None):
        self._lock  = threading.Lock()
        self._rules = {}
        if rules is None:
            self.reset_to_defaults()
        else:
            for rule in rules:
                self._rules[rule.item_code] = rule

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    # ── Read ──────────────────────────────────────────────────────

    def get_all(self) -> List[PricingRule]:
        """Snapshot of all rules, ordered by item code."""
        with self._lock:
            return sorted(self._rules.values(), key=lambda r: r.item_code)

    def get(self, item_code: str) -> Optional[PricingRule]:
        """Return the rule for `item_code` (any case), or None."""
        code = normalize_item_code(item_code)
        with self._lock:
            return self._rules.get(code)

    # ── Write ─────────────────────────────────────────────────────

    def create(self, item_code: str, unit_price: int,
               special_offer: Optional[SpecialOffer] = None) -> PricingRule:
        """
        Add a new rule. Raises ValidationError for bad inputs and
        ConflictError if a rule for the code already exists.
        """
        rule = PricingRule(item_code, unit_price, special_offer)
        with self._lock:
            if rule.item_code in self._rules:
                raise ConflictError(f'Rule for {rule.item_code} already exists')
            self._rules[rule.item_code] = rule
        logger.info(f"Pricing rule created: {rule.item_code} @ {rule.unit_price}")
        return rule

    def update(self, item_code: str, unit_price: int,
               special_offer: Optional[SpecialOffer] = None) -> Optional[PricingRule]:
        """
        Replace an existing rule. Returns None when the code is unknown;
        update never inserts.
        """
        rule = PricingRule(item_code, unit_price, special_offer)
        with self._lock:
            if rule.item_code not in self._rules:
                return None
            self._rules[rule.item_code] = rule
        logger.info(f"Pricing rule updated: {rule.item_code} @ {rule.unit_price}")
        return rule

    def delete(self, item_code: str) -> bool:
        """Remove a rule. Returns True if one was removed."""
        code = normalize_item_code(item_code)
        with self._lock:
            removed = self._rules.pop(code, None) is not None
        if removed:
            logger.info(f"Pricing rule deleted: {code}")
        return removed

    def reset_to_defaults(self) -> None:
        """Atomically replace every rule with the default A/B/C/D catalog."""
        fresh = {rule.item_code: rule for rule in default_rules()}
        with self._lock:
            self._rules = fresh
        logger.info("Pricing rules reset to defaults")
