"""
supermarket/pricing/rules.py
----------------------------
Pure-Python pricing values: SpecialOffer and PricingRule.

A rule prices one item code. With a special offer of "q for p", the
largest number of complete bundles is charged at the bundle price and the
leftover units at the unit price:

    price(n) = (n // q) * p + (n % q) * unit_price

All money is integer minor units, never float.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from supermarket.errors import ValidationError


def is_whole_number(value) -> bool:
    # bool is an int subclass; True is not a price
    return isinstance(value, int) and not isinstance(value, bool)


def normalize_item_code(item_code) -> str:
    """Strip and uppercase an item code. Raises ValidationError if blank."""
    if not isinstance(item_code, str) or not item_code.strip():
        raise ValidationError('Item code cannot be empty')
    return item_code.strip().upper()


# ── Values ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SpecialOffer:
    """Bulk discount: `quantity` units for `special_price`."""
    quantity:      int
    special_price: int

    def __post_init__(self):
        if not is_whole_number(self.quantity) or self.quantity <= 0:
            raise ValidationError('Offer quantity must be a positive integer')
        if not is_whole_number(self.special_price) or self.special_price < 0:
            raise ValidationError('Offer price cannot be negative')

    def to_dict(self) -> dict:
        return {'quantity': self.quantity, 'specialPrice': self.special_price}


@dataclass(frozen=True)
class PricingRule:
    """How to price one item code: unit price plus an optional offer."""
    item_code:     str
    unit_price:    int
    special_offer: Optional[SpecialOffer] = None

    def __post_init__(self):
        object.__setattr__(self, 'item_code', normalize_item_code(self.item_code))
        if not is_whole_number(self.unit_price) or self.unit_price < 0:
            raise ValidationError('Price cannot be negative')
        if self.special_offer is not None and not isinstance(self.special_offer, SpecialOffer):
            raise ValidationError('Special offer must be a SpecialOffer')

    def calculate_price(self, quantity: int) -> int:
        """Total price for `quantity` units of this item."""
        if not is_whole_number(quantity) or quantity < 0:
            raise ValidationError('Quantity cannot be negative')
        if quantity == 0:
            return 0

        offer = self.special_offer
        if offer is None:
            return quantity * self.unit_price

        bundles, remainder = divmod(quantity, offer.quantity)
        return bundles * offer.special_price + remainder * self.unit_price

    def to_dict(self) -> dict:
        return {
            'itemCode':     self.item_code,
            'unitPrice':    self.unit_price,
            'specialOffer': self.special_offer.to_dict() if self.special_offer else None,
        }


# ── Default catalog ───────────────────────────────────────────────

def default_rules() -> list:
    """The fixed catalog restored by a registry reset."""
    return [
        PricingRule('A', 50, SpecialOffer(3, 130)),
        PricingRule('B', 30, SpecialOffer(2, 45)),
        PricingRule('C', 20),
        PricingRule('D', 15),
    ]
