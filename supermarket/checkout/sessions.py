"""
supermarket/checkout/sessions.py
--------------------------------
In-memory store of open carts, keyed by an opaque uuid4 string.

The lock guards only the id → Basket mapping; each Basket protects its
own counts. Carts never expire on their own; they live until deleted.
"""
import logging
import threading
import uuid
from typing import Optional

from supermarket.checkout.basket import Basket
from supermarket.pricing.registry import RuleRegistry


logger = logging.getLogger(__name__)


class SessionStore:
    """Keyed collection of Basket instances."""

    def __init__(self, registry: RuleRegistry):
        self._registry = registry
        self._lock     = threading.Lock()
        self._carts    = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._carts)

    def create_cart(self) -> str:
        """Open a cart priced with the registry's rules as of right now."""
        basket  = Basket(self._registry.get_all())
        cart_id = str(uuid.uuid4())
        with self._lock:
            self._carts[cart_id] = basket
        logger.info(f"Cart opened: {cart_id}")
        return cart_id

    def get_cart(self, cart_id: str) -> Optional[Basket]:
        with self._lock:
            return self._carts.get(cart_id)

    def delete_cart(self, cart_id: str) -> bool:
        """Remove a cart. Returns True if one was removed."""
        with self._lock:
            removed = self._carts.pop(cart_id, None) is not None
        if removed:
            logger.info(f"Cart closed: {cart_id}")
        return removed
