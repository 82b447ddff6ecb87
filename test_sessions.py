"""
test_sessions.py — Tests for the SessionStore and price-frozen carts.
Run: pytest test_sessions.py -v
"""
import pytest

from supermarket.checkout.basket import Basket
from supermarket.checkout.sessions import SessionStore
from supermarket.pricing.registry import RuleRegistry
from supermarket.pricing.rules import SpecialOffer


@pytest.fixture
def registry():
    return RuleRegistry()


@pytest.fixture
def store(registry):
    return SessionStore(registry)


# ── 1. Lifecycle ──────────────────────────────────────────────────

def test_create_returns_usable_cart(store):
    cart_id = store.create_cart()
    basket  = store.get_cart(cart_id)
    assert isinstance(basket, Basket)
    assert basket.get_total_price() == 0
    assert len(store) == 1


def test_ids_are_unique(store):
    ids = {store.create_cart() for _ in range(500)}
    assert len(ids) == 500


def test_carts_are_independent(store):
    first  = store.get_cart(store.create_cart())
    second = store.get_cart(store.create_cart())
    first.scan('A')
    assert second.scanned_items == {}


def test_unknown_cart_is_none(store):
    assert store.get_cart('no-such-cart') is None


def test_delete_then_lookup_is_not_found(store):
    cart_id = store.create_cart()
    assert store.delete_cart(cart_id) is True
    assert store.get_cart(cart_id) is None
    # second delete reports nothing removed
    assert store.delete_cart(cart_id) is False
    assert len(store) == 0


# ── 2. Snapshot semantics ─────────────────────────────────────────

def test_cart_is_seeded_from_current_registry(registry, store):
    registry.create('E', 25, SpecialOffer(4, 90))
    basket = store.get_cart(store.create_cart())
    for _ in range(4):
        basket.scan('E')
    assert basket.get_total_price() == 90


def test_existing_cart_keeps_its_prices(registry, store):
    basket = store.get_cart(store.create_cart())

    registry.update('A', 1000)
    registry.delete('B')

    basket.scan('A')
    basket.scan('B')
    assert basket.get_total_price() == 80


def test_new_cart_sees_registry_edits(registry, store):
    registry.update('A', 1000)
    basket = store.get_cart(store.create_cart())
    basket.scan('A')
    assert basket.get_total_price() == 1000


def test_rule_added_later_is_unknown_to_old_cart(registry, store):
    from supermarket.errors import NotFoundError

    basket = store.get_cart(store.create_cart())
    registry.create('E', 25)
    with pytest.raises(NotFoundError):
        basket.scan('E')
