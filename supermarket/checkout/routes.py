"""
supermarket/checkout/routes.py
------------------------------
JSON routes for the cart session lifecycle: start, scan, total, clear, delete.
"""
from flask import current_app, jsonify

from supermarket.checkout import checkout
from supermarket.errors import NotFoundError, ValidationError


def _carts():
    return current_app.extensions['session_store']


def _cart_not_found():
    return jsonify({'error': 'Cart not found'}), 404


def _totals(basket):
    total, items = basket.summary()
    return jsonify({'total': total, 'items': items})


# ── START ─────────────────────────────────────────────────────────

@checkout.route('/start', methods=['POST'])
def start():
    """Open a cart priced with the current rules."""
    return jsonify({'cartId': _carts().create_cart()})


# ── SCAN ──────────────────────────────────────────────────────────

@checkout.route('/<cart_id>/scan/<item>', methods=['POST'])
def scan(cart_id, item):
    """
    Scan one unit of `item` into the cart.
    A blank or unknown item is the client's mistake, so both answer 400.
    """
    basket = _carts().get_cart(cart_id)
    if basket is None:
        return _cart_not_found()

    try:
        basket.scan(item)
    except (ValidationError, NotFoundError) as exc:
        current_app.logger.warning(f"Scan rejected for cart {cart_id}: {exc.message}")
        return jsonify({'error': exc.message}), 400

    return _totals(basket)


# ── TOTAL ─────────────────────────────────────────────────────────

@checkout.route('/<cart_id>/total', methods=['GET'])
def total(cart_id):
    basket = _carts().get_cart(cart_id)
    if basket is None:
        return _cart_not_found()
    return _totals(basket)


# ── CLEAR ─────────────────────────────────────────────────────────

@checkout.route('/<cart_id>/clear', methods=['POST'])
def clear(cart_id):
    basket = _carts().get_cart(cart_id)
    if basket is None:
        return _cart_not_found()
    basket.clear()
    return jsonify({'total': 0, 'items': {}})


# ── DELETE ────────────────────────────────────────────────────────

@checkout.route('/<cart_id>', methods=['DELETE'])
def delete(cart_id):
    if not _carts().delete_cart(cart_id):
        return _cart_not_found()
    return '', 204
