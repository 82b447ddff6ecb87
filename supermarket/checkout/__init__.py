"""
supermarket/checkout/__init__.py
--------------------------------
Checkout (cart session) blueprint.
URL prefix: /api/checkout
"""
from flask import Blueprint

checkout = Blueprint('checkout', __name__)

from supermarket.checkout import routes  # noqa: E402, F401
