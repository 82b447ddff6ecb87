"""
supermarket/pricing/__init__.py
-------------------------------
Pricing rules blueprint.
URL prefix: /api/pricingrules
"""
from flask import Blueprint

pricing = Blueprint('pricing', __name__)

from supermarket.pricing import routes  # noqa: E402, F401
