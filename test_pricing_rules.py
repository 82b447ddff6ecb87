"""
test_pricing_rules.py — Tests for PricingRule / SpecialOffer arithmetic.
Run: pytest test_pricing_rules.py -v
"""
import pytest

from supermarket.errors import ValidationError
from supermarket.pricing.rules import (
    PricingRule, SpecialOffer, default_rules, normalize_item_code,
)


# ── 1. Construction & validation ──────────────────────────────────

def test_rule_code_is_normalised_to_uppercase():
    rule = PricingRule(' a ', 50)
    assert rule.item_code == 'A'


@pytest.mark.parametrize('code', ['', '   ', None, 7])
def test_rule_rejects_blank_or_non_string_code(code):
    with pytest.raises(ValidationError):
        PricingRule(code, 50)


@pytest.mark.parametrize('price', [-1, 1.5, '10', True, None])
def test_rule_rejects_bad_unit_price(price):
    with pytest.raises(ValidationError):
        PricingRule('A', price)


def test_zero_unit_price_is_allowed():
    assert PricingRule('FREE', 0).calculate_price(10) == 0


@pytest.mark.parametrize('qty,price', [(0, 10), (-2, 10), (2, -1), (2.0, 10), (2, None)])
def test_offer_rejects_bad_values(qty, price):
    with pytest.raises(ValidationError):
        SpecialOffer(qty, price)


def test_rule_rejects_offer_of_wrong_type():
    with pytest.raises(ValidationError):
        PricingRule('A', 50, special_offer={'quantity': 3, 'specialPrice': 130})


def test_rule_is_immutable():
    rule = PricingRule('A', 50)
    with pytest.raises(AttributeError):
        rule.unit_price = 10


def test_normalize_item_code_is_idempotent():
    once = normalize_item_code('ab')
    assert once == 'AB'
    assert normalize_item_code(once) == once


# ── 2. calculate_price ────────────────────────────────────────────

@pytest.mark.parametrize('n', [0, 1, 2, 3, 4, 5, 6, 7, 20, 101])
def test_price_with_offer_matches_bundle_formula(n):
    rule = PricingRule('A', 50, SpecialOffer(3, 130))
    assert rule.calculate_price(n) == (n // 3) * 130 + (n % 3) * 50


@pytest.mark.parametrize('n', [0, 1, 2, 9, 250])
def test_price_without_offer_is_linear(n):
    rule = PricingRule('C', 20)
    assert rule.calculate_price(n) == n * 20


def test_price_of_zero_units_is_zero():
    for rule in default_rules():
        assert rule.calculate_price(0) == 0


def test_negative_quantity_fails_for_any_rule():
    for rule in default_rules():
        with pytest.raises(ValidationError):
            rule.calculate_price(-1)


def test_offer_larger_than_quantity_charges_unit_price():
    rule = PricingRule('E', 25, SpecialOffer(4, 90))
    # 3 units never complete a bundle of 4
    assert rule.calculate_price(3) == 75
    assert rule.calculate_price(4) == 90


def test_offer_can_cost_more_than_units():
    # Offers are applied greedily even when they are a bad deal
    rule = PricingRule('X', 10, SpecialOffer(2, 25))
    assert rule.calculate_price(2) == 25


def test_large_quantity_stays_exact():
    rule = PricingRule('A', 50, SpecialOffer(3, 130))
    assert rule.calculate_price(3_000_001) == 1_000_000 * 130 + 50


# ── 3. Defaults & serialisation ───────────────────────────────────

def test_default_rules_catalog():
    rules = {r.item_code: r for r in default_rules()}
    assert sorted(rules) == ['A', 'B', 'C', 'D']
    assert rules['A'].unit_price == 50
    assert rules['A'].special_offer == SpecialOffer(3, 130)
    assert rules['B'].unit_price == 30
    assert rules['B'].special_offer == SpecialOffer(2, 45)
    assert rules['C'].unit_price == 20 and rules['C'].special_offer is None
    assert rules['D'].unit_price == 15 and rules['D'].special_offer is None


def test_to_dict_uses_api_field_names():
    assert PricingRule('a', 50, SpecialOffer(3, 130)).to_dict() == {
        'itemCode': 'A',
        'unitPrice': 50,
        'specialOffer': {'quantity': 3, 'specialPrice': 130},
    }
    assert PricingRule('d', 15).to_dict()['specialOffer'] is None
