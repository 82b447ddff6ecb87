"""
supermarket/pricing/validators.py
---------------------------------
Validation for pricing-rule JSON payloads.
Returns a dict of field -> error_message.
An empty dict means all fields are valid.

Payload shape (camelCase, as the API has always used):
{
    "itemCode":     "E",                                 ← create only
    "unitPrice":    25,
    "specialOffer": {"quantity": 4, "specialPrice": 90}  ← optional / null
}
"""
from supermarket.pricing.rules import SpecialOffer, is_whole_number


def validate_rule_payload(data, require_item_code: bool = True) -> dict:
    """
    Validate a decoded JSON body for create / update rule.

    Args:
        data:              decoded JSON of any type
        require_item_code: True for create; update takes the code from the URL

    Returns:
        dict of {field_name: error_message} — empty if all valid.
    """
    if not isinstance(data, dict):
        return {'body': 'Request body must be a JSON object.'}

    errors = {}

    # ── itemCode ──────────────────────────────────────────────────
    if require_item_code:
        code = data.get('itemCode')
        if not isinstance(code, str) or not code.strip():
            errors['itemCode'] = 'Item code is required.'

    # ── unitPrice ─────────────────────────────────────────────────
    price = data.get('unitPrice')
    if price is None:
        errors['unitPrice'] = 'Unit price is required.'
    elif not is_whole_number(price):
        errors['unitPrice'] = 'Unit price must be a whole number.'
    elif price < 0:
        errors['unitPrice'] = 'Price cannot be negative.'

    # ── specialOffer ──────────────────────────────────────────────
    offer = data.get('specialOffer')
    if offer is not None:
        if not isinstance(offer, dict):
            errors['specialOffer'] = 'Special offer must be an object.'
        else:
            qty    = offer.get('quantity')
            sprice = offer.get('specialPrice')
            if not is_whole_number(qty) or qty <= 0:
                errors['specialOffer.quantity'] = 'Offer quantity must be a positive whole number.'
            if not is_whole_number(sprice) or sprice < 0:
                errors['specialOffer.specialPrice'] = 'Offer price must be a non-negative whole number.'

    return errors


def parse_rule_payload(data: dict) -> dict:
    """
    Convert a validated payload to keyword arguments for RuleRegistry.
    Call only after validate_rule_payload returns no errors.
    """
    offer = data.get('specialOffer')
    parsed = {
        'unit_price':    data['unitPrice'],
        'special_offer': SpecialOffer(offer['quantity'], offer['specialPrice']) if offer else None,
    }
    if 'itemCode' in data:
        parsed['item_code'] = data['itemCode']
    return parsed
