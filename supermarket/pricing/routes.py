"""
supermarket/pricing/routes.py
-----------------------------
JSON routes for administering the shared pricing-rule registry.

Carts already open keep the rules they were created with; changes here
only affect carts started afterwards.
"""
from flask import current_app, jsonify, request, url_for

from supermarket.pricing import pricing
from supermarket.pricing.validators import validate_rule_payload, parse_rule_payload


def _registry():
    return current_app.extensions['rule_registry']


def _rule_not_found(item_code: str):
    return jsonify({'error': f'Rule for item {item_code} not found'}), 404


def _invalid(errors: dict):
    current_app.logger.warning(f"Rejected pricing rule payload: {errors}")
    return jsonify({'error': 'Invalid pricing rule.', 'errors': errors}), 400


# ── List / Get ────────────────────────────────────────────────────

@pricing.route('', methods=['GET'])
def list_rules():
    return jsonify([rule.to_dict() for rule in _registry().get_all()])


@pricing.route('/<item_code>', methods=['GET'])
def get_rule(item_code):
    rule = _registry().get(item_code)
    if rule is None:
        return _rule_not_found(item_code)
    return jsonify(rule.to_dict())


# ── Create ────────────────────────────────────────────────────────

@pricing.route('', methods=['POST'])
def create_rule():
    """
    Create a rule. ValidationError (400) and ConflictError (409) raised by
    the registry are turned into JSON by the app-level error handler.
    """
    data   = request.get_json(silent=True)
    errors = validate_rule_payload(data, require_item_code=True)
    if errors:
        return _invalid(errors)

    rule = _registry().create(**parse_rule_payload(data))
    current_app.logger.info(f"Admin created pricing rule: {rule.item_code}")

    response = jsonify(rule.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('pricing.get_rule', item_code=rule.item_code)
    return response


# ── Update ────────────────────────────────────────────────────────

@pricing.route('/<item_code>', methods=['PUT'])
def update_rule(item_code):
    data   = request.get_json(silent=True)
    errors = validate_rule_payload(data, require_item_code=False)
    if errors:
        return _invalid(errors)

    fields = parse_rule_payload(data)
    fields['item_code'] = item_code   # the URL names the rule, not the body
    rule = _registry().update(**fields)
    if rule is None:
        return _rule_not_found(item_code)

    current_app.logger.info(f"Admin updated pricing rule: {rule.item_code}")
    return jsonify(rule.to_dict())


# ── Delete ────────────────────────────────────────────────────────

@pricing.route('/<item_code>', methods=['DELETE'])
def delete_rule(item_code):
    if not _registry().delete(item_code):
        return _rule_not_found(item_code)
    current_app.logger.info(f"Admin deleted pricing rule: {item_code.upper()}")
    return '', 204


# ── Reset ─────────────────────────────────────────────────────────

@pricing.route('/reset', methods=['POST'])
def reset_rules():
    """Discard every custom rule and restore the default A/B/C/D catalog."""
    _registry().reset_to_defaults()
    current_app.logger.info("Admin reset pricing rules to defaults")
    return jsonify({'message': 'Pricing rules reset to defaults'})
