import click
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import config
from supermarket.errors import PricingError


def create_app(config_name='default'):
    """Application factory — creates and configures the Flask app."""
    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # ── Logging ───────────────────────────────────────────────────
    from supermarket.utils.logging import setup_logging
    setup_logging(app)

    # ── In-memory state ───────────────────────────────────────────
    # One registry and one cart store per process. They live in
    # app.extensions so handlers reach them through current_app.
    from supermarket.pricing.registry import RuleRegistry
    from supermarket.checkout.sessions import SessionStore

    registry = RuleRegistry() if app.config['CHECKOUT_SEED_DEFAULT_RULES'] else RuleRegistry([])
    app.extensions['rule_registry'] = registry
    app.extensions['session_store'] = SessionStore(registry)

    # ── Blueprints ────────────────────────────────────────────────
    from supermarket.main import main as main_blueprint
    app.register_blueprint(main_blueprint)

    from supermarket.checkout import checkout as checkout_blueprint
    app.register_blueprint(checkout_blueprint, url_prefix='/api/checkout')

    from supermarket.pricing import pricing as pricing_blueprint
    app.register_blueprint(pricing_blueprint, url_prefix='/api/pricingrules')

    # ── Error Handlers ────────────────────────────────────────────
    @app.errorhandler(PricingError)
    def pricing_error(e):
        app.logger.warning(f"{type(e).__name__}: {e.message}")
        return jsonify({'error': e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        """404 / 405 / 400 etc. as JSON, keeping headers such as Allow."""
        response = e.get_response()
        response.data = jsonify({'error': e.description}).get_data()
        response.content_type = 'application/json'
        return response

    @app.errorhandler(500)
    def internal_error(e):
        original = getattr(e, 'original_exception', None)
        app.logger.error(f"Unhandled error: {original or e}", exc_info=original)
        return jsonify({'error': 'Internal server error'}), 500

    # ── CORS ──────────────────────────────────────────────────────
    @app.after_request
    def allow_cross_origin(response):
        response.headers['Access-Control-Allow-Origin']  = app.config['CORS_ALLOW_ORIGIN']
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        return response

    # ── CLI Commands ──────────────────────────────────────────────
    register_commands(app)

    # ── ProxyFix (HTTPS termination at the load balancer) ─────────
    from werkzeug.middleware.proxy_fix import ProxyFix
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app


def register_commands(app):
    """Register custom Flask CLI commands."""

    @app.cli.command('show-rules')
    def show_rules():
        """Show the current pricing rules (diagnostic)."""
        rules = app.extensions['rule_registry'].get_all()
        if not rules:
            click.echo('No pricing rules defined. Run flask reset-rules first.')
            return
        click.echo(f'{"Item":<8} {"Unit":<8} {"Offer"}')
        click.echo('─' * 30)
        for rule in rules:
            offer = rule.special_offer
            offer_text = f'{offer.quantity} for {offer.special_price}' if offer else '—'
            click.echo(f'{rule.item_code:<8} {rule.unit_price:<8} {offer_text}')

    @app.cli.command('reset-rules')
    def reset_rules():
        """Restore the default A/B/C/D pricing rules."""
        app.extensions['rule_registry'].reset_to_defaults()
        click.echo('✅  Pricing rules reset to defaults.')

    @app.cli.command('price')
    @click.argument('items', nargs=-1, required=True)
    def price(items):
        """Price a basket of scanned ITEMS, e.g. flask price A A B C."""
        from supermarket.checkout.basket import Basket

        basket = Basket(app.extensions['rule_registry'].get_all())
        try:
            for item in items:
                basket.scan(item)
        except PricingError as e:
            raise click.ClickException(e.message)

        total, counts = basket.summary()
        for code, count in sorted(counts.items()):
            click.echo(f'{code:<8} x{count}')
        click.echo(f'Total: {total}')
