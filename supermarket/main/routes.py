"""
supermarket/main/routes.py
──────────────────────────
Service-level routes: health check for load balancers and monitoring.
"""
from datetime import datetime, timezone

from flask import current_app, jsonify

from supermarket.main import main


@main.route("/health")
def health():
    """Report that the process is up, with the size of its in-memory state."""
    registry = current_app.extensions['rule_registry']
    carts    = current_app.extensions['session_store']

    response = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": {
            "rules": len(registry),
            "carts": len(carts),
        },
    }
    return jsonify(response), 200
