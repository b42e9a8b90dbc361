from flask import Blueprint, jsonify

from .mail.routes import get_dispatch_service

# 認証なしのhealth用Blueprint
health_bp = Blueprint("health", __name__)


@health_bp.get("/live")
def health_live():
    """Simple liveness probe."""
    return jsonify({"status": "ok"}), 200


@health_bp.get("/ready")
def health_ready():
    """Readiness probe checking the mail transport configuration."""
    ok = get_dispatch_service().sender.validate_config()
    details = {
        "mail": "ok" if ok else "error",
        "status": "ok" if ok else "error",
    }
    return jsonify(details), 200 if ok else 503
