# slugkit/controllers/slug_controller.py
import logging
from flask import Blueprint, current_app, jsonify, request
from ..errors import ExhaustedUniquenessAttemptsError, SlugError
from ..models import NormalizationOptions
from ..utils.validators import parse_bool

logger = logging.getLogger(__name__)
slug_bp = Blueprint("slugs", __name__)


def _services():
    return current_app.extensions["slugkit"]


@slug_bp.get("/health")
def health():
    return jsonify({"ok": True})


@slug_bp.post("/slugs")
def generate_slug():
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "JSON body must be an object"}), 400
    text = body.get("text")
    if text is None:
        return jsonify({"ok": False, "error": "text is required"}), 400

    svc = _services()["slugs"]
    options = None
    if "preserve_original" in body:
        options = NormalizationOptions(
            separator=body.get("separator") or svc.settings.default_separator,
            preserve_original=parse_bool(body.get("preserve_original"), svc.settings.preserve_original),
        )
    try:
        slug = svc.generate(str(text), body.get("separator"), body.get("fallback"), options=options)
    except SlugError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "slug": slug})


@slug_bp.post("/slugs/unique")
def generate_unique_slug():
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        return jsonify({"ok": False, "error": "JSON body must be an object"}), 400
    text = body.get("text")
    table = (body.get("table") or "").strip()
    if text is None or not table:
        return jsonify({"ok": False, "error": "text and table are required"}), 400

    try:
        slug = _services()["unique"].generate_unique(
            str(text),
            table,
            column=body.get("column"),
            separator=body.get("separator"),
            exclude_key=body.get("exclude_key"),
        )
    except ExhaustedUniquenessAttemptsError as e:
        return jsonify({"ok": False, "error": str(e)}), 409
    except SlugError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    except Exception as e:
        logger.exception("existence check failed for %s", table)
        return jsonify({"ok": False, "error": f"failed on /slugs/unique: {e}"}), 500
    return jsonify({"ok": True, "slug": slug})
