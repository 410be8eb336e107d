# server.py

import logging

from flask import Flask, current_app, jsonify, request

from .directory import approved_entries, build_row
from .enrichment import Enricher
from .sheet_writer import connect_to_sheet

logger = logging.getLogger(__name__)

SERVICE_NAME = "Link Directory"
SERVICE_VERSION = "0.1.0"


def create_app(settings, store=None, enricher=None) -> Flask:
    """
    Build the Flask app.

    `store` needs append_row(row) -> bool and get_rows(range) -> list.
    `enricher` is any callable link -> dict | None. Both default to the real
    Google Sheets and enrichment API clients built from `settings`.
    """
    app = Flask(__name__)

    app.extensions["linkdirectory"] = {
        "settings": settings,
        "store": store if store is not None else connect_to_sheet(settings),
        "enricher": enricher if enricher is not None else Enricher.from_settings(settings),
    }

    app.add_url_rule("/submit", view_func=submit, methods=["POST"])
    app.add_url_rule("/directory", view_func=directory, methods=["GET"])
    app.add_url_rule("/health", view_func=health, methods=["GET"])

    return app


def _context():
    return current_app.extensions["linkdirectory"]


def submit():
    """Enrich a submitted link and append it to the sheet as Pending."""
    data = request.get_json(silent=True)
    link = data.get("link") if isinstance(data, dict) else None

    if not link:
        return jsonify({"error": "Link is required"}), 400

    ctx = _context()
    logger.info("Received submission: %s", link)

    enriched = ctx["enricher"](link)
    if enriched is None:
        logger.warning("No enrichment data for %s, storing empty title and description", link)

    row = build_row(link, enriched)

    # A failed append still reports success to the caller
    if not ctx["store"].append_row(row):
        logger.error("Submission for %s was not persisted: %s", link, row)

    return jsonify({"message": "Link submitted successfully!", "data": row}), 200


def directory():
    """List approved entries."""
    ctx = _context()

    try:
        rows = ctx["store"].get_rows(ctx["settings"].directory_range)
    except Exception:
        logger.exception("Error fetching directory")
        return jsonify({"error": "Failed to fetch directory."}), 500

    if not rows:
        return jsonify({"directory": [], "message": "No data available in the directory."}), 200

    return jsonify({"directory": approved_entries(rows)}), 200


def health():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    })
