"""
Listing Parser API
==================

Endpoints for turning pasted listing HTML into pre-filled project data.
The parser never fails, so every valid request gets a result; low
confidence is the signal to review it by hand.
"""

from flask import jsonify, request
from pydantic import ValidationError

from config import Config
from backend.api.schemas import ParseHtmlRequest
from backend.listing_parser import parse
from backend.listing_parser.details import build_project_details
from backend.listing_parser.logger import get_logger

log = get_logger('api')


# =============================================================================
# PARSER API
# =============================================================================

def parse_html():
    """POST /api/parse-html - Extract listing fields from pasted HTML"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400

    try:
        body = ParseHtmlRequest.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        return jsonify({"error": "Missing required fields", "fields": fields}), 400

    if len(body.html_source) > Config.MAX_HTML_CHARS:
        return jsonify({"error": f"htmlSource exceeds {Config.MAX_HTML_CHARS} characters"}), 413

    result = parse(body.html_source, body.template_structure, body.base_url)
    log.info(f"Parsed HTML ({len(body.html_source)} chars): site={result.site}, confidence={result.confidence}")

    return jsonify({
        "parsedData": result.to_dict(),
        "projectDetails": build_project_details(result),
    })


def register_routes(app):
    """Register all routes with Flask app"""
    app.add_url_rule(f'{Config.API_PREFIX}/parse-html', 'parse_html', parse_html, methods=['POST'])
