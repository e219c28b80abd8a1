#!/usr/bin/env python3
"""
Backend Application
===================

Main entry point for the listing parser API.
"""

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from backend.api import register_routes
from backend.listing_parser.logger import get_logger

log = get_logger('app')


def create_app() -> Flask:
    """Create the Flask app with CORS and all API routes registered"""
    app = Flask(__name__)
    CORS(app,
         resources={rf"{Config.API_PREFIX}/*": {"origins": Config.CORS_ORIGINS}},
         methods=['GET', 'POST', 'OPTIONS'],
         allow_headers=['Content-Type', 'Authorization'])

    # =========================================================================
    # HEALTH CHECK
    # =========================================================================

    @app.route(f'{Config.API_PREFIX}/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            "status": "healthy",
            "service": "Listing Parser API",
            "version": "1.0.0"
        })

    register_routes(app)
    log.info("Listing parser API registered")
    return app


app = create_app()


if __name__ == '__main__':
    log.info(f"Starting server on {Config.BASE_URL}")
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
