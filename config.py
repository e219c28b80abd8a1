#!/usr/bin/env python3
"""
Configuration Management
=======================

Centralized configuration for the listing parser service.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
script_dir = os.path.dirname(os.path.abspath(__file__))
env_path = os.path.join(script_dir, '.env')
load_dotenv(env_path)


class Config:
    """Application configuration"""

    # Server Configuration
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8081))
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # API Configuration
    BASE_URL = f"http://{HOST}:{PORT}"
    API_PREFIX = "/api"
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Parser Configuration
    MAX_HTML_CHARS = int(os.getenv('MAX_HTML_CHARS', 5_000_000))  # reject larger pasted pages
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
