"""
config.py — App Configuration
==============================
Plain config objects for `app.config.from_object`.  Environment
variables override the defaults; `create_app(overrides)` overrides both.
"""

import os
import secrets


class Config:
    SECRET_KEY        = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    LOG_LEVEL         = os.environ.get("LOG_LEVEL", "INFO")
    PLAYBACK_SPEED    = os.environ.get("PLAYBACK_SPEED", "medium")   # see playback.SPEED_PRESETS
    DEFAULT_ALGORITHM = "dijkstra"
    TESTING           = False


class DevelopmentConfig(Config):
    DEBUG     = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    TESTING    = True
    SECRET_KEY = "testing"
