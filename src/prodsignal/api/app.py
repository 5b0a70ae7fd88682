"""Flask app factory for the API server."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from ..analysis.service import AnalysisService
from ..config.settings import Settings, get_settings
from ..llm.client import AnthropicTextClient
from ..utils.logging import setup_logging
from .common import cors_origins

# 60 requests/minute per IP by default; /api/analyze carries its own tighter limit.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["60 per minute"],
    storage_uri="memory://",
)


def build_service(settings: Optional[Settings] = None) -> AnalysisService:
    return AnalysisService(AnthropicTextClient(settings or get_settings()))


def create_app(
    service: Optional[AnalysisService] = None,
    *,
    settings: Optional[Settings] = None,
    testing: bool = False,
) -> Flask:
    from .routes import register_routes

    setup_logging()
    settings = settings or get_settings()
    app = Flask(__name__)
    app.config["TESTING"] = testing
    app.config["RATELIMIT_ENABLED"] = not testing
    CORS(app, origins=cors_origins())
    limiter.init_app(app)
    register_routes(
        app,
        service=service or build_service(settings),
        analyze_rate_limit=settings.analyze_rate_limit,
    )
    return app
