"""HTTP routes for the API server."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from ..analysis.samples import sample_interviews
from ..analysis.service import AnalysisService
from ..core.exceptions import ConfigurationError, InvalidInputError, ProdSignalError
from .app import limiter
from .response_utils import classify_failure

logger = logging.getLogger("prodsignal.api")


def register_routes(
    app: Flask,
    *,
    service: AnalysisService,
    analyze_rate_limit: str,
) -> None:
    @app.before_request
    def log_request() -> None:
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.path,
            request.remote_addr,
        )

    @app.get("/api/info")
    def api_info() -> Any:
        return jsonify(
            {
                "name": "ProdSignal",
                "version": "0.1",
                "endpoints": {
                    "analyze": "/api/analyze",
                    "samples": "/api/samples",
                },
            }
        )

    @app.get("/api/samples")
    def list_samples() -> Any:
        return jsonify({"interviews": sample_interviews()})

    @app.post("/api/analyze")
    @limiter.limit(analyze_rate_limit)
    def analyze() -> Any:
        payload = request.get_json(force=True, silent=True) or {}
        interviews = payload.get("interviews") if isinstance(payload, dict) else None
        try:
            outcome = service.analyze(interviews)
        except InvalidInputError as exc:
            message, status = classify_failure(exc)
            logger.info("Rejected analyze request: %s", exc)
            return jsonify({"error": message}), status
        except ConfigurationError as exc:
            message, status = classify_failure(exc)
            logger.error("Analysis misconfigured: %s", exc)
            return jsonify({"error": message}), status
        except ProdSignalError as exc:
            message, status = classify_failure(exc)
            logger.warning("Analysis failed status=%d: %s", status, exc)
            return jsonify({"error": message}), status
        except Exception as exc:
            message, status = classify_failure(exc)
            logger.exception("Analysis error")
            return jsonify({"error": message}), status
        return jsonify(outcome.to_dict())
