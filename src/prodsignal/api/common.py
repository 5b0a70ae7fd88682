"""Shared API helpers."""

from __future__ import annotations

import os


def cors_origins() -> list[str]:
    raw = os.getenv("PRODSIGNAL_CORS_ORIGINS", "").strip()
    if raw:
        return [origin.strip() for origin in raw.split(",") if origin.strip()]
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
