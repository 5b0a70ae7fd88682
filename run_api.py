#!/usr/bin/env python3
"""Run the ProdSignal API server."""

import os

from dotenv import load_dotenv

from src.prodsignal.api.app import create_app

if __name__ == "__main__":
    load_dotenv()
    app = create_app()
    app.run(
        host=os.environ.get("PRODSIGNAL_HOST", "127.0.0.1"),
        port=int(os.environ.get("PRODSIGNAL_PORT", "5001")),
        debug=os.environ.get("PRODSIGNAL_DEBUG", "").lower() in {"1", "true", "yes"},
    )
