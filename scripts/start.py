#!/usr/bin/env python3
"""
Production startup script.

1. Creates any missing schema tables (init_db.py)
2. Starts gunicorn (replaces this process via os.execvp)

Usage:
    python scripts/start.py

The stores live in process memory, so gunicorn runs a single worker and
serves concurrent requests with threads. More workers would each hold their
own copy of the data.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def gunicorn_argv(port: str, threads: str) -> list[str]:
    return [
        "gunicorn",
        "app.wsgi:app",
        "--bind", f"0.0.0.0:{port}",
        "--workers", "1",
        "--threads", threads,
        "--timeout", "60",
        "--access-logfile", "-",
        "--error-logfile", "-",
    ]


def main() -> None:
    port = os.environ.get("PORT", "").strip()
    if not port:
        print("WARNING: PORT not set, using default 8080", flush=True)
        port = "8080"

    try:
        port_int = int(port)
        if port_int < 1 or port_int > 65535:
            raise ValueError("Port out of range")
    except ValueError:
        print(f"ERROR: Invalid PORT value '{port}'. Must be integer 1-65535.", flush=True)
        sys.exit(1)

    threads = (os.environ.get("GUNICORN_THREADS") or "8").strip()
    print(f"PORT={port} validated", flush=True)

    if (os.environ.get("INIT_DB_ON_START") or "1").strip() == "1":
        print("=== Creating schema ===", flush=True)
        from scripts.init_db import init_schema

        try:
            init_schema()
        except Exception as e:
            print(f"Schema creation failed: {e}", flush=True)
            sys.exit(1)

    print(f"=== Starting gunicorn on 0.0.0.0:{port} ({threads} threads) ===", flush=True)
    os.execvp("gunicorn", gunicorn_argv(port, threads))


if __name__ == "__main__":
    main()
