import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo root is on sys.path when running as a script (Windows-friendly).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.connect.db import create_schema, make_engine

logger = logging.getLogger("init_db")


def init_schema(*, database_url: str | None = None) -> list[str]:
    """
    Create every Connect table that does not exist yet. Safe to re-run.
    """
    db_url = (database_url or os.environ.get("DATABASE_URL") or "sqlite:///connect.db").strip()
    engine = make_engine(db_url)
    try:
        tables = create_schema(engine)
    finally:
        engine.dispose()
    logger.info("Schema ready on %s: %s", engine.url.render_as_string(hide_password=True), ", ".join(tables))
    return tables


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    parser = argparse.ArgumentParser(description="Create the Connect database tables.")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL.")
    args = parser.parse_args()
    init_schema(database_url=args.database_url)


if __name__ == "__main__":
    main()
