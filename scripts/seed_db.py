"""seed_db.py

Seed the configured database (DATABASE_URL) with the demo dataset without
starting the web server.

Usage:
    python -m scripts.seed_db
    python -m scripts.seed_db --database-url sqlite:///./demo.db
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from sqlalchemy.orm import sessionmaker

from votehub.database import SessionLocal, make_engine
from votehub.seed import seed_database

logger = logging.getLogger(__name__)


def main(database_url: Optional[str] = None) -> int:
    if database_url:
        session_factory = sessionmaker(bind=make_engine(database_url), autoflush=False, expire_on_commit=False)
    else:
        session_factory = SessionLocal

    db = session_factory()
    try:
        result = seed_database(db)
    finally:
        db.close()

    if not result.committed:
        print(f"Seeding failed, nothing was written: {result.error}")
        return 1
    for name, count in result.counts.items():
        print(f"  {name}: {count} row(s)")
    print("Database seeded successfully")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Seed the VoteHub database with demo data")
    parser.add_argument("--database-url", help="override DATABASE_URL")
    args = parser.parse_args()
    sys.exit(main(args.database_url))
