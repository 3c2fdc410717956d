"""
Insert gaming platforms (VideoGame_Platform rows). Existing names are skipped. Run from project root:

  python -m app.scripts.seed_platforms                  # default platform list
  python -m app.scripts.seed_platforms "Steam Deck" PC  # explicit names
"""

import argparse
import logging
import sys

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import create_db_engine, create_session_factory
from app.models import Platform

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

DEFAULT_PLATFORMS = ("Nintendo Switch", "PC", "PS5", "Xbox Series X")


def seed_platforms(db: Session, names: list[str]) -> int:
    """Add any platform in names that is not stored yet. Returns the number inserted."""
    wanted = {n.strip() for n in names if n and n.strip()}
    existing = set(db.scalars(select(Platform.name).where(Platform.name.in_(wanted))))
    missing = sorted(wanted - existing)
    for name in missing:
        db.add(Platform(name=name))
    db.commit()
    return len(missing)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed gaming platforms.")
    parser.add_argument("names", nargs="*", help="Platform names (defaults to a standard set)")
    args = parser.parse_args(argv)

    engine = create_db_engine(settings)
    db = create_session_factory(engine)()
    try:
        inserted = seed_platforms(db, args.names or list(DEFAULT_PLATFORMS))
        logger.info("Platform seeding completed: inserted=%s", inserted)
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Platform seeding failed: %s", e)
        return 1
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
