#!/usr/bin/env python3
"""
Achievement Backfill Script

Re-evaluates the achievement catalog for every user with recorded sessions
and awards anything they have earned but do not yet hold. Use after adding
catalog entries or after an outage left passes incomplete.

Key Features:
- Idempotent: already-earned names are skipped and the
  (user_id, achievement_name) constraint rejects duplicates
- Per-user isolation: one user's failure is logged and the run continues

Usage:
    python scripts/backfill_achievements.py
    python scripts/backfill_achievements.py --user USER_ID
    python scripts/backfill_achievements.py --init-schema

Requirements:
    - Database connection configured (DATABASE_URL env var)
"""
import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from plank_coach.achievements import AchievementEngine, build_default_catalog
from plank_coach.config import LOG_LEVEL, validate_config
from plank_coach.db.connection import Database
from plank_coach.db.postgres_store import PostgresAchievementStore
from plank_coach.exceptions import PlankCoachError

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def backfill_users(engine: AchievementEngine, user_ids: Optional[list[str]] = None) -> dict:
    """
    Run one evaluation pass per user.

    Args:
        engine: Engine bound to the store to backfill
        user_ids: Users to evaluate (default: every user with sessions)

    Returns:
        Counts of users processed, users failed and achievements awarded
    """
    stats = {'users': 0, 'failed': 0, 'awarded': 0}

    if user_ids is None:
        user_ids = await engine.store.get_user_ids_with_sessions()
    logger.info(f"Evaluating {len(engine.catalog)} achievements for {len(user_ids)} user(s)")

    for user_id in user_ids:
        try:
            report = await engine.evaluate_and_award(user_id)
        except PlankCoachError as e:
            stats['failed'] += 1
            logger.error(f"❌ Backfill failed for user {user_id}: {e.message}")
            continue

        stats['users'] += 1
        stats['awarded'] += len(report.newly_earned)
        if report.newly_earned:
            names = ", ".join(a.achievement_name for a in report.newly_earned)
            logger.info(f"User {user_id}: awarded {names}")
        if report.has_failures:
            logger.warning(
                f"User {user_id}: {len(report.evaluation_failures)} evaluation and "
                f"{len(report.award_failures)} award failure(s); rerun to retry"
            )

    return stats


async def main(user_id: str = None, init_schema: bool = False) -> int:
    start_time = datetime.now()
    logger.info("=" * 60)
    logger.info("ACHIEVEMENT BACKFILL")
    logger.info(f"Started at: {start_time.isoformat()}")
    logger.info("=" * 60)

    try:
        validate_config()
        catalog = build_default_catalog()
    except PlankCoachError as e:
        logger.error(f"❌ Startup failed: {e.message}")
        return 1

    database = Database()
    try:
        await database.init_pool()
        logger.info("✅ Database connection established")
    except Exception as e:
        logger.error(f"❌ Failed to connect to database: {e}")
        return 1

    try:
        store = PostgresAchievementStore(database)
        if init_schema:
            await store.init_schema()
            logger.info("✅ Schema ensured")

        engine = AchievementEngine(store, catalog)
        stats = await backfill_users(engine, [user_id] if user_id else None)

        duration = datetime.now() - start_time
        logger.info("=" * 60)
        logger.info("✅ BACKFILL COMPLETE")
        logger.info(f"Users processed: {stats['users']}, failed: {stats['failed']}")
        logger.info(f"Achievements awarded: {stats['awarded']}")
        logger.info(f"Total duration: {duration}")
        logger.info("=" * 60)

        return 1 if stats['failed'] else 0

    except Exception as e:
        logger.error(f"❌ Backfill failed: {e}", exc_info=True)
        return 1

    finally:
        await database.close_pool()
        logger.info("Database connection closed")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Award achievements users have earned but not received")
    parser.add_argument("--user", help="Only backfill this user ID")
    parser.add_argument("--init-schema", action="store_true", help="Create tables if they do not exist")

    args = parser.parse_args()
    exit_code = asyncio.run(main(user_id=args.user, init_schema=args.init_schema))
    sys.exit(exit_code)
