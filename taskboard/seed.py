"""Migrate the configured database and fill it with fake data.

Usage:
    python -m taskboard.seed --users 40 --comments 400
"""
import argparse
import asyncio
import logging

from taskboard.config import parse_optional_seed, settings
from taskboard.database import async_session, engine
from taskboard.migrations import run_migrations
from taskboard.services.seed_service import SeedResult, seed_database


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the taskboard database with fake data.")
    parser.add_argument("--users", type=int, default=settings.SEED_USER_COUNT)
    parser.add_argument("--tasks-min", type=int, default=settings.SEED_TASKS_PER_USER_MIN)
    parser.add_argument("--tasks-max", type=int, default=settings.SEED_TASKS_PER_USER_MAX)
    parser.add_argument("--comments", type=int, default=settings.SEED_COMMENT_COUNT)
    parser.add_argument("--friendships", type=int, default=settings.SEED_FRIENDSHIP_PAIRS)
    parser.add_argument(
        "--random-seed",
        type=parse_optional_seed,
        default=settings.SEED_RANDOM_SEED,
        help="Integer seed, or \"none\" for fresh data on every run.",
    )
    parser.add_argument(
        "--skip-migrations", action="store_true", help="Assume the schema is already up to date."
    )
    return parser


async def run(args: argparse.Namespace) -> SeedResult:
    if not args.skip_migrations:
        await run_migrations(engine)
    try:
        async with async_session() as session:
            result = await seed_database(
                session,
                user_count=args.users,
                tasks_per_user_min=args.tasks_min,
                tasks_per_user_max=args.tasks_max,
                comment_count=args.comments,
                friendship_pairs=args.friendships,
                random_seed=args.random_seed,
            )
            await session.commit()
    finally:
        await engine.dispose()
    return result


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)
    result = asyncio.run(run(args))
    if result.skipped:
        print("Database already seeded")
    else:
        print(
            f"Inserted {result.users} users, {result.tasks} tasks, "
            f"{result.comments} comments, {result.friendships} friendship rows"
        )


if __name__ == "__main__":
    main()
