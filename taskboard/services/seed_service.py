"""Fake-data seeding for an empty database.

Generates users, their tasks, comments on random tasks by random users, and
mutual friendships (two directed rows per pair). Everything is derived from
``random_seed`` so the same seed reproduces the same data set.
"""
import logging
import random
from dataclasses import dataclass
from datetime import timezone

from faker import Faker
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.models.comment import Comment
from taskboard.models.friendship import Friendship
from taskboard.models.task import TaskItem
from taskboard.models.user import User

logger = logging.getLogger(__name__)

COMPLETED_PROBABILITY = 0.3
MAX_USERNAME_ATTEMPTS_PER_USER = 100


@dataclass
class SeedResult:
    skipped: bool = False
    users: int = 0
    tasks: int = 0
    comments: int = 0
    friendships: int = 0


def _validate(
    user_count: int,
    tasks_per_user_min: int,
    tasks_per_user_max: int,
    comment_count: int,
    friendship_pairs: int,
) -> None:
    for name, value in (
        ("user_count", user_count),
        ("tasks_per_user_min", tasks_per_user_min),
        ("tasks_per_user_max", tasks_per_user_max),
        ("comment_count", comment_count),
        ("friendship_pairs", friendship_pairs),
    ):
        if value < 0:
            raise ValueError(f"{name} must not be negative")
    if tasks_per_user_min > tasks_per_user_max:
        raise ValueError("tasks_per_user_min must not exceed tasks_per_user_max")


def max_friendship_pairs(user_count: int) -> int:
    """Number of distinct unordered pairs among ``user_count`` users."""
    return user_count * (user_count - 1) // 2


def _unique_usernames(fake: Faker, count: int) -> list[str]:
    usernames: list[str] = []
    used: set[str] = set()
    attempts = 0
    while len(usernames) < count:
        attempts += 1
        if attempts > count * MAX_USERNAME_ATTEMPTS_PER_USER:
            raise RuntimeError(f"Could not generate {count} unique usernames")
        username = fake.user_name().lower()
        if username in used:
            continue
        used.add(username)
        usernames.append(username)
    return usernames


async def seed_database(
    db: AsyncSession,
    *,
    user_count: int = 30,
    tasks_per_user_min: int = 1,
    tasks_per_user_max: int = 5,
    comment_count: int = 300,
    friendship_pairs: int = 120,
    random_seed: int | None = 42,
) -> SeedResult:
    """Populate an empty database. A no-op when any user already exists.

    Rows are flushed but not committed; the caller owns the transaction.
    """
    _validate(user_count, tasks_per_user_min, tasks_per_user_max, comment_count, friendship_pairs)

    existing = await db.scalar(select(User.id).limit(1))
    if existing is not None:
        logger.info("Database already contains users, skipping seed")
        return SeedResult(skipped=True)

    fake = Faker()
    if random_seed is not None:
        fake.seed_instance(random_seed)
    rnd = random.Random(random_seed)

    # Users
    users = [User(username=name) for name in _unique_usernames(fake, user_count)]
    db.add_all(users)
    await db.flush()
    user_ids = [u.id for u in users]

    # Tasks
    tasks: list[TaskItem] = []
    for user_id in user_ids:
        for _ in range(rnd.randint(tasks_per_user_min, tasks_per_user_max)):
            tasks.append(
                TaskItem(
                    title=fake.catch_phrase(),
                    is_completed=rnd.random() < COMPLETED_PROBABILITY,
                    user_id=user_id,
                )
            )
    db.add_all(tasks)
    await db.flush()
    task_ids = [t.id for t in tasks]

    # Comments: random task, random author
    comments: list[Comment] = []
    if task_ids:
        for _ in range(comment_count):
            comments.append(
                Comment(
                    body=fake.sentence(),
                    created_at=fake.date_time_between(
                        start_date="-30d", end_date="now", tzinfo=timezone.utc
                    ),
                    task_item_id=rnd.choice(task_ids),
                    author_id=rnd.choice(user_ids),
                )
            )
    db.add_all(comments)
    await db.flush()

    # Friendships: unique unordered pairs, both directions share a timestamp
    target_pairs = min(friendship_pairs, max_friendship_pairs(len(user_ids)))
    pairs: set[tuple[int, int]] = set()
    friendships: list[Friendship] = []
    while len(pairs) < target_pairs:
        a = rnd.choice(user_ids)
        b = rnd.choice(user_ids)
        if a == b:
            continue
        key = (a, b) if a < b else (b, a)
        if key in pairs:
            continue
        pairs.add(key)

        since = fake.date_time_between(start_date="-2y", end_date="now", tzinfo=timezone.utc)
        friendships.append(Friendship(user_id=a, friend_id=b, since=since))
        friendships.append(Friendship(user_id=b, friend_id=a, since=since))
    db.add_all(friendships)
    await db.flush()

    result = SeedResult(
        users=len(users),
        tasks=len(tasks),
        comments=len(comments),
        friendships=len(friendships),
    )
    logger.info(
        "Seeded %d users, %d tasks, %d comments, %d friendship rows",
        result.users,
        result.tasks,
        result.comments,
        result.friendships,
    )
    return result
