from collections import Counter

import pytest
from faker import Faker
from sqlalchemy import func, select

from taskboard.models.comment import Comment
from taskboard.models.friendship import Friendship
from taskboard.models.task import TaskItem
from taskboard.models.user import User
from taskboard.services.seed_service import (
    _unique_usernames,
    max_friendship_pairs,
    seed_database,
)


async def _count(db_session, model) -> int:
    return await db_session.scalar(select(func.count()).select_from(model))


@pytest.mark.asyncio
async def test_seed_populates_empty_database(db_session):
    result = await seed_database(db_session)
    await db_session.commit()

    assert result.skipped is False
    assert result.users == 30
    assert 30 <= result.tasks <= 150
    assert result.comments == 300
    assert result.friendships == 240

    assert await _count(db_session, User) == 30
    assert await _count(db_session, TaskItem) == result.tasks
    assert await _count(db_session, Comment) == 300
    assert await _count(db_session, Friendship) == 240


@pytest.mark.asyncio
async def test_seed_runs_only_once(db_session):
    await seed_database(db_session, user_count=5, comment_count=10, friendship_pairs=3)
    await db_session.commit()

    second = await seed_database(db_session, user_count=5, comment_count=10, friendship_pairs=3)
    assert second.skipped is True
    assert second.users == 0
    assert await _count(db_session, User) == 5
    assert await _count(db_session, Comment) == 10


@pytest.mark.asyncio
async def test_seed_skips_when_any_user_exists(db_session, test_user):
    result = await seed_database(db_session)
    assert result.skipped is True
    assert await _count(db_session, User) == 1


@pytest.mark.asyncio
async def test_seeded_usernames_are_unique_and_lowercase(db_session):
    await seed_database(db_session, user_count=50)
    usernames = (await db_session.scalars(select(User.username))).all()
    assert len(usernames) == 50
    assert len(set(usernames)) == 50
    assert all(name == name.lower() for name in usernames)


@pytest.mark.asyncio
async def test_tasks_per_user_within_range(db_session):
    await seed_database(db_session, user_count=20, tasks_per_user_min=2, tasks_per_user_max=4)
    owners = Counter((await db_session.scalars(select(TaskItem.user_id))).all())
    assert len(owners) == 20
    assert all(2 <= count <= 4 for count in owners.values())


@pytest.mark.asyncio
async def test_comments_reference_existing_tasks_and_users(db_session):
    await seed_database(db_session, user_count=10, comment_count=100)
    task_ids = set((await db_session.scalars(select(TaskItem.id))).all())
    user_ids = set((await db_session.scalars(select(User.id))).all())
    rows = (await db_session.execute(select(Comment.task_item_id, Comment.author_id))).all()
    assert len(rows) == 100
    for task_item_id, author_id in rows:
        assert task_item_id in task_ids
        assert author_id in user_ids


@pytest.mark.asyncio
async def test_friendships_are_symmetric(db_session):
    await seed_database(db_session, user_count=15, friendship_pairs=40)
    rows = (
        await db_session.execute(select(Friendship.user_id, Friendship.friend_id, Friendship.since))
    ).all()
    edges = {(user_id, friend_id): since for user_id, friend_id, since in rows}
    assert len(edges) == 80
    for (user_id, friend_id), since in edges.items():
        assert user_id != friend_id
        assert edges[(friend_id, user_id)] == since


@pytest.mark.asyncio
async def test_friendship_pairs_clamped_to_possible_pairs(db_session):
    result = await seed_database(db_session, user_count=4, friendship_pairs=100)
    assert result.friendships == 2 * max_friendship_pairs(4)
    assert await _count(db_session, Friendship) == 12


@pytest.mark.asyncio
async def test_seed_with_no_users(db_session):
    result = await seed_database(db_session, user_count=0)
    assert (result.users, result.tasks, result.comments, result.friendships) == (0, 0, 0, 0)


@pytest.mark.asyncio
async def test_seed_without_tasks_has_no_comments(db_session):
    result = await seed_database(db_session, user_count=3, tasks_per_user_min=0, tasks_per_user_max=0)
    assert result.tasks == 0
    assert result.comments == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"user_count": -1},
        {"comment_count": -5},
        {"tasks_per_user_min": 3, "tasks_per_user_max": 2},
    ],
)
async def test_seed_rejects_invalid_parameters(db_session, kwargs):
    with pytest.raises(ValueError):
        await seed_database(db_session, **kwargs)
    assert await _count(db_session, User) == 0


def test_usernames_reproducible_for_same_seed():
    first, second = Faker(), Faker()
    first.seed_instance(7)
    second.seed_instance(7)
    assert _unique_usernames(first, 10) == _unique_usernames(second, 10)


def test_max_friendship_pairs():
    assert max_friendship_pairs(0) == 0
    assert max_friendship_pairs(1) == 0
    assert max_friendship_pairs(40) == 780
