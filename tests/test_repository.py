"""
Tests for the SQLAlchemy repositories.
"""

import datetime
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from tasktracker.domain.errors import StoreError
from tasktracker.domain.models import Task, User
from tasktracker.infra.repository import TaskRepository, UserRepository


def test_repository_needs_engine_or_session():
    with pytest.raises(ValueError):
        UserRepository()


@pytest.mark.asyncio
async def test_create_assigns_ids(user_repo):
    first = await user_repo.create(User(document_number="AB1234567"))
    second = await user_repo.create(User(document_number="CD7654321"))

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id
    assert (await user_repo.get_by_id(first.id)).document_number == "AB1234567"


@pytest.mark.asyncio
async def test_get_missing_user_returns_none(user_repo):
    assert await user_repo.get_by_id(999) is None


@pytest.mark.asyncio
async def test_list_paginates_in_insertion_order(user_repo):
    for i in range(5):
        await user_repo.create(User(document_number=f"DOC{i}"))

    page = await user_repo.list(offset=2, limit=2)

    assert [u.document_number for u in page] == ["DOC2", "DOC3"]
    assert [u.document_number for u in await user_repo.list(offset=4, limit=10)] == ["DOC4"]
    assert await user_repo.list(offset=10, limit=10) == []


@pytest.mark.asyncio
async def test_list_filters_by_document_number(user_repo):
    await user_repo.create(User(document_number="AAA"))
    target = await user_repo.create(User(document_number="BBB"))
    await user_repo.create(User(document_number="AAA"))

    result = await user_repo.list({"document_number": "BBB"})

    assert [u.id for u in result] == [target.id]


@pytest.mark.asyncio
async def test_list_rejects_unknown_filter(user_repo):
    with pytest.raises(ValueError):
        await user_repo.list({"email": "x"})


@pytest.mark.asyncio
async def test_update_and_delete_report_missing_rows(user_repo):
    assert await user_repo.update(User(id=42, document_number="X")) is None
    assert await user_repo.delete(42) is False

    user = await user_repo.create(User(document_number="X"))
    user.document_number = "Y"
    assert (await user_repo.update(user)).document_number == "Y"
    assert await user_repo.delete(user.id) is True
    assert await user_repo.get_by_id(user.id) is None


@pytest.mark.asyncio
async def test_task_end_is_nullable(task_repo):
    start = datetime.datetime(2026, 3, 2, 9, 0)
    task = await task_repo.create(Task(user_id=1, name="writing", start=start))

    loaded = await task_repo.get_by_id(task.id)
    assert loaded.end is None
    assert loaded.is_running

    loaded.end = start + datetime.timedelta(hours=2)
    stopped = await task_repo.update(loaded)
    assert stopped.end == datetime.datetime(2026, 3, 2, 11, 0)
    assert not stopped.is_running


@pytest.mark.asyncio
async def test_list_by_user_returns_only_that_users_tasks(task_repo):
    start = datetime.datetime(2026, 3, 2, 9, 0)
    a = await task_repo.create(Task(user_id=1, name="a", start=start))
    await task_repo.create(Task(user_id=2, name="b", start=start))
    c = await task_repo.create(Task(user_id=1, name="c", start=start))

    assert [t.id for t in await task_repo.list_by_user(1)] == [a.id, c.id]
    assert await task_repo.list_by_user(3) == []


@pytest.mark.asyncio
async def test_database_errors_become_store_errors():
    # No tables created, every statement fails
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            repo = TaskRepository(session=session)
            with pytest.raises(StoreError) as excinfo:
                await repo.list_by_user(1)
            assert excinfo.value.cause is not None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_task_list_paginates_and_filters_by_name(task_repo):
    start = datetime.datetime(2026, 3, 2, 9, 0)
    for i in range(4):
        await task_repo.create(Task(user_id=1, name=f"task-{i}", start=start))
    await task_repo.create(Task(user_id=2, name="task-1", start=start))

    page = await task_repo.list(offset=1, limit=2)
    assert [t.name for t in page] == ["task-1", "task-2"]

    named = await task_repo.list({"name": "task-1"})
    assert [t.user_id for t in named] == [1, 2]

    assert [t.user_id for t in await task_repo.list({"name": "task-1", "user_id": 2})] == [2]

    with pytest.raises(ValueError):
        await task_repo.list({"end": None})


@pytest.mark.asyncio
async def test_task_delete(task_repo):
    start = datetime.datetime(2026, 3, 2, 9, 0)
    task = await task_repo.create(Task(user_id=1, name="writing", start=start))

    assert await task_repo.delete(task.id) is True
    assert await task_repo.get_by_id(task.id) is None
    assert await task_repo.delete(task.id) is False
