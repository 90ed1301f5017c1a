"""
Tests for user administration.
"""

import pytest

from tasktracker.domain.errors import InvalidArgumentError, NotFoundError
from tasktracker.domain.models import Task
from tasktracker.services.user_service import UserService


@pytest.fixture
def service(user_repo):
    return UserService(user_repo, default_page_size=2)


@pytest.mark.asyncio
async def test_add_then_clear_document_number(service):
    user = await service.add_user("AB1234567")
    assert user.id is not None
    assert user.document_number == "AB1234567"

    updated = await service.update_user(user.id, "")
    assert updated.id == user.id
    assert updated.document_number == ""


@pytest.mark.asyncio
async def test_add_requires_document_number(service):
    with pytest.raises(InvalidArgumentError):
        await service.add_user("")


@pytest.mark.asyncio
@pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
async def test_list_rejects_non_positive_pagination(service, page, page_size):
    with pytest.raises(InvalidArgumentError):
        await service.list_users(page=page, page_size=page_size)


@pytest.mark.asyncio
async def test_list_pages_through_users(service):
    for i in range(5):
        await service.add_user(f"DOC{i}")

    page_two = await service.list_users(page=2, page_size=2)
    assert [u.document_number for u in page_two] == ["DOC2", "DOC3"]

    # default page size comes from the service
    assert len(await service.list_users()) == 2
    assert [u.document_number for u in await service.list_users(page=3)] == ["DOC4"]


@pytest.mark.asyncio
async def test_list_filters_by_document_number(service):
    await service.add_user("AAA")
    bbb = await service.add_user("BBB")

    assert [u.id for u in await service.list_users(document_number="BBB")] == [bbb.id]
    # empty filter means no filter
    assert len(await service.list_users(document_number="", page_size=10)) == 2


@pytest.mark.asyncio
async def test_update_missing_user(service):
    with pytest.raises(NotFoundError):
        await service.update_user(123, "X")


@pytest.mark.asyncio
async def test_delete_missing_user(service):
    with pytest.raises(NotFoundError):
        await service.delete_user(123)


@pytest.mark.asyncio
async def test_delete_keeps_tasks(service, task_repo, clock):
    user = await service.add_user("AB1")
    await task_repo.create(Task(user_id=user.id, name="writing", start=clock()))

    await service.delete_user(user.id)

    assert await service.user_repo.get_by_id(user.id) is None
    orphans = await task_repo.list_by_user(user.id)
    assert [t.name for t in orphans] == ["writing"]


@pytest.mark.asyncio
async def test_list_rejects_offset_beyond_database_range(service):
    with pytest.raises(InvalidArgumentError):
        await service.list_users(page=2**62, page_size=2**62)
    with pytest.raises(InvalidArgumentError):
        await service.list_users(page=1, page_size=2**64)


@pytest.mark.asyncio
async def test_update_with_none_stores_empty_string(service):
    user = await service.add_user("AB1234567")

    updated = await service.update_user(user.id, None)

    assert updated.document_number == ""
