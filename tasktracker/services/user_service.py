"""
User Service - administration of tracked users.
"""

import logging
from typing import List, Optional

from tasktracker.domain.errors import InvalidArgumentError, NotFoundError
from tasktracker.domain.models import User
from tasktracker.infra.repository import UserRepository

logger = logging.getLogger(__name__)

# Offsets are bound as signed 64-bit integers
MAX_OFFSET = 2**63 - 1


class UserService:
    """Add, update, delete and page through users."""

    def __init__(self, user_repo: UserRepository, default_page_size: int = 10):
        self.user_repo = user_repo
        self.default_page_size = default_page_size

    async def list_users(self, document_number: Optional[str] = None,
                         page: int = 1, page_size: Optional[int] = None) -> List[User]:
        """
        Get one page of users, optionally filtered by document number.

        Args:
            document_number: Exact match filter; empty or None means no filter
            page: 1-based page number
            page_size: Users per page, defaults to default_page_size

        Raises:
            InvalidArgumentError: page or page_size is not a positive integer,
                or the page starts beyond what the database can address
        """
        if page_size is None:
            page_size = self.default_page_size
        if page < 1:
            raise InvalidArgumentError("Invalid page number")
        if page_size < 1 or page_size > MAX_OFFSET:
            raise InvalidArgumentError("Invalid page size")

        filters = {"document_number": document_number} if document_number else {}
        offset = (page - 1) * page_size
        if offset > MAX_OFFSET:
            raise InvalidArgumentError("Invalid page number")
        return await self.user_repo.list(filters, offset=offset, limit=page_size)

    async def add_user(self, document_number: str) -> User:
        if not document_number:
            raise InvalidArgumentError("Document number is required")
        user = await self.user_repo.create(User(document_number=document_number))
        logger.info(f"User {user.id} added")
        return user

    async def update_user(self, user_id: int, document_number: Optional[str]) -> User:
        """Replace the document number of a user; None or an empty value stores ""."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        user.document_number = document_number or ""
        updated = await self.user_repo.update(user)
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError("User not found")
        return updated

    async def delete_user(self, user_id: int) -> None:
        """Delete a user. Their tasks are left in place."""
        if not await self.user_repo.delete(user_id):
            raise NotFoundError("User not found")
        logger.info(f"User {user_id} deleted")
