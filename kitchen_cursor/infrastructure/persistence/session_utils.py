# -*- coding: utf-8 -*-
"""
Commit helper for the repository adapters.

All adapters of one request share an AsyncSession. A failed flush leaves
that session unusable until it is rolled back, so every commit goes
through commit_or_rollback().
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kitchen_cursor.shared.exceptions.domain_exceptions import DuplicateEntityError
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import DatabaseError

logger = logging.getLogger(__name__)


async def commit_or_rollback(
        session: AsyncSession,
        action: str,
        duplicate_message: Optional[str] = None
) -> None:
    """
    Commit the session, rolling it back on any storage error.

    Args:
        session: Shared request session
        action: What was being written, for logs and the error message
        duplicate_message: If given, IntegrityError is reported as
            DuplicateEntityError with this message

    Raises:
        DuplicateEntityError: Unique key conflict (only with duplicate_message)
        DatabaseError: Any other storage failure
    """
    try:
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        if duplicate_message and isinstance(e, IntegrityError):
            raise DuplicateEntityError(duplicate_message) from e
        logger.error(f"[Persistence] {action} failed: {e}")
        raise DatabaseError(f"{action} failed") from e
