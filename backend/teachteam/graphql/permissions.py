"""GraphQL Permissions — admin session guard shared by admin queries, mutations
and the candidateUnavailable subscription.

Invariants:
    - For subscriptions the context session is closed right after the check, so a
      long-lived websocket does not hold a pooled connection
"""

import logging
from typing import Any

from graphql import OperationType
from strawberry.permission import BasePermission
from strawberry.types import Info

from teachteam.api.dependencies import load_session_user
from teachteam.core.domain_types import UserRole

logger = logging.getLogger(__name__)


class IsAdmin(BasePermission):
    message = "Admin access required. Please log in as an administrator."

    async def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        try:
            user = await load_session_user(info.context.request, info.context.db)
        finally:
            if info.operation.operation == OperationType.SUBSCRIPTION:
                await info.context.db.close()
        if user is None or user.role != UserRole.ADMIN.value:
            logger.warning("GraphQL admin operation denied")
            return False
        return True
