"""Search users use case."""

from typing import Any

from pydantic import BaseModel

from homie.domain.service import UserSearchService


class SearchUsersRequest(BaseModel):
    """Search users request."""

    q: str | None = None


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[dict[str, Any]]


class SearchUsersUseCase:
    """Use case for user search with featured accounts ranked first."""

    def __init__(self, search_service: UserSearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        users = await self.search_service.search(request.q)
        return SearchUsersResponse(users=users)
