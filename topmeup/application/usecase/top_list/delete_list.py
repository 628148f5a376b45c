"""Delete list use case."""

from pydantic import BaseModel

from topmeup.application.usecase.base import BaseUseCase, ResponseModel
from topmeup.domain.service import CommentService, TopListService

from .ownership import load_owned_list


class DeleteListRequest(BaseModel):
    """Delete list request."""

    list_id: str
    user_id: str  # User ID from authenticated user


class DeleteListResponse(ResponseModel):
    """Delete list response."""

    success: bool = True
    message: str = "List deleted successfully"


class DeleteListUseCase(BaseUseCase):
    """Use case for hard-deleting one's own list along with its discussion."""

    def __init__(
        self, top_list_service: TopListService, comment_service: CommentService
    ) -> None:
        self.top_list_service = top_list_service
        self.comment_service = comment_service

    async def execute(self, request: DeleteListRequest) -> DeleteListResponse:
        """Execute delete list flow.

        Raises:
            ValidationError: If list ID is malformed
            NotFoundError: If list not found
            NotAuthorizedError: If user does not own the list
        """
        top_list = await load_owned_list(
            self.top_list_service, request.list_id, request.user_id
        )

        await self.comment_service.delete_for_list(top_list.id)
        await self.top_list_service.delete_list(top_list.id)
        return DeleteListResponse()
