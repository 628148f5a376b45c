"""Comment routes for a single comment: edit, delete, like."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from topmeup.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from topmeup.domain.error import (
    BusinessRuleViolationError,
    ContentDeletedException,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from topmeup.domain.service import JWTService
from topmeup.interface.api.dependencies import (
    auth_token as request_auth_token,
    require_user,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> UpdateCommentResponse:
    """Edit a comment's content. Only the author can edit."""
    user_id = require_user(jwt_service, auth_token, "edit comments")

    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            content=request.content,
            user_id=str(user_id),
        )
        return await update_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except (NotFoundError, ContentDeletedException) as e:
        logfire.warn("Attempt to edit missing or deleted comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or has been deleted",
        )
    except ValueError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update comment",
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Only the author can delete; replies are kept."""
    user_id = require_user(jwt_service, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except (NotFoundError, ContentDeletedException):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found or has been deleted",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )


@router.post("/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> LikeCommentResponse:
    """Like a comment. Liking an already liked comment is a no-op."""
    user_id = require_user(jwt_service, auth_token, "like comments")

    try:
        return await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except (ValidationError, BusinessRuleViolationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error liking comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to like comment",
        )


@router.delete("/{comment_id}/like", response_model=LikeCommentResponse)
async def unlike_comment(
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(request_auth_token),
) -> LikeCommentResponse:
    """Withdraw a like. Unliking a comment one has not liked is a no-op."""
    user_id = require_user(jwt_service, auth_token, "unlike comments")

    try:
        return await unlike_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error unliking comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to unlike comment",
        )
