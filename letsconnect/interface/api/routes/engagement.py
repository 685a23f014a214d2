"""Engagement routes shared by posts, gallery posts and events.

Each content kind mounts the same surface under its own prefix: likes,
shares, comments, replies, allow toggles and the paginated comment list.
Like and allow endpoints are flips; they take no target state.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import MessageResponse, ToggleResponse
from letsconnect.application.usecase.engagement import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    EditReplyRequest,
    EditReplyUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ShareRequest,
    ShareResponse,
    ShareUseCase,
    ToggleAllowRequest,
    ToggleAllowUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import AllowFlag, ContentKind, LikeTarget
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    resolve_page_size,
)


class CommentAPIRequest(BaseModel):
    """API request carrying comment text."""

    content: str = Field(min_length=1, max_length=255)


class ReplyAPIRequest(BaseModel):
    """API request carrying reply text."""

    reply: str = Field(min_length=1, max_length=255)


def build_engagement_router(kind: ContentKind, prefix: str) -> APIRouter:
    """Build the engagement router of one content kind.

    Args:
        kind: Content kind the routes operate on
        prefix: URL prefix, e.g. ``/posts``

    Returns:
        Router to include in the application
    """
    router = APIRouter(
        prefix=prefix, tags=[f"{kind.value} engagement"], route_class=DishkaRoute
    )

    @router.post("/{entity_id}/like", response_model=ToggleResponse)
    async def toggle_like(
        entity_id: str,
        use_case: FromDishka[ToggleLikeUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> ToggleResponse:
        """Like the entity, or remove the like if already present."""
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            ToggleLikeRequest(kind=kind, entity_id=entity_id, principal=principal)
        )

    @router.post("/{entity_id}/share", response_model=ShareResponse)
    async def share(
        entity_id: str,
        use_case: FromDishka[ShareUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> ShareResponse:
        """Count a share. Fails with 403 when sharing is turned off."""
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            ShareRequest(kind=kind, entity_id=entity_id, principal=principal)
        )

    @router.post("/{entity_id}/allow/{flag}", response_model=ToggleResponse)
    async def toggle_allow(
        entity_id: str,
        flag: AllowFlag,
        use_case: FromDishka[ToggleAllowUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> ToggleResponse:
        """Turn comments or sharing on or off."""
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            ToggleAllowRequest(
                kind=kind, entity_id=entity_id, principal=principal, flag=flag
            )
        )

    @router.get("/{entity_id}/comments", response_model=GetCommentsResponse)
    async def get_comments(
        entity_id: str,
        use_case: FromDishka[GetCommentsUseCase],
        jwt_service: FromDishka[JWTService],
        pagination: FromDishka[PaginationSettings],
        page: int = Query(default=1, ge=1),
        page_size: Optional[int] = Query(default=None, ge=1),
        token: str | None = Depends(read_token),
    ) -> GetCommentsResponse:
        """One page of comments in insertion order."""
        authenticate(jwt_service, token)
        return await use_case.execute(
            GetCommentsRequest(
                kind=kind,
                entity_id=entity_id,
                page=page,
                page_size=resolve_page_size(page_size, pagination, comments=True),
            )
        )

    @router.post("/{entity_id}/comments", response_model=MessageResponse)
    async def add_comment(
        entity_id: str,
        request: CommentAPIRequest,
        use_case: FromDishka[AddCommentUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            AddCommentRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                content=request.content,
            )
        )

    @router.put("/{entity_id}/comments/{comment_id}", response_model=MessageResponse)
    async def edit_comment(
        entity_id: str,
        comment_id: str,
        request: CommentAPIRequest,
        use_case: FromDishka[EditCommentUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        """Edit a comment. Only its author may edit it."""
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            EditCommentRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                comment_id=comment_id,
                content=request.content,
            )
        )

    @router.delete(
        "/{entity_id}/comments/{comment_id}", response_model=MessageResponse
    )
    async def delete_comment(
        entity_id: str,
        comment_id: str,
        use_case: FromDishka[DeleteCommentUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        """Delete a comment and its replies."""
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            DeleteCommentRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                comment_id=comment_id,
            )
        )

    @router.post(
        "/{entity_id}/comments/{comment_id}/like", response_model=ToggleResponse
    )
    async def toggle_comment_like(
        entity_id: str,
        comment_id: str,
        use_case: FromDishka[ToggleLikeUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> ToggleResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            ToggleLikeRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                target=LikeTarget.COMMENT,
                comment_id=comment_id,
            )
        )

    @router.post(
        "/{entity_id}/comments/{comment_id}/replies", response_model=MessageResponse
    )
    async def add_reply(
        entity_id: str,
        comment_id: str,
        request: ReplyAPIRequest,
        use_case: FromDishka[AddReplyUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            AddReplyRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                comment_id=comment_id,
                reply=request.reply,
            )
        )

    @router.put(
        "/{entity_id}/comments/{comment_id}/replies/{reply_id}",
        response_model=MessageResponse,
    )
    async def edit_reply(
        entity_id: str,
        comment_id: str,
        reply_id: str,
        request: ReplyAPIRequest,
        use_case: FromDishka[EditReplyUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            EditReplyRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                comment_id=comment_id,
                reply_id=reply_id,
                reply=request.reply,
            )
        )

    @router.delete(
        "/{entity_id}/comments/{comment_id}/replies/{reply_id}",
        response_model=MessageResponse,
    )
    async def delete_reply(
        entity_id: str,
        comment_id: str,
        reply_id: str,
        use_case: FromDishka[DeleteReplyUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> MessageResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            DeleteReplyRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                comment_id=comment_id,
                reply_id=reply_id,
            )
        )

    @router.post(
        "/{entity_id}/comments/{comment_id}/replies/{reply_id}/like",
        response_model=ToggleResponse,
    )
    async def toggle_reply_like(
        entity_id: str,
        comment_id: str,
        reply_id: str,
        use_case: FromDishka[ToggleLikeUseCase],
        jwt_service: FromDishka[JWTService],
        token: str | None = Depends(read_token),
    ) -> ToggleResponse:
        principal = authenticate(jwt_service, token)
        return await use_case.execute(
            ToggleLikeRequest(
                kind=kind,
                entity_id=entity_id,
                principal=principal,
                target=LikeTarget.REPLY,
                comment_id=comment_id,
                reply_id=reply_id,
            )
        )

    return router
