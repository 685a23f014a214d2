"""Engagement use cases shared by posts, gallery posts and events."""

from .allow import ToggleAllowRequest, ToggleAllowUseCase
from .comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
)
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .like import ToggleLikeRequest, ToggleLikeUseCase
from .reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    EditReplyRequest,
    EditReplyUseCase,
)
from .share import ShareRequest, ShareResponse, ShareUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "AddReplyRequest",
    "AddReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "EditReplyRequest",
    "EditReplyUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ShareRequest",
    "ShareResponse",
    "ShareUseCase",
    "ToggleAllowRequest",
    "ToggleAllowUseCase",
    "ToggleLikeRequest",
    "ToggleLikeUseCase",
]
