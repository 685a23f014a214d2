"""Post routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from letsconnect.application.usecase.base import CreatedResponse, MessageResponse
from letsconnect.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListFeedRequest,
    ListFeedUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostFeed,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import ContentKind, MediaType, PostCategory
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    read_upload,
    resolve_page_size,
)
from letsconnect.interface.api.routes.engagement import build_engagement_router

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)
engagement_router = build_engagement_router(ContentKind.POST, "/posts")


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    media_type: MediaType = Form(...),
    content: str = Form(default=""),
    category: PostCategory = Form(default=PostCategory.USERS_POST),
    allow_comments: bool = Form(default=True),
    allow_shares: bool = Form(default=True),
    file: Optional[UploadFile] = File(default=None),
    token: str | None = Depends(read_token),
) -> CreatedResponse:
    """Create a new post.

    Requires authentication. Users may only post to ``usersPost``; the
    editorial categories are for staff.

    Args:
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        media_type: Kind of media attached
        content: Post text
        category: Feed category
        allow_comments: Whether comments start enabled
        allow_shares: Whether sharing starts enabled
        file: Optional media file
        token: JWT from the access-token header or cookie

    Returns:
        Confirmation with the new post id
    """
    principal = authenticate(jwt_service, token)
    return await create_post_use_case.execute(
        CreatePostRequest(
            principal=principal,
            media_type=media_type,
            content=content,
            category=category,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
            upload=await read_upload(file),
        )
    )


@router.get("/mine", response_model=ListPostsResponse)
async def list_my_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListPostsResponse:
    """Posts written by the caller, newest first."""
    principal = authenticate(jwt_service, token)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            owner_id=str(principal.user_id),
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/category/{category}", response_model=ListPostsResponse)
async def list_posts_by_category(
    category: PostCategory,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListPostsResponse:
    """Posts of one category, newest first."""
    authenticate(jwt_service, token)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            category=category,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/user/{user_id}", response_model=ListPostsResponse)
async def list_user_posts(
    user_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListPostsResponse:
    """Posts written by one user, newest first."""
    authenticate(jwt_service, token)
    return await list_posts_use_case.execute(
        ListPostsRequest(
            owner_id=user_id,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/feed/{feed}", response_model=ListPostsResponse)
async def list_feed(
    feed: PostFeed,
    list_feed_use_case: FromDishka[ListFeedUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListPostsResponse:
    """User posts ranked for a feed.

    ``popular`` puts posts from the last five days first, each group ranked
    by likes plus comments plus shares. ``following`` lists posts by the
    users the caller follows, newest first.
    """
    principal = authenticate(jwt_service, token)
    return await list_feed_use_case.execute(
        ListFeedRequest(
            feed=feed,
            principal=principal,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetPostResponse:
    authenticate(jwt_service, token)
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.put("/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: str,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    content: Optional[str] = Form(default=None),
    category: Optional[PostCategory] = Form(default=None),
    media_type: Optional[MediaType] = Form(default=None),
    allow_comments: Optional[bool] = Form(default=None),
    allow_shares: Optional[bool] = Form(default=None),
    file: Optional[UploadFile] = File(default=None),
    token: str | None = Depends(read_token),
) -> MessageResponse:
    """Update a post. Omitted fields are left unchanged.

    Users edit their own posts; editorial posts are edited by staff.
    """
    principal = authenticate(jwt_service, token)
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            principal=principal,
            content=content,
            category=category,
            media_type=media_type,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
            upload=await read_upload(file),
        )
    )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    """Delete a post. User posts are archived before deletion."""
    principal = authenticate(jwt_service, token)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, principal=principal)
    )
