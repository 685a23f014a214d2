"""Gallery routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from letsconnect.application.usecase.base import CreatedResponse, MessageResponse
from letsconnect.application.usecase.gallery import (
    CreateGalleryPostRequest,
    CreateGalleryPostUseCase,
    DeleteGalleryPostRequest,
    DeleteGalleryPostUseCase,
    GetGalleryPostRequest,
    GetGalleryPostResponse,
    GetGalleryPostUseCase,
    ListGalleryPostsRequest,
    ListGalleryPostsResponse,
    ListGalleryPostsUseCase,
    UpdateGalleryPostRequest,
    UpdateGalleryPostUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import ContentKind, GalleryCategory, NewsType
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    read_upload,
    resolve_page_size,
)
from letsconnect.interface.api.routes.engagement import build_engagement_router

router = APIRouter(prefix="/gallery", tags=["gallery"], route_class=DishkaRoute)
engagement_router = build_engagement_router(ContentKind.GALLERY, "/gallery")


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_gallery_post(
    create_gallery_post_use_case: FromDishka[CreateGalleryPostUseCase],
    jwt_service: FromDishka[JWTService],
    title: str = Form(...),
    category: GalleryCategory = Form(...),
    news_type: NewsType = Form(...),
    youtube_url: Optional[str] = Form(default=None),
    allow_comments: bool = Form(default=True),
    allow_shares: bool = Form(default=True),
    file: Optional[UploadFile] = File(default=None),
    token: str | None = Depends(read_token),
) -> CreatedResponse:
    """Publish to the gallery. Staff only.

    Images and reels need a file; videos need ``youtube_url``.
    """
    principal = authenticate(jwt_service, token)
    return await create_gallery_post_use_case.execute(
        CreateGalleryPostRequest(
            principal=principal,
            title=title,
            category=category,
            news_type=news_type,
            youtube_url=youtube_url,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
            upload=await read_upload(file),
        )
    )


@router.get("", response_model=ListGalleryPostsResponse)
async def list_gallery_posts(
    list_gallery_posts_use_case: FromDishka[ListGalleryPostsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    category: Optional[GalleryCategory] = Query(default=None),
    news_type: Optional[NewsType] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListGalleryPostsResponse:
    """Gallery posts filtered by category and news type, newest first."""
    authenticate(jwt_service, token)
    return await list_gallery_posts_use_case.execute(
        ListGalleryPostsRequest(
            category=category,
            news_type=news_type,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/{gallery_post_id}", response_model=GetGalleryPostResponse)
async def get_gallery_post(
    gallery_post_id: str,
    get_gallery_post_use_case: FromDishka[GetGalleryPostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetGalleryPostResponse:
    authenticate(jwt_service, token)
    return await get_gallery_post_use_case.execute(
        GetGalleryPostRequest(gallery_post_id=gallery_post_id)
    )


@router.put("/{gallery_post_id}", response_model=MessageResponse)
async def update_gallery_post(
    gallery_post_id: str,
    update_gallery_post_use_case: FromDishka[UpdateGalleryPostUseCase],
    jwt_service: FromDishka[JWTService],
    title: Optional[str] = Form(default=None),
    category: Optional[GalleryCategory] = Form(default=None),
    news_type: Optional[NewsType] = Form(default=None),
    youtube_url: Optional[str] = Form(default=None),
    allow_comments: Optional[bool] = Form(default=None),
    allow_shares: Optional[bool] = Form(default=None),
    file: Optional[UploadFile] = File(default=None),
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await update_gallery_post_use_case.execute(
        UpdateGalleryPostRequest(
            gallery_post_id=gallery_post_id,
            principal=principal,
            title=title,
            category=category,
            news_type=news_type,
            youtube_url=youtube_url,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
            upload=await read_upload(file),
        )
    )


@router.delete("/{gallery_post_id}", response_model=MessageResponse)
async def delete_gallery_post(
    gallery_post_id: str,
    delete_gallery_post_use_case: FromDishka[DeleteGalleryPostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await delete_gallery_post_use_case.execute(
        DeleteGalleryPostRequest(
            gallery_post_id=gallery_post_id, principal=principal
        )
    )
