from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.base import DeleteResponse, ErrorResponse
from .schemas import FavoriteCreate, FavoriteRead, FavoriteUpdate
from .service import (
    create_favorite,
    list_favorites,
    get_favorite,
    update_favorite,
    delete_favorite,
)

router = APIRouter(prefix="/users/{user_id}/favorites", tags=["favorites"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Favorite, user or media not found"}}
INVALID = {400: {"description": "Invalid request body"}}
FAILED = {500: {"model": ErrorResponse, "description": "Persistence failure"}}


@router.post(
    "",
    response_model=FavoriteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Favorite a media item for a user",
    responses={**INVALID, **NOT_FOUND, **FAILED},
)
def favorites_create(
    payload: FavoriteCreate,
    user_id: str = Path(..., description="Id of the user owning the favorites"),
    db: Session = Depends(get_db),
):
    return create_favorite(db, user_id, payload)


@router.get(
    "",
    response_model=List[FavoriteRead],
    summary="List a user's favorites with user and media detail",
    responses={**NOT_FOUND, **FAILED},
)
def favorites_list(
    user_id: str = Path(..., description="Id of the user owning the favorites"),
    db: Session = Depends(get_db),
):
    return list_favorites(db, user_id)


@router.get(
    "/{favorite_id}",
    response_model=FavoriteRead,
    summary="Get one of a user's favorites",
    responses={**NOT_FOUND, **FAILED},
)
def favorites_get(
    user_id: str = Path(..., description="Id of the user owning the favorites"),
    favorite_id: str = Path(..., description="Id of the favorite"),
    db: Session = Depends(get_db),
):
    return get_favorite(db, favorite_id, user_id)


@router.patch(
    "/{favorite_id}",
    response_model=FavoriteRead,
    summary="Update a favorite",
    responses={**INVALID, **NOT_FOUND, **FAILED},
)
def favorites_update(
    payload: FavoriteUpdate,
    user_id: str = Path(..., description="Id of the user owning the favorites"),
    favorite_id: str = Path(..., description="Id of the favorite"),
    db: Session = Depends(get_db),
):
    return update_favorite(db, favorite_id, user_id, payload)


@router.delete(
    "/{favorite_id}",
    response_model=DeleteResponse,
    summary="Remove a favorite",
    responses={**NOT_FOUND, **FAILED},
)
def favorites_delete(
    user_id: str = Path(..., description="Id of the user owning the favorites"),
    favorite_id: str = Path(..., description="Id of the favorite"),
    db: Session = Depends(get_db),
):
    deleted_id = delete_favorite(db, favorite_id, user_id)
    return DeleteResponse(id=str(deleted_id))
