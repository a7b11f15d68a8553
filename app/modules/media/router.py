from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.base import DeleteResponse, ErrorResponse
from .schemas import MediaCreate, MediaRead, MediaUpdate
from .service import (
    create_media,
    list_media,
    get_media,
    update_media,
    delete_media,
)

router = APIRouter(prefix="/media", tags=["media"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Media not found"}}
INVALID = {400: {"description": "Invalid request body"}}
FAILED = {500: {"model": ErrorResponse, "description": "Persistence failure"}}


@router.post(
    "",
    response_model=MediaRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a movie or series",
    responses={**INVALID, **FAILED},
)
def media_create(
    payload: MediaCreate,
    db: Session = Depends(get_db),
):
    return create_media(db, payload)


@router.get(
    "",
    response_model=List[MediaRead],
    summary="List all media",
    responses={**FAILED},
)
def media_list(db: Session = Depends(get_db)):
    return list_media(db)


@router.get(
    "/{media_id}",
    response_model=MediaRead,
    summary="Get a media item by id",
    responses={**NOT_FOUND, **FAILED},
)
def media_get(
    media_id: str,
    db: Session = Depends(get_db),
):
    return get_media(db, media_id)


@router.patch(
    "/{media_id}",
    response_model=MediaRead,
    summary="Update a media item",
    responses={**INVALID, **NOT_FOUND, **FAILED},
)
def media_update(
    media_id: str,
    payload: MediaUpdate,
    db: Session = Depends(get_db),
):
    return update_media(db, media_id, payload)


@router.delete(
    "/{media_id}",
    response_model=DeleteResponse,
    summary="Delete a media item and its favorites",
    responses={**NOT_FOUND, **FAILED},
)
def media_delete(
    media_id: str,
    db: Session = Depends(get_db),
):
    deleted_id = delete_media(db, media_id)
    return DeleteResponse(id=str(deleted_id))
