from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.base import DeleteResponse, ErrorResponse
from .schemas import UserCreate, UserRead, UserUpdate
from .service import (
    create_user,
    list_users,
    get_user,
    update_user,
    delete_user,
)

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Email already in use"}}
INVALID = {400: {"description": "Invalid request body"}}
FAILED = {500: {"model": ErrorResponse, "description": "Persistence failure"}}


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={**INVALID, **CONFLICT, **FAILED},
)
def users_create(
    payload: UserCreate,
    db: Session = Depends(get_db),
):
    return create_user(db, payload)


@router.get(
    "",
    response_model=List[UserRead],
    summary="List all users",
    responses={**FAILED},
)
def users_list(db: Session = Depends(get_db)):
    return list_users(db)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get a user by id",
    responses={**NOT_FOUND, **FAILED},
)
def users_get(
    user_id: str,
    db: Session = Depends(get_db),
):
    return get_user(db, user_id)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update a user",
    responses={**INVALID, **NOT_FOUND, **CONFLICT, **FAILED},
)
def users_update(
    user_id: str,
    payload: UserUpdate,
    db: Session = Depends(get_db),
):
    return update_user(db, user_id, payload)


@router.delete(
    "/{user_id}",
    response_model=DeleteResponse,
    summary="Delete a user and their favorites",
    responses={**NOT_FOUND, **FAILED},
)
def users_delete(
    user_id: str,
    db: Session = Depends(get_db),
):
    deleted_id = delete_user(db, user_id)
    return DeleteResponse(id=str(deleted_id))
