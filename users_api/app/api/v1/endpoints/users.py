"""
User endpoints for API v1.

CRUD over the configured user store.  Bodies are accepted as raw JSON
and validated by ``services.validation`` so that every violated
constraint is reported at once.  Missing ids are answered with 404 by
the global error handlers.
"""

from typing import Any, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from users_api.app.core.exceptions import UserValidationError
from users_api.app.schemas.user import UserRead
from users_api.app.services.user_service import UserService
from users_api.app.services.validation import validate_user, validate_user_update


router = APIRouter()

EMPTY_DATABASE_MESSAGE = "Database is empty."
EMPTY_LOGIN_MESSAGE = "Login can not be empty"


def get_user_service(request: Request) -> UserService:
    """Build a service around the store attached to the application."""
    return UserService(request.app.state.user_store)


@router.get("/byName")
@router.get("/byName/")
async def list_users_without_login() -> dict:
    """Substring search needs a login fragment in the path."""
    return {"message": EMPTY_LOGIN_MESSAGE}


@router.get("/byName/{login}")
async def list_users_by_login(
    login: str,
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many users"),
    service: UserService = Depends(get_user_service),
) -> dict:
    """Return users whose login contains ``login``, sorted by login.

    An empty match is still a successful response.
    """
    if not login:
        return {"message": EMPTY_LOGIN_MESSAGE}
    users = await service.list_users_by_login(login, limit)
    return {"sorted": [user.model_dump() for user in users]}


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    """Retrieve a single user by ID."""
    return await service.get_user(user_id)


@router.get("", response_model=None)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> Union[List[UserRead], JSONResponse]:
    """Получить список всех пользователей, кроме удалённых."""
    users = await service.list_users()
    if not users:
        return JSONResponse({"message": EMPTY_DATABASE_MESSAGE})
    return users


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Зарегистрировать нового пользователя.

    Returns the created user including the generated ``id``.  Invalid
    payloads get a 400 with the full list of field errors; a login
    that is already taken gets a 409.
    """
    result = validate_user(payload)
    if not result.ok:
        raise UserValidationError(result.errors)
    return await service.create_user(result.value)


@router.patch("/{user_id}")
async def update_user(
    user_id: str,
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service),
) -> dict:
    """Update some fields of a user.

    The body may contain any subset of ``login``, ``age`` and
    ``password``; present fields are held to the creation constraints.
    """
    result = validate_user_update(payload)
    if not result.ok:
        raise UserValidationError(result.errors)
    user = await service.update_user(user_id, result.value)
    return {"message": f"User {user.login} has been updated"}


@router.delete("/{user_id}")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> dict:
    """Soft-delete a user.  Deleting twice answers 404 the second time."""
    user = await service.delete_user(user_id)
    return {"message": f"User {user.login} has been removed"}
