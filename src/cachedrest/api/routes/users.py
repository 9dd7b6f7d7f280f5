"""User endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from cachedrest.api.dependencies import get_registration
from cachedrest.api.schemas import UserCreate
from cachedrest.core.services.user_registration import UserRegistration

router = APIRouter(tags=["users"])


@router.post("/users")
async def create_user(
    user: UserCreate,
    registration: UserRegistration = Depends(get_registration),
) -> dict[str, Any]:
    """Register a user and echo the request body.

    A taken email raises ``DuplicateResourceError``, which the global
    handler turns into ``400 {"error": "User already exists"}``.
    """
    registration.register(user.email)
    return user.model_dump()
