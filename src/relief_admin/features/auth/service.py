"""Business logic for authentication, such as user creation and retrieval."""
from typing import Optional
from . import models


async def get_user_by_username(username: str) -> Optional[models.User]:
    """Retrieves a user by their username.

    Args:
        username: The username of the user to retrieve.

    Returns:
        The User object if found, otherwise None.
    """
    return await models.User.get_or_none(username=username)


async def get_user_by_email(email: str) -> Optional[models.User]:
    """Retrieves a user by their email address."""
    return await models.User.get_or_none(email=email)


async def create_user(username: str, email: str, hashed_password: str, role: str = "staff") -> models.User:
    """Creates a new user in the database.

    Args:
        username: Unique login name.
        email: Unique email address.
        hashed_password: The bcrypt hash of the user's password.
        role: Either "admin" or "staff".

    Returns:
        The newly created User object.
    """
    return await models.User.create(
        username=username,
        email=email,
        hashed_password=hashed_password,
        role=role,
    )


async def set_user_active(username: str, is_active: bool) -> Optional[models.User]:
    """Flips the active flag of a user, returning None when the user is unknown."""
    user = await models.User.get_or_none(username=username)
    if user is None:
        return None
    user.is_active = is_active
    await user.save(update_fields=["is_active", "updated_at"])
    return user
