from __future__ import annotations

from typing import List

from masthead_client.core.client import MastheadClient, MastheadNotFoundError
from masthead_client.models import User
from masthead_client.resources._rest import RestResource, require_identifier

USERS = RestResource(
    User,
    name="users",
    base_path="/clientApi/user",
    list_path="/clientApi/user/list",
    identifier="email",
    paginated=False,
)

ROLE_PATH = "/clientApi/user/role"


def list_users(client: MastheadClient) -> List[User]:
    return USERS.list(client)


def create_user(client: MastheadClient, user: User) -> User:
    return USERS.create(client, user)


def get_user(client: MastheadClient, email: str) -> User:
    """
    Look up a user by email.

    The client API has no single-user endpoint, so this scans list_users().
    Raises MastheadNotFoundError when no user has that email.
    """
    email = require_identifier(email, "users email")
    for user in list_users(client):
        if user.email == email:
            return user
    raise MastheadNotFoundError(f"User not found: {email}")


def update_user_role(client: MastheadClient, user: User) -> User:
    """Change the role of an existing user; the email selects the user."""
    return USERS.update(client, user, path=ROLE_PATH)


def delete_user(client: MastheadClient, email: str) -> None:
    USERS.delete(client, email)


__all__ = [
    "USERS",
    "list_users",
    "create_user",
    "get_user",
    "update_user_role",
    "delete_user",
]
