"""Account entities."""

from __future__ import annotations

from pydantic import Field

from gerlib.core.models.base import GerritModel


class AvatarInfo(GerritModel):
    url: str
    height: int | None = None
    width: int | None = None


class AccountInfo(GerritModel):
    """A user account as embedded in most other entities.

    Which optional fields are filled depends on the ``DETAILED_ACCOUNTS``
    option and on the caller's visibility of the account.
    """

    account_id: int | None = Field(default=None, alias="_account_id")
    name: str | None = None
    display_name: str | None = None
    email: str | None = None
    secondary_emails: list[str] | None = None
    username: str | None = None
    avatars: list[AvatarInfo] | None = None
    more_accounts: bool = Field(default=False, alias="_more_accounts")
    status: str | None = None
    inactive: bool = False
    tags: list[str] | None = None


class AccountInput(GerritModel):
    """New account data, also used for change author overrides."""

    username: str | None = None
    name: str | None = None
    display_name: str | None = None
    email: str | None = None
    ssh_key: str | None = None
    http_password: str | None = None
    groups: list[str] | None = None


class GpgKeyInfo(GerritModel):
    id: str | None = None
    fingerprint: str | None = None
    user_ids: list[str] | None = None
    key: str | None = None
    status: str | None = None
    problems: list[str] | None = None
