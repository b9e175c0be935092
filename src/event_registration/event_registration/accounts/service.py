from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional, Union

from ..core.enums import AccountClass
from ..core.exceptions import AuthServiceError, NotFoundError, StorageError, ValidationError
from .passwords import verify_password
from .repository import AccountRepository

logger = logging.getLogger(__name__)

_LOGIN_FAILED = "Cannot get service: account lookup failed"
_NUMERIC_USERNAME = re.compile(r"[0-9]+")


def _parse_username(username: Any) -> Optional[int]:
    # Only an int or a plain string of ASCII digits names an account.
    if isinstance(username, bool):
        return None
    if isinstance(username, int):
        return username
    if isinstance(username, str) and _NUMERIC_USERNAME.fullmatch(username):
        return int(username)
    return None


class AuthService:
    """Use case: authenticate an attendee or an administrator (login).

    A missing account and a storage failure are deliberately reported as the
    same AuthServiceError so the caller cannot enumerate usernames. The real
    cause is only written to the server log.

    Lockout / rate limiting belongs to a policy layer wrapping this service.
    """

    def __init__(self, accounts: Mapping[AccountClass, AccountRepository]):
        self._accounts = dict(accounts)

    def _repo_for(self, account_class: Union[AccountClass, str]) -> AccountRepository:
        try:
            account_class = AccountClass(account_class)
        except ValueError:
            raise ValidationError(f"Unknown account class: {account_class!r}")

        repo = self._accounts.get(account_class)
        if repo is None:
            raise ValidationError(f"No account store configured for {account_class.value}")
        return repo

    def login(self, account_class: Union[AccountClass, str], username: int, password: str) -> bool:
        repo = self._repo_for(account_class)

        parsed = _parse_username(username)
        if parsed is None:
            logger.warning("Login rejected: non-numeric username for %s", AccountClass(account_class).value)
            raise AuthServiceError(_LOGIN_FAILED)
        username = parsed

        try:
            account = repo.get_account(username)
        except (NotFoundError, StorageError) as e:
            logger.warning("Login lookup failed for %s %s: %s", AccountClass(account_class).value, username, e)
            raise AuthServiceError(_LOGIN_FAILED) from e

        return verify_password(password, account.password_hash, account.salt)

    def attendee_login(self, username: int, password: str) -> bool:
        return self.login(AccountClass.ATTENDEE, username, password)

    def admin_login(self, username: int, password: str) -> bool:
        return self.login(AccountClass.ADMINISTRATOR, username, password)
