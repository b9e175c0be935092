from __future__ import annotations

from typing import Protocol

from .model import Account


class AccountRepository(Protocol):
    """Giao diện repository cho tài khoản (một instance cho mỗi AccountClass).

    Không cache: mỗi lần gọi đều đọc lại hash/salt từ CSDL.
    """

    def get_account(self, username: int) -> Account:
        """Raise NotFoundError if absent, StorageError on database failure."""
        raise NotImplementedError
