from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Thực thể miền (domain): tài khoản đăng nhập (attendee hoặc administrator).

    `password_hash` = hash(password + salt); không bao giờ lưu mật khẩu gốc.
    """

    username: int
    password_hash: str
    salt: str
