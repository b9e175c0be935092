from __future__ import annotations

from enum import Enum


class AccountClass(str, Enum):
    """Loại tài khoản được phép đăng nhập."""

    ATTENDEE = "attendee"
    ADMINISTRATOR = "administrator"


class RegistrationField(str, Enum):
    """Các cột của bảng REGISTRATIONS (allow-list cho lọc/cập nhật)."""

    ID = "ID"
    ATTENDEE_ID = "AttendeeID"
    GUEST_NAME = "GuestName"
    BIN = "BIN"
    MEAL_ID = "MealID"
    DRINK = "Drink"
    SEAT = "Seat"


class AccountField(str, Enum):
    """Các cột của bảng tài khoản (attendee và administrator dùng chung)."""

    USERNAME = "Username"
    PASSWORD_HASH = "PasswordHash"
    SALT = "Salt"
