from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Registration:
    """Thực thể miền (domain): Registration.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    Trường `bin` là số nhóm huy hiệu / khu ghế.
    """

    id: int
    attendee_id: str
    guest_name: str
    bin: int
    meal_id: str
    drink: str
    seat: str
