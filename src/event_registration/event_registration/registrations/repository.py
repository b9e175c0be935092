from __future__ import annotations

from typing import Any, Protocol, Sequence, Union

from ..core.enums import RegistrationField
from .model import Registration


class RegistrationRepository(Protocol):
    """Giao diện repository cho Registration.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    Không có bản ghi -> NotFoundError; lỗi CSDL -> StorageError.
    """

    def create(self, registration: Registration) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Registration]:
        raise NotImplementedError

    def get_by_id(self, registration_id: int) -> Registration:
        raise NotImplementedError

    def list_by_field(self, field_name: Union[RegistrationField, str], value: Any) -> Sequence[Registration]:
        raise NotImplementedError

    def update_field(self, registration_id: int, field_name: Union[RegistrationField, str], new_value: Any) -> None:
        raise NotImplementedError

    def delete(self, registration_id: int) -> None:
        raise NotImplementedError
