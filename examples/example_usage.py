"""Ví dụ: dùng repository + service layer trực tiếp (không có UI/HTTP).

Runs against the database configured by APP_ENV / DB_* (see config/).
"""

from src.event_registration.event_registration.core.enums import RegistrationField
from src.event_registration.event_registration.core.exceptions import AuthServiceError, NotFoundError
from src.event_registration.event_registration.main import create_container
from src.event_registration.event_registration.registrations.model import Registration


def main():
    container = create_container()
    repo = container.registrations_repo

    repo.create(Registration(id=99, attendee_id="A1", guest_name="Jane Doe", bin=3, meal_id="VEG", drink="Water", seat="12B"))
    print(repo.get_by_id(99))

    repo.update_field(99, RegistrationField.SEAT, "14C")
    print(repo.list_by_field("AttendeeID", "A1"))

    repo.delete(99)
    try:
        repo.get_by_id(99)
    except NotFoundError as e:
        print(e)

    try:
        print("admin login:", container.auth_service.admin_login(1, "admin123"))
    except AuthServiceError as e:
        print(e)


if __name__ == "__main__":
    main()
