# controllers/users.py

from controllers.base import Draft, ViewController
from core.errors import PayloadError
from repositories.users import UserRepository


class UsersController(ViewController):
    """
    Profiles are created at sign-up, so this screen only edits and deletes.
    Deleting removes the profile document, not the auth account.
    """

    label = "users"
    search_fields = ("name", "email", "role")
    form_fields = ("name", "role", "phone")

    def __init__(self, repository: UserRepository):
        super().__init__(repository)

    def open_create(self) -> Draft:
        raise PayloadError("Users are created by registering", field="id")
