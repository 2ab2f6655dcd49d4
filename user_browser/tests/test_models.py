import dataclasses
import unittest

from user_browser.errors import DecodeError
from user_browser.models import Failed, Idle, Loaded, Loading, Page, User
from user_browser.services.status import status_text
from .fakes import make_users


class TestUser(unittest.TestCase):
    def test_from_json_ignores_extra_fields(self):
        user = User.from_json({"id": 3, "name": "Clementine", "email": "c@x.org", "phone": "1"})
        self.assertEqual(user, User(3, "Clementine", "c@x.org"))
        self.assertEqual(user.to_json(), {"id": 3, "name": "Clementine", "email": "c@x.org"})

    def test_is_immutable(self):
        user = User(1, "A", "a@x")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            user.name = "B"

    def test_from_json_rejects_missing_id(self):
        with self.assertRaises(DecodeError):
            User.from_json({"name": "A", "email": "a@x"})


class TestPage(unittest.TestCase):
    def test_single_page(self):
        page = Page(items=make_users(2), total=2, pages=1, page=0, per_page=3)
        self.assertEqual(page.number, 1)
        self.assertFalse(page.has_next())
        self.assertFalse(page.has_prev())


class TestStatusText(unittest.TestCase):
    def test_each_state(self):
        self.assertEqual(status_text(Idle()), "Client Ready")
        self.assertEqual(status_text(Loading()), "Client: Calling Service...")
        self.assertEqual(status_text(Loaded(tuple(make_users(10)))), "Client: Received 10 Users.")
        self.assertEqual(status_text(Failed("timed out")), "Error: timed out")

    def test_unknown_state(self):
        with self.assertRaises(TypeError):
            status_text("loading")


if __name__ == "__main__":
    unittest.main()
