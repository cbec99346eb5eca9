import unittest

from contador_usuarios.infrastructure.errors import DecodeError
from contador_usuarios.models.user_count import UserCountResponse


class TestUserCountResponse(unittest.TestCase):
    def test_from_json_with_full_payload(self):
        r = UserCountResponse.from_json({"status": "ok", "total_users": 42})
        self.assertEqual(r.status, "ok")
        self.assertEqual(r.total_users, 42)

    def test_missing_total_users_defaults_to_zero(self):
        r = UserCountResponse.from_json({"status": "ok"})
        self.assertEqual(r.total_users, 0)

    def test_empty_object_uses_defaults(self):
        self.assertEqual(UserCountResponse.from_json({}), UserCountResponse())

    def test_null_fields_use_defaults(self):
        r = UserCountResponse.from_json({"status": None, "total_users": None})
        self.assertEqual(r, UserCountResponse(status="", total_users=0))

    def test_unknown_keys_are_ignored(self):
        r = UserCountResponse.from_json({"status": "ok", "total_users": 3, "extra": [1, 2]})
        self.assertEqual(r.total_users, 3)

    def test_non_object_payload(self):
        for payload in ([], "ok", 42, None):
            with self.subTest(payload=payload):
                with self.assertRaises(DecodeError):
                    UserCountResponse.from_json(payload)

    def test_wrong_total_users_type(self):
        for value in ("42", 4.2, True):
            with self.subTest(value=value):
                with self.assertRaises(DecodeError) as cm:
                    UserCountResponse.from_json({"total_users": value})
                self.assertIn("total_users", str(cm.exception))

    def test_wrong_status_type(self):
        with self.assertRaises(DecodeError):
            UserCountResponse.from_json({"status": 1, "total_users": 1})

    def test_is_immutable(self):
        r = UserCountResponse(status="ok", total_users=1)
        with self.assertRaises(AttributeError):
            r.total_users = 2  # type:ignore
