"""API tests for /auth: sign-up, login, getMe and the bearer-token dependency."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.api.v1.auth import INVALID_TOKEN, NO_SUCH_USER, NOT_AUTHORIZED
from app.core.security import USER_ID_CLAIM, create_access_token, verify_password
from app.models import User

from helpers import DEFAULT_PASSWORD, ApiTestCase

SIGN_UP = "/api/v1/auth/sign-up"
LOGIN = "/api/v1/auth/login"
GET_ME = "/api/v1/auth/getMe"

ALICE = {
    "name": "Alice Smith",
    "email": "alice@example.com",
    "password": "secret1",
    "country": "US",
}


class TestSignUp(ApiTestCase):
    def test_sign_up_returns_token_and_summary(self) -> None:
        res = self.client.post(SIGN_UP, json=ALICE)
        self.assertEqual(res.status_code, 201)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertTrue(body["token"])
        self.assertEqual(body["data"]["email"], "alice@example.com")
        self.assertEqual(body["data"]["name"], "Alice Smith")
        self.assertEqual(body["data"]["country"], "US")
        self.assertNotIn("password", body["data"])
        self.assertNotIn("password_hash", body["data"])

    def test_password_is_stored_hashed(self) -> None:
        self.client.post(SIGN_UP, json=ALICE)
        with self.SessionTesting() as db:
            user = db.query(User).filter(User.email == "alice@example.com").one()
            self.assertNotEqual(user.password_hash, ALICE["password"])
            self.assertNotIn(ALICE["password"], user.password_hash)
            self.assertTrue(verify_password(ALICE["password"], user.password_hash))

    def test_email_is_trimmed_and_lowercased(self) -> None:
        res = self.client.post(SIGN_UP, json={**ALICE, "email": "  Alice@Example.COM "})
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.json()["data"]["email"], "alice@example.com")

    def test_duplicate_email(self) -> None:
        self.client.post(SIGN_UP, json=ALICE)
        res = self.client.post(SIGN_UP, json={**ALICE, "email": "ALICE@example.com"})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json(), {"success": False, "error": "User already exists"})

    def test_missing_field(self) -> None:
        payload = {k: v for k, v in ALICE.items() if k != "country"}
        res = self.client.post(SIGN_UP, json=payload)
        self.assertEqual(res.status_code, 400)
        body = res.json()
        self.assertFalse(body["success"])
        self.assertIn("country", body["error"])

    def test_field_constraints(self) -> None:
        cases = {
            "short name": {**ALICE, "name": "Al"},
            "bad email": {**ALICE, "email": "not-an-email"},
            "short password": {**ALICE, "password": "12345"},
            "password over 72 bytes": {**ALICE, "password": "p" * 80 + "X"},
            "multibyte password over 72 bytes": {**ALICE, "password": "\u00e9" * 40},
        }
        for label, payload in cases.items():
            with self.subTest(label):
                res = self.client.post(SIGN_UP, json=payload)
                self.assertEqual(res.status_code, 400)
                self.assertFalse(res.json()["success"])

    def test_long_password_is_refused_not_truncated(self) -> None:
        res = self.client.post(SIGN_UP, json={**ALICE, "password": "p" * 80 + "X"})
        self.assertEqual(res.status_code, 400)
        self.assertIn("password", res.json()["error"])
        with self.SessionTesting() as db:
            self.assertEqual(db.query(User).count(), 0)

    def test_password_of_exactly_72_bytes(self) -> None:
        password = "p" * 72
        res = self.client.post(SIGN_UP, json={**ALICE, "password": password})
        self.assertEqual(res.status_code, 201)
        ok = self.client.post(LOGIN, json={"email": ALICE["email"], "password": password})
        self.assertEqual(ok.status_code, 200)
        longer = self.client.post(LOGIN, json={"email": ALICE["email"], "password": password + "Y"})
        self.assertEqual(longer.status_code, 401)
        self.assertEqual(longer.json(), {"success": False, "error": "Invalid credentials."})


class TestLogin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.sign_up()

    def test_login_success(self) -> None:
        res = self.client.post(LOGIN, json={"email": "alice@example.com", "password": DEFAULT_PASSWORD})
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertTrue(body["token"])
        self.assertEqual(body["data"]["email"], "alice@example.com")

    def test_login_email_case_insensitive(self) -> None:
        res = self.client.post(LOGIN, json={"email": "ALICE@example.com", "password": DEFAULT_PASSWORD})
        self.assertEqual(res.status_code, 200)

    def test_wrong_password(self) -> None:
        res = self.client.post(LOGIN, json={"email": "alice@example.com", "password": "wrong-pass"})
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json(), {"success": False, "error": "Invalid credentials."})

    def test_unknown_email(self) -> None:
        res = self.client.post(LOGIN, json={"email": "bob@example.com", "password": DEFAULT_PASSWORD})
        self.assertEqual(res.status_code, 401)
        self.assertEqual(
            res.json(),
            {"success": False, "error": "User does not exist or invalid credentials."},
        )

    def test_missing_password(self) -> None:
        res = self.client.post(LOGIN, json={"email": "alice@example.com"})
        self.assertEqual(res.status_code, 400)
        self.assertIn("password", res.json()["error"])

    def test_login_token_works_for_get_me(self) -> None:
        res = self.client.post(LOGIN, json={"email": "alice@example.com", "password": DEFAULT_PASSWORD})
        token = res.json()["token"]
        me = self.client.get(GET_ME, headers=self.auth(token))
        self.assertEqual(me.status_code, 200)


class TestGetMe(ApiTestCase):
    def test_returns_full_record_without_hash(self) -> None:
        token, user_id = self.sign_up()
        res = self.client.get(GET_ME, headers=self.auth(token))
        self.assertEqual(res.status_code, 200)
        data = res.json()["data"]
        self.assertEqual(data["id"], user_id)
        self.assertEqual(data["email"], "alice@example.com")
        self.assertIn("created_at", data)
        self.assertIn("updated_at", data)
        self.assertNotIn("password_hash", data)

    def test_no_header(self) -> None:
        res = self.client.get(GET_ME)
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json(), {"success": False, "error": NOT_AUTHORIZED})
        self.assertEqual(res.headers.get("www-authenticate"), "Bearer")

    def test_wrong_scheme(self) -> None:
        token, _ = self.sign_up()
        res = self.client.get(GET_ME, headers={"Authorization": f"Basic {token}"})
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["error"], NOT_AUTHORIZED)

    def test_all_token_failures_look_the_same(self) -> None:
        _, user_id = self.sign_up()
        expired = create_access_token(user_id, expires_delta=timedelta(seconds=-10))
        forged = jwt.encode(
            {USER_ID_CLAIM: str(user_id), "exp": datetime.now(UTC) + timedelta(hours=1)},
            "an-attacker-secret-of-at-least-32-bytes!",
            algorithm="HS256",
        )
        for label, token in (("expired", expired), ("forged", forged), ("garbage", "abc.def")):
            with self.subTest(label):
                res = self.client.get(GET_ME, headers=self.auth(token))
                self.assertEqual(res.status_code, 401)
                self.assertEqual(res.json(), {"success": False, "error": INVALID_TOKEN})

    def test_non_numeric_user_id_claim(self) -> None:
        res = self.client.get(GET_ME, headers=self.auth(create_access_token("abc")))
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json()["error"], INVALID_TOKEN)

    def test_token_for_deleted_user(self) -> None:
        token, user_id = self.sign_up()
        with self.SessionTesting() as db:
            db.delete(db.get(User, user_id))
            db.commit()
        res = self.client.get(GET_ME, headers=self.auth(token))
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json(), {"success": False, "error": NO_SUCH_USER})


class TestRootAndHealth(ApiTestCase):
    def test_root(self) -> None:
        res = self.client.get("/")
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.json()["success"])

    def test_health(self) -> None:
        res = self.client.get("/api/v1/health")
        self.assertEqual(res.status_code, 200)
        data = res.json()["data"]
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["database"], "connected")

    def test_unknown_route_uses_envelope(self) -> None:
        res = self.client.get("/api/v1/nope")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json(), {"success": False, "error": "Not Found"})


if __name__ == "__main__":
    unittest.main()
