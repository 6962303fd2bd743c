import json
import unittest

from wecaredrive.errors.exceptions import (
    FileTooLargeError,
    HttpErrorInfo,
    RemoteApiError,
    SessionExpiredError,
    UnauthenticatedError,
    WeCareDriveError,
    http_error_info,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = WeCareDriveError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_user_facing_messages_are_distinct(self) -> None:
        self.assertIn("not authenticated", str(UnauthenticatedError()).lower())
        self.assertIn("log in again", str(SessionExpiredError()).lower())
        self.assertTrue(str(RemoteApiError(500, "boom")).startswith("Operation failed:"))

    def test_remote_api_error_carries_status_and_body(self) -> None:
        err = RemoteApiError(403, "forbidden body")
        self.assertEqual(err.status_code, 403)
        self.assertEqual(err.body, "forbidden body")
        self.assertEqual(err.details["status_code"], 403)
        self.assertIn("403 - forbidden body", str(err))

    def test_subclasses_share_base(self) -> None:
        self.assertIsInstance(FileTooLargeError("x"), WeCareDriveError)
        self.assertIsInstance(RemoteApiError(500), WeCareDriveError)


class TestHttpErrorMapping(unittest.TestCase):
    def test_http_error_info_extracts_google_error_fields(self) -> None:
        body = {
            "error": {
                "message": "File not found: X.",
                "errors": [{"reason": "notFound"}],
            }
        }
        info = http_error_info(404, json.dumps(body).encode("utf-8"), "Not Found")
        self.assertEqual(info.status_code, 404)
        self.assertEqual(info.reason, "notFound")
        self.assertEqual(info.message, "File not found: X.")
        self.assertIn("notFound", info.body)

    def test_http_error_info_tolerates_non_json_body(self) -> None:
        info = http_error_info(502, b"<html>bad gateway</html>", "Bad Gateway")
        self.assertEqual(info.body, "<html>bad gateway</html>")
        self.assertEqual(info.reason, "Bad Gateway")
        self.assertIsNone(info.message)

    def test_http_error_info_non_int_status_becomes_zero(self) -> None:
        self.assertEqual(http_error_info(None, None).status_code, 0)

    def test_map_http_error_is_remote_api_error(self) -> None:
        cause = RuntimeError("x")
        err = map_http_error(HttpErrorInfo(status_code=401, body="denied", reason="authError"), cause=cause)
        self.assertIsInstance(err, RemoteApiError)
        self.assertNotIsInstance(err, SessionExpiredError)
        self.assertEqual(err.status_code, 401)
        self.assertEqual(err.details["reason"], "authError")
        self.assertIs(err.cause, cause)


if __name__ == "__main__":
    unittest.main()
