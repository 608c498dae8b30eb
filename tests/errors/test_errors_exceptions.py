import unittest

from gdocbackup.errors.exceptions import (
    AmbiguousAncestryError,
    AncestryCycleError,
    ApiError,
    AuthError,
    CycleOrMultiParentError,
    GDocBackupError,
    HttpErrorInfo,
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    QuotaExceededError,
    RateLimitError,
    RemoteStoreError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDocBackupError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        self.assertEqual(GDocBackupError("msg").details, {})

    def test_ancestry_errors_share_a_base(self) -> None:
        self.assertTrue(issubclass(AmbiguousAncestryError, CycleOrMultiParentError))
        self.assertTrue(issubclass(AncestryCycleError, CycleOrMultiParentError))
        self.assertFalse(issubclass(AmbiguousAncestryError, RemoteStoreError))

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)
        self.assertEqual(str(err), "not found")

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_variants(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="quotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="userRateLimitExceeded", message="slow")
        )
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionDeniedError)

    def test_map_http_error_other_is_api_error(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=503))
        self.assertIsInstance(err, ApiError)
        self.assertEqual(err.details["status_code"], 503)
        self.assertEqual(str(err), "HTTP error 503")


if __name__ == "__main__":
    unittest.main()
