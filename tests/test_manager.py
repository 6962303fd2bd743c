import unittest
from unittest.mock import Mock

import httplib2

from fake_drive_service import FakeDriveService
from wecaredrive import (
    AuthError,
    DriveStoreConfig,
    DriveSession,
    FilePayload,
    MetadataNotFoundError,
    OAuthClient,
    RemoteApiError,
    SessionExpiredError,
    TokenPair,
    UnauthenticatedError,
    WeCareDriveService,
)
from wecaredrive.auth import AuthInfo
from wecaredrive.config import MiB
from wecaredrive.controller import GoogleDriveController


def _service(
    drive: FakeDriveService,
    token: str | None = "tok",
    oauth: OAuthClient | None = None,
) -> WeCareDriveService:
    controller = GoogleDriveController.from_service(DriveSession(token), drive)
    return WeCareDriveService.from_controller(controller, oauth_client=oauth)


class TestDocumentFlow(unittest.TestCase):
    def setUp(self) -> None:
        self.drive = FakeDriveService()
        self.service = _service(self.drive)

    def test_upload_list_update_delete(self) -> None:
        result = self.service.upload_file(
            FilePayload(b"x" * 2048, "report.pdf", "application/pdf"),
            tags=["lab"],
            category="Lab Result",
        )
        self.assertTrue(result.success)

        listed = self.service.list_files()
        self.assertEqual([r.file_id for r in listed], [result.file_id])
        self.assertEqual(listed[0].name, "report.pdf")
        self.assertEqual(listed[0].category, "Lab Result")
        self.assertTrue(listed[0].file_url.startswith("https://drive.google.com/file/d/"))

        updated = self.service.update_metadata(result.file_id, name="March report", tags=["lab", "2025"])
        self.assertEqual(updated.name, "March report")
        self.assertEqual(self.drive.items[result.file_id]["name"], "March report")
        stored = self.service.get_file_metadata(result.file_id)
        self.assertEqual(stored.tags, ["lab", "2025"])
        self.assertEqual(stored.category, "Lab Result")

        self.assertTrue(self.service.delete_file(result.file_id))
        self.assertEqual(self.service.list_files(), [])
        self.assertIsNone(self.service.get_file_metadata(result.file_id))

    def test_list_documents_projection(self) -> None:
        self.service.upload_file(
            FilePayload(b"x" * 2048, "report.pdf", "application/pdf"),
            description="Annual checkup",
        )

        view = self.service.list_documents()[0]

        self.assertEqual(view.doc_type, "PDF")
        self.assertEqual(view.file_size, "2 KB")
        self.assertEqual(view.summary, "Annual checkup")
        self.assertEqual(view.category, "others")
        self.assertEqual(view.file_name, "report.pdf")

    def test_oversized_upload_makes_no_calls(self) -> None:
        result = self.service.upload_file(FilePayload(b"x", "huge.bin", size=101 * MiB))
        self.assertFalse(result.success)
        self.assertEqual(result.error, "File size exceeds limit of 100MB")
        self.assertEqual(self.drive.calls, [])

    def test_update_metadata_without_sidecar(self) -> None:
        folders = self.service.initialize_folder_structure()
        file_id = self.drive.add_item("loose.txt", folders.docs)
        with self.assertRaises(MetadataNotFoundError):
            self.service.update_metadata(file_id, description="x")

    def test_update_file_name_touches_content_only(self) -> None:
        result = self.service.upload_file(FilePayload(b"abc", "a.txt", "text/plain"))
        self.assertTrue(self.service.update_file_name(result.file_id, "b.txt"))
        self.assertEqual(self.drive.items[result.file_id]["name"], "b.txt")
        self.assertEqual(self.service.get_file_metadata(result.file_id).name, "a.txt")

    def test_profile_roundtrip(self) -> None:
        self.assertIsNone(self.service.get_profile())
        self.assertTrue(self.service.save_profile({"name": "Ana"}))
        self.assertEqual(self.service.get_profile(), {"name": "Ana"})

    def test_custom_config_is_used(self) -> None:
        controller = GoogleDriveController.from_service(DriveSession("tok"), self.drive)
        service = WeCareDriveService.from_controller(
            controller, config=DriveStoreConfig(max_file_size=MiB, fallback_category="misc")
        )
        result = service.upload_file(FilePayload(b"x", "a.bin", size=MiB + 1))
        self.assertEqual(result.error, "File size exceeds limit of 1MB")
        self.assertEqual(service.config.fallback_category, "misc")


class TestSessionHandling(unittest.TestCase):
    def test_folder_status_tracks_session(self) -> None:
        drive = FakeDriveService()
        service = _service(drive, token=None)

        status = service.get_folder_status()
        self.assertFalse(status.has_access_token)
        self.assertIsNone(status.root_folder_id)

        service.set_access_token("tok")
        folders = service.initialize_folder_structure()
        status = service.get_folder_status()
        self.assertTrue(status.has_access_token)
        self.assertEqual(status.docs_folder_id, folders.docs)

        service.clear_access_token()
        status = service.get_folder_status()
        self.assertFalse(status.has_access_token)
        self.assertIsNone(status.docs_folder_id)

    def test_list_without_token(self) -> None:
        with self.assertRaises(UnauthenticatedError):
            _service(FakeDriveService(), token=None).list_files()

    def test_list_with_rejected_token(self) -> None:
        drive = FakeDriveService()
        drive.token_valid = False
        with self.assertRaises(SessionExpiredError):
            _service(drive).list_documents()

    def test_list_with_unreachable_drive(self) -> None:
        drive = FakeDriveService()
        drive.fail_transport("about", httplib2.ServerNotFoundError("Unable to find the server"))
        with self.assertRaises(RemoteApiError) as ctx:
            _service(drive).list_files()
        self.assertNotIsInstance(ctx.exception, SessionExpiredError)

    def test_delete_without_token(self) -> None:
        self.assertFalse(_service(FakeDriveService(), token=None).delete_file("F1"))

    def test_validate_token(self) -> None:
        drive = FakeDriveService()
        service = _service(drive)
        self.assertTrue(service.validate_token())
        drive.token_valid = False
        self.assertFalse(service.validate_token())


class TestAuthFlows(unittest.TestCase):
    def setUp(self) -> None:
        self.drive = FakeDriveService()
        self.oauth = Mock(spec=OAuthClient)
        self.service = _service(self.drive, token=None, oauth=self.oauth)

    def test_sign_in_sets_token_and_provisions(self) -> None:
        self.oauth.login.return_value = TokenPair("fresh", "refresh")

        tokens = self.service.sign_in()

        self.assertEqual(tokens.refresh_token, "refresh")
        self.assertEqual(self.service.session.access_token, "fresh")
        self.assertIsNotNone(self.service.session.folders)

    def test_sign_in_survives_provisioning_failure(self) -> None:
        self.oauth.login.return_value = TokenPair("fresh")
        self.drive.fail("list", status=500)

        with self.assertLogs("wecaredrive.manager", level="WARNING"):
            self.service.sign_in()

        self.assertEqual(self.service.session.access_token, "fresh")
        self.assertIsNone(self.service.session.folders)

    def test_restore_with_valid_token(self) -> None:
        self.assertTrue(self.service.restore_session("stored"))
        self.assertEqual(self.service.session.access_token, "stored")
        self.assertIsNotNone(self.service.session.folders)
        self.oauth.refresh_access_token.assert_not_called()

    def test_restore_refreshes_rejected_token(self) -> None:
        self.drive.token_valid = False
        self.oauth.refresh_access_token.return_value = "renewed"

        self.assertTrue(self.service.restore_session("stale", "refresh"))

        self.oauth.refresh_access_token.assert_called_once_with("refresh")
        self.assertEqual(self.service.session.access_token, "renewed")

    def test_restore_fails_when_refresh_rejected(self) -> None:
        self.drive.token_valid = False
        self.oauth.refresh_access_token.return_value = None

        self.assertFalse(self.service.restore_session("stale", "refresh"))
        self.assertFalse(self.service.session.has_token)

    def test_restore_fails_when_refresh_errors(self) -> None:
        self.drive.token_valid = False
        self.oauth.refresh_access_token.side_effect = AuthError("token endpoint unreachable")

        self.assertFalse(self.service.restore_session("stale", "refresh"))
        self.assertFalse(self.service.session.has_token)

    def test_restore_fails_when_drive_is_unreachable(self) -> None:
        self.drive.fail_transport("about", httplib2.ServerNotFoundError("Unable to find the server"))

        self.assertFalse(self.service.restore_session("stored", "refresh"))

        self.assertFalse(self.service.session.has_token)
        self.oauth.refresh_access_token.assert_not_called()

    def test_restore_without_refresh_token(self) -> None:
        self.drive.token_valid = False
        self.assertFalse(self.service.restore_session("stale"))
        self.oauth.refresh_access_token.assert_not_called()

    def test_refresh_passthrough_leaves_session(self) -> None:
        self.oauth.refresh_access_token.return_value = "renewed"
        self.assertEqual(self.service.refresh_access_token("refresh"), "renewed")
        self.assertIsNone(self.service.session.access_token)

    def test_oauth_operations_need_auth_info(self) -> None:
        service = _service(self.drive)
        with self.assertRaises(AuthError):
            service.sign_in()
        with self.assertRaises(AuthError):
            service.refresh_access_token("refresh")


class TestConstruction(unittest.TestCase):
    def test_default_construction_builds_nothing_until_used(self) -> None:
        service = WeCareDriveService(AuthInfo(client_id="cid"))
        self.assertFalse(service.session.has_token)
        self.assertFalse(service.validate_token())
        self.assertEqual(service.config, DriveStoreConfig())

    def test_shared_session(self) -> None:
        session = DriveSession("tok")
        service = WeCareDriveService(session=session)
        self.assertIs(service.session, session)


if __name__ == "__main__":
    unittest.main()
