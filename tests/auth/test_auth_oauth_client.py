import unittest
from unittest.mock import Mock, patch

from google.auth.exceptions import RefreshError, TransportError
from google.oauth2.credentials import Credentials

from wecaredrive.auth import AuthInfo, OAuthClient
from wecaredrive.errors import AuthError, InvalidArgumentError


def _set_token(creds, request) -> None:
    creds.token = "new-access-token"


class TestOAuthClientRefresh(unittest.TestCase):
    def setUp(self) -> None:
        self.client = OAuthClient(AuthInfo(client_id="cid", client_secret="sec"))

    def test_refresh_returns_new_access_token(self) -> None:
        with patch.object(Credentials, "refresh", autospec=True, side_effect=_set_token) as refresh:
            token = self.client.refresh_access_token("refresh-1")

        self.assertEqual(token, "new-access-token")
        creds = refresh.call_args.args[0]
        self.assertEqual(creds.refresh_token, "refresh-1")
        self.assertEqual(creds.client_id, "cid")
        self.assertEqual(creds.token_uri, "https://oauth2.googleapis.com/token")

    def test_rejected_grant_returns_none(self) -> None:
        with patch.object(Credentials, "refresh", autospec=True, side_effect=RefreshError("invalid_grant")):
            self.assertIsNone(self.client.refresh_access_token("refresh-1"))

    def test_transport_failure_raises_auth_error(self) -> None:
        with patch.object(Credentials, "refresh", autospec=True, side_effect=TransportError("offline")):
            with self.assertRaises(AuthError):
                self.client.refresh_access_token("refresh-1")

    def test_empty_refresh_token_is_invalid(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            self.client.refresh_access_token("")


class TestOAuthClientLogin(unittest.TestCase):
    def test_login_runs_installed_app_flow(self) -> None:
        flow = Mock()
        flow.run_local_server.return_value = Mock(token="access", refresh_token="refresh")
        client = OAuthClient(AuthInfo(client_id="cid"))

        with patch(
            "google_auth_oauthlib.flow.InstalledAppFlow.from_client_config",
            return_value=flow,
        ) as from_config:
            tokens = client.login(["scope-a"])

        self.assertEqual(tokens.access_token, "access")
        self.assertEqual(tokens.refresh_token, "refresh")
        self.assertEqual(from_config.call_args.kwargs["scopes"], ["scope-a"])
        flow.run_local_server.assert_called_once_with(port=0)

    def test_login_uses_client_secrets_file_when_given(self) -> None:
        flow = Mock()
        flow.run_local_server.return_value = Mock(token="access", refresh_token=None)
        client = OAuthClient(AuthInfo(client_id="cid", client_secrets_file="/tmp/secrets.json"))

        with patch(
            "google_auth_oauthlib.flow.InstalledAppFlow.from_client_secrets_file",
            return_value=flow,
        ) as from_file:
            tokens = client.login(["scope-a"])

        self.assertEqual(from_file.call_args.args[0], "/tmp/secrets.json")
        self.assertIsNone(tokens.refresh_token)

    def test_login_flow_failure_raises_auth_error(self) -> None:
        client = OAuthClient(AuthInfo(client_id="cid"))
        with patch(
            "google_auth_oauthlib.flow.InstalledAppFlow.from_client_config",
            side_effect=ValueError("bad config"),
        ):
            with self.assertRaises(AuthError):
                client.login(["scope-a"])

    def test_login_rejects_empty_scopes(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            OAuthClient(AuthInfo(client_id="cid")).login([])


if __name__ == "__main__":
    unittest.main()
