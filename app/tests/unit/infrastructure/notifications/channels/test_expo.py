"""Unit tests for the Expo push relay channel."""

from unittest.mock import MagicMock

import pytest
import requests

from infrastructure.notifications import ExpoChannel, NotificationStatus, TokenKind
from infrastructure.notifications.channels.expo import truncate_body
from infrastructure.operations import OperationStatus


@pytest.fixture
def channel(mock_expo_settings, mock_session):
    return ExpoChannel(mock_expo_settings, timeout_seconds=5.0, session=mock_session)


@pytest.mark.unit
class TestTruncateBody:
    def test_short_body_is_unchanged(self):
        assert truncate_body("hello") == "hello"

    def test_body_at_limit_is_unchanged(self):
        body = "a" * 100

        assert truncate_body(body) == body

    def test_long_body_is_cut_with_ellipsis(self):
        body = "b" * 150

        truncated = truncate_body(body)

        assert truncated == "b" * 100 + "..."
        assert len(truncated) == 103

    def test_custom_max_length(self):
        assert truncate_body("abcdef", max_length=3) == "abc..."


@pytest.mark.unit
class TestExpoChannelMessage:
    def test_channel_identity(self, channel):
        assert channel.channel_name == "expo"
        assert channel.token_kind is TokenKind.RELAY

    def test_build_message_payload(self, channel, notification_factory):
        message = channel.build_message(notification_factory())

        assert message == {
            "to": "ExponentPushToken[xyz]",
            "title": "alice",
            "body": "hello",
            "data": {
                "recipientsUserId": "u2",
                "sendersUserId": "u1",
                "roomId": "r1",
                "profileUrl": "https://example.com/alice.png",
            },
            "sound": "default",
            "priority": "high",
            "channelId": "fcm_fallback_notification_channel",
        }

    def test_build_message_truncates_long_body(self, channel, notification_factory):
        message = channel.build_message(notification_factory(body="x" * 150))

        assert message["body"] == "x" * 100 + "..."

    def test_session_headers(self, mock_expo_settings, mock_session):
        ExpoChannel(mock_expo_settings, session=mock_session)

        assert mock_session.headers["Content-Type"] == "application/json"
        assert "Authorization" not in mock_session.headers

    def test_access_token_adds_bearer_header(self, mock_expo_settings, mock_session):
        mock_expo_settings.EXPO_ACCESS_TOKEN = "expo-secret"

        ExpoChannel(mock_expo_settings, session=mock_session)

        assert mock_session.headers["Authorization"] == "Bearer expo-secret"


@pytest.mark.unit
class TestExpoChannelSend:
    def test_successful_send(self, channel, mock_session, notification_factory):
        result = channel.send(notification_factory())

        assert result.is_success
        assert result.data.channel == "expo"
        assert result.data.status == NotificationStatus.SENT
        assert result.data.external_id == "ticket-1"
        assert result.data.platform_response == {
            "data": {"status": "ok", "id": "ticket-1"}
        }
        mock_session.post.assert_called_once()
        args, kwargs = mock_session.post.call_args
        assert args[0] == "https://exp.host/--/api/v2/push/send"
        assert kwargs["timeout"] == 5.0
        assert kwargs["json"]["to"] == "ExponentPushToken[xyz]"

    def test_ticket_list_response(self, channel, mock_session, notification_factory):
        mock_session.post.return_value.json.return_value = {
            "data": [{"status": "ok", "id": "ticket-9"}]
        }

        result = channel.send(notification_factory())

        assert result.is_success
        assert result.data.external_id == "ticket-9"

    def test_device_not_registered_ticket(
        self, channel, mock_session, notification_factory
    ):
        mock_session.post.return_value.json.return_value = {
            "data": {
                "status": "error",
                "message": "not a registered push notification recipient",
                "details": {"error": "DeviceNotRegistered"},
            }
        }

        result = channel.send(notification_factory())

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "DeviceNotRegistered"
        assert result.data.status == NotificationStatus.FAILED

    def test_request_level_errors(self, channel, mock_session, notification_factory):
        mock_session.post.return_value.json.return_value = {
            "errors": [{"code": "VALIDATION_ERROR", "message": "bad"}]
        }

        result = channel.send(notification_factory())

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "EXPO_REJECTED"

    def test_http_error_is_classified(self, channel, mock_session, notification_factory):
        response = requests.Response()
        response.status_code = 503
        mock_session.post.return_value.raise_for_status.side_effect = (
            requests.HTTPError("unavailable", response=response)
        )

        result = channel.send(notification_factory())

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "SERVER_ERROR"

    def test_timeout_is_classified(self, channel, mock_session, notification_factory):
        mock_session.post.side_effect = requests.Timeout("slow")

        result = channel.send(notification_factory())

        assert result.error_code == "TIMEOUT"

    def test_non_json_response(self, channel, mock_session, notification_factory):
        mock_session.post.return_value.json.side_effect = ValueError("no json")

        result = channel.send(notification_factory())

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "INVALID_RESPONSE"


@pytest.mark.unit
def test_default_session_is_created(mock_expo_settings, monkeypatch):
    session = MagicMock()
    session.headers = {}
    monkeypatch.setattr(requests, "Session", MagicMock(return_value=session))

    channel = ExpoChannel(mock_expo_settings)

    assert channel._session is session
