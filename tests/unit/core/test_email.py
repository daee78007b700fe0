"""
Tests for the Resend email client.

Uses httpx.MockTransport so no request leaves the process.
"""

import json

import httpx
import pytest

from core.exceptions import DeliveryFailed
from core.integrations.email import ResendEmailService
from core.protocols import EmailMessage


def make_message(**overrides) -> EmailMessage:
    data = {
        "to": ["jane@searchfirm.com"],
        "subject": "New Talent Request",
        "html": "<p>Hello</p>",
        "reply_to": "sam@acme.example.com",
        "tags": {"category": "talent_request"},
    }
    data.update(overrides)
    return EmailMessage(**data)


def make_service(handler, **kwargs) -> ResendEmailService:
    return ResendEmailService(
        api_key=kwargs.pop("api_key", "re_123"),
        api_url="https://api.resend.test/emails",
        from_email="Board <noreply@board.test>",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestResendEmailService:
    @pytest.mark.asyncio
    async def test_posts_payload_and_returns_id(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "msg_42"})

        message_id = await make_service(handler).send(make_message())

        assert message_id == "msg_42"
        assert captured["url"] == "https://api.resend.test/emails"
        assert captured["auth"] == "Bearer re_123"
        assert captured["body"] == {
            "from": "Board <noreply@board.test>",
            "to": ["jane@searchfirm.com"],
            "subject": "New Talent Request",
            "html": "<p>Hello</p>",
            "reply_to": "sam@acme.example.com",
            "tags": [{"name": "category", "value": "talent_request"}],
        }

    @pytest.mark.asyncio
    async def test_optional_fields_omitted(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "msg_1"})

        await make_service(handler).send(make_message(reply_to=None, tags={}))

        assert "reply_to" not in captured["body"]
        assert "tags" not in captured["body"]

    @pytest.mark.asyncio
    async def test_message_sender_overrides_default(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "msg_1"})

        await make_service(handler).send(make_message(from_email="Other <o@board.test>"))

        assert captured["body"]["from"] == "Other <o@board.test>"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 422, 500])
    async def test_non_success_response_raises(self, status_code):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json={"message": "nope"})

        with pytest.raises(DeliveryFailed) as exc_info:
            await make_service(handler).send(make_message())

        assert exc_info.value.message == "Failed to send email"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, body",
        [
            (200, {"text": "OK"}),
            (202, {"content": b""}),
            (200, {"json": ["email_1"]}),
        ],
    )
    async def test_accepted_without_json_id_returns_empty(self, status_code, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, **body)

        assert await make_service(handler).send(make_message()) == ""

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DeliveryFailed):
            await make_service(handler).send(make_message())

    @pytest.mark.asyncio
    async def test_missing_api_key_sends_nothing(self, monkeypatch):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"id": "msg_1"})

        service = make_service(handler)
        monkeypatch.setattr(service, "api_key", None)

        with pytest.raises(DeliveryFailed):
            await service.send(make_message())

        assert calls == []
