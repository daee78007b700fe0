"""Email integration for sending transactional emails through Resend."""

from typing import Dict, Optional
import httpx
import logging

from core.exceptions import DeliveryFailed
from core.protocols import EmailMessage

logger = logging.getLogger(__name__)


class ResendEmailService:
    """Email service for sending emails via the Resend HTTP API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        from_email: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize email service.

        Args:
            api_key: Resend API key
            api_url: Endpoint that accepts the email payload
            from_email: Default sender, e.g. "Name <address@domain>"
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        from core.config import settings

        self.api_key = api_key or settings.resend_api_key
        self.api_url = api_url or settings.email_api_url
        self.from_email = from_email or settings.email_from
        self.timeout = timeout if timeout is not None else settings.email_timeout_seconds
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        """Get API request headers with authentication."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, message: EmailMessage) -> Dict:
        payload = {
            "from": message.from_email or self.from_email,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        if message.tags:
            payload["tags"] = [{"name": k, "value": v} for k, v in message.tags.items()]
        return payload

    async def send(self, message: EmailMessage) -> str:
        """
        Send an email. One attempt, no retry.

        Args:
            message: Email to send

        Returns:
            Provider message ID

        Raises:
            DeliveryFailed: On a missing API key, a transport error or a non-2xx response
        """
        if not self.api_key:
            logger.error("RESEND_API_KEY is not configured")
            raise DeliveryFailed()

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.api_url,
                    headers=self._get_headers(),
                    json=self._build_payload(message),
                )
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach email API: {type(e).__name__}: {e}")
            raise DeliveryFailed() from e

        if not response.is_success:
            logger.error(
                f"Email API rejected message: {response.status_code} {response.text}"
            )
            raise DeliveryFailed()

        # The provider has accepted the message at this point
        try:
            body = response.json()
        except ValueError:
            body = None
        message_id = body.get("id", "") if isinstance(body, dict) else ""
        if not message_id:
            logger.warning(f"Email API returned no message id: {response.status_code}")
        logger.info(f"Email sent to {len(message.to)} recipient(s): {message_id}")
        return message_id
