# backend/ufv_timesheet/notifications/client.py

"""
HTTP client for the Resend transactional email API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .config import EmailConfig, get_email_config
from .schemas import EmailMessage, EmailSendResponse

logger = logging.getLogger(__name__)


class EmailClientError(Exception):
    """Base error for the email client."""


class EmailHTTPError(EmailClientError):
    """Resend answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"Resend API error: status_code={status_code} body={body}")
        self.status_code = status_code
        self.body = body


class EmailConnectionError(EmailClientError):
    """Connection error or timeout."""


class ResendClient:
    """
    Minimal Resend client: POST {api_base_url}/emails.

    `transport` is handed to httpx.Client, which lets tests plug in an
    httpx.MockTransport.
    """

    def __init__(
        self,
        config: EmailConfig | None = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or get_email_config()
        self._transport = transport

    @property
    def config(self) -> EmailConfig:
        return self._config

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.api_key}",
        }

    def send(self, message: EmailMessage) -> EmailSendResponse:
        """
        Send one email.

        :raises EmailHTTPError: Resend returned 4xx/5xx
        :raises EmailConnectionError: connection error or timeout
        :return: the id Resend assigned to the email
        """
        url = f"{self._config.api_base_url}/emails"
        logger.info("Preparing to send email with subject: %s", message.subject)

        try:
            with httpx.Client(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    json=message.to_payload(),
                    headers=self._build_headers(),
                )
        except httpx.RequestError as exc:
            logger.error("Failed to send email: %s", exc)
            raise EmailConnectionError(str(exc)) from exc

        if response.status_code // 100 != 2:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            logger.error("Failed to send email: status=%s body=%s", response.status_code, body)
            raise EmailHTTPError(status_code=response.status_code, body=body)

        try:
            data = response.json()
        except ValueError as exc:
            raise EmailClientError(f"Resend returned a non-JSON response: {response.text}") from exc

        email_id = data.get("id") if isinstance(data, dict) else None
        if not email_id:
            raise EmailClientError(f"Resend response has no email id: {data}")

        logger.info("Email sent successfully with ID: %s", email_id)
        return EmailSendResponse(id=str(email_id), raw=data)
