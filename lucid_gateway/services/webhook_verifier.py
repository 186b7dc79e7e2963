"""
WhatsApp webhook subscription handshake.

The provider calls the webhook with hub.mode=subscribe, the verify token
configured on its side, and a one-time challenge. The endpoint proves
ownership by echoing the challenge, but only when the token matches ours.
"""
import hmac
from dataclasses import dataclass

SUBSCRIBE_MODE = "subscribe"


@dataclass(frozen=True)
class HookVerificationCommand:
    mode: str
    challenge: str
    verify_token: str


class WebhookVerificationError(Exception):
    """Base exception for rejected webhook handshakes."""


class InvalidModeError(WebhookVerificationError):
    def __init__(self):
        super().__init__(f"invalid mode, expected '{SUBSCRIBE_MODE}'")


class InvalidTokenError(WebhookVerificationError):
    def __init__(self):
        super().__init__("invalid verify token")


class WebhookVerifier:
    def __init__(self, expected_token: str):
        self._expected_token = expected_token

    def verify(self, command: HookVerificationCommand) -> str:
        """Return the challenge to echo, or raise WebhookVerificationError."""
        if command.mode != SUBSCRIBE_MODE:
            raise InvalidModeError()

        # An unset secret never matches, not even an empty token.
        if not self._expected_token or not hmac.compare_digest(
            command.verify_token.encode("utf-8"),
            self._expected_token.encode("utf-8"),
        ):
            raise InvalidTokenError()

        return command.challenge
