"""
Translation between webhook wire models and the verifier's input.

Both functions copy values untouched: no trimming, no case folding, no
validation. Deciding whether a handshake is acceptable belongs to the caller.
"""
from lucid_gateway.api.whatsapp_schemas import HookVerificationRequest, HookVerificationResponse
from lucid_gateway.services.webhook_verifier import HookVerificationCommand


def map_to_command(request: HookVerificationRequest) -> HookVerificationCommand:
    return HookVerificationCommand(
        mode=request.mode,
        challenge=request.challenge,
        verify_token=request.verify_token,
    )


def to_verification_response(challenge: str) -> HookVerificationResponse:
    return HookVerificationResponse(challenge=challenge)
