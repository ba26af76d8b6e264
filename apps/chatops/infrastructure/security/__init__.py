"""Request security."""

from apps.chatops.infrastructure.security.slack_signature_verifier import (
    SlackSignatureVerifier,
)

__all__ = ["SlackSignatureVerifier"]
