"""Auth ports."""

from apps.chatops.application.auth.ports.request_verifier import RequestVerifier

__all__ = ["RequestVerifier"]
