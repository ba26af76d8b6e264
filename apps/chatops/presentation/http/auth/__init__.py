"""HTTP request authentication."""

from apps.chatops.presentation.http.auth.dependencies import VerifiedBody, verified_body

__all__ = ["VerifiedBody", "verified_body"]
