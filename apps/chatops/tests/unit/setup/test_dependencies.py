"""Dependency factory 테스트."""

from __future__ import annotations

import os
import time
from unittest.mock import MagicMock, patch

import pytest

from apps.chatops.application.auth.exceptions import AuthError
from apps.chatops.application.dispatch.commands import DispatchCommandInteractor
from apps.chatops.infrastructure.github import GitHubClient
from apps.chatops.infrastructure.security import SlackSignatureVerifier
from apps.chatops.setup.config import Settings, get_settings
from apps.chatops.setup.dependencies import (
    get_dispatch_command_interactor,
    get_github_client,
    get_repository_resolver,
    get_request_verifier,
)


class TestDependencies:
    """의존성 팩토리 테스트."""

    def setup_method(self) -> None:
        get_settings.cache_clear()
        get_github_client.cache_clear()

    def teardown_method(self) -> None:
        get_settings.cache_clear()
        get_github_client.cache_clear()

    def test_github_client_disabled_without_token(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_github_client() is None

    def test_github_client_created_with_token(self) -> None:
        with patch.dict(os.environ, {"CHATOPS_GITHUB_TOKEN": "ghp_test"}, clear=True):
            client = get_github_client()

        assert isinstance(client, GitHubClient)
        assert get_github_client() is client

    def test_request_verifier_uses_settings(self) -> None:
        settings = Settings(slack_signing_secret="secret", slack_signature_tolerance_seconds=60)

        verifier = get_request_verifier(settings)

        assert isinstance(verifier, SlackSignatureVerifier)
        assert verifier.compute_signature("1", b"") == SlackSignatureVerifier("secret").compute_signature("1", b"")

    def test_default_settings_verifier_fails_closed(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        verifier = get_request_verifier(settings)
        timestamp = str(int(time.time()))

        with pytest.raises(AuthError, match="signing secret not configured"):
            verifier.verify(b"", timestamp, verifier.compute_signature(timestamp, b""))

    def test_interactor_without_github(self) -> None:
        settings = Settings()
        resolver = get_repository_resolver(MagicMock(), settings, None)

        interactor = get_dispatch_command_interactor(resolver, MagicMock(), None)

        assert isinstance(interactor, DispatchCommandInteractor)
        assert resolver.is_enrichable("https://github.com/o/r") is True
