"""Dependency injection setup."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.chatops.application.command.services import CommandParser
from apps.chatops.application.dispatch.commands import DispatchCommandInteractor
from apps.chatops.application.repository.services import RepositoryResolver
from apps.chatops.domain.services import PipelineSelector
from apps.chatops.infrastructure.github import GitHubClient
from apps.chatops.infrastructure.persistence_postgres.adapters import (
    SqlaRepositoryCommandGateway,
    SqlaRepositoryQueryGateway,
    SqlaTransactionManager,
)
from apps.chatops.infrastructure.persistence_postgres.session import get_db_session
from apps.chatops.infrastructure.security import SlackSignatureVerifier
from apps.chatops.setup.config import Settings, get_settings

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Infrastructure
@lru_cache
def get_github_client() -> GitHubClient | None:
    """GitHubClient 싱글톤을 반환합니다. 토큰이 없으면 None."""
    settings = get_settings()
    if not settings.github_token:
        return None
    return GitHubClient(
        settings.github_token,
        api_url=settings.github_api_url,
        timeout=settings.github_timeout_seconds,
        default_ref=settings.github_default_ref,
    )


def get_request_verifier(settings: SettingsDep) -> SlackSignatureVerifier:
    """SlackSignatureVerifier 인스턴스를 반환합니다."""
    return SlackSignatureVerifier(
        settings.slack_signing_secret,
        tolerance_seconds=settings.slack_signature_tolerance_seconds,
    )


# Services
def get_command_parser() -> CommandParser:
    """CommandParser 인스턴스를 반환합니다."""
    return CommandParser()


def get_pipeline_selector() -> PipelineSelector:
    """PipelineSelector 인스턴스를 반환합니다."""
    return PipelineSelector()


def get_repository_resolver(
    session: SessionDep,
    settings: SettingsDep,
    github_client: GitHubClient | None = Depends(get_github_client),
) -> RepositoryResolver:
    """RepositoryResolver 인스턴스를 반환합니다."""
    return RepositoryResolver(
        query_gateway=SqlaRepositoryQueryGateway(session),
        command_gateway=SqlaRepositoryCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        source_hosting=github_client,
        enrichable_hosts=settings.enrichable_hosts,
    )


# Commands
def get_dispatch_command_interactor(
    resolver: RepositoryResolver = Depends(get_repository_resolver),
    selector: PipelineSelector = Depends(get_pipeline_selector),
    github_client: GitHubClient | None = Depends(get_github_client),
) -> DispatchCommandInteractor:
    """DispatchCommandInteractor 인스턴스를 반환합니다."""
    return DispatchCommandInteractor(
        resolver=resolver,
        selector=selector,
        workflow_trigger=github_client,
    )
