"""GitHub REST API Client.

SourceHostingGateway, WorkflowTriggerGateway 포트의 구현체입니다.

API:
    - GET  /repos/{owner}/{repo}                         저장소 정보
    - GET  /repos/{owner}/{repo}/actions/workflows        워크플로 목록
    - POST /repos/{owner}/{repo}/actions/workflows/{file}/dispatches
"""

from __future__ import annotations

import logging
import posixpath
from typing import Any

import httpx

from apps.chatops.application.repository.dto import RepositoryDetails
from apps.chatops.application.repository.exceptions import EnrichmentError
from apps.chatops.domain.entities import Pipeline
from apps.chatops.domain.value_objects import (
    CommandResult,
    RepositoryLocator,
    WorkflowTrigger,
)

logger = logging.getLogger(__name__)

TRIGGER_SUCCESS_MESSAGE = "Workflow triggered successfully"


class GitHubClient:
    """GitHub API HTTP 클라이언트.

    Attributes:
        DEFAULT_API_URL: GitHub REST API 기본 URL
        DEFAULT_TIMEOUT: 기본 타임아웃 (초)
        API_VERSION: X-GitHub-Api-Version 헤더 값
    """

    DEFAULT_API_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 10.0
    API_VERSION = "2022-11-28"
    WORKFLOWS_PAGE_SIZE = 100

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        default_ref: str = "main",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """초기화.

        Args:
            token: GitHub 액세스 토큰
            api_url: API 기본 URL (GitHub Enterprise 지원)
            timeout: HTTP 타임아웃 (초)
            default_ref: 저장소 기본 브랜치를 모를 때 사용할 ref
            transport: 테스트용 httpx 트랜스포트
        """
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._default_ref = default_ref
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": self.API_VERSION,
                },
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트를 닫습니다."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # ─────────────────────────────────────────────────────────────
    # SourceHostingGateway
    # ─────────────────────────────────────────────────────────────

    async def fetch_repository(self, url: str) -> RepositoryDetails:
        """저장소 메타데이터와 워크플로 목록을 조회합니다.

        Raises:
            EnrichmentError: URL 형식 오류, API 오류, 네트워크 오류, 응답 본문 오류
        """
        locator = RepositoryLocator.parse(url)
        if locator is None:
            raise EnrichmentError(url, "invalid GitHub URL format")

        client = await self._get_client()
        try:
            response = await client.get(f"/repos/{locator.owner}/{locator.name}")
            response.raise_for_status()
            repo_data = response.json()
            if not isinstance(repo_data, dict):
                raise ValueError("repository payload is not an object")

            pipelines = await self._list_workflows(client, locator)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "GitHub API error",
                extra={"url": url, "status_code": e.response.status_code},
            )
            raise EnrichmentError(url, f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed", extra={"url": url, "error": str(e)})
            raise EnrichmentError(url, str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.warning("GitHub returned invalid body", extra={"url": url, "error": str(e)})
            raise EnrichmentError(url, "invalid response body") from e

        return RepositoryDetails(
            name=repo_data.get("name") or locator.name,
            default_branch=repo_data.get("default_branch") or self._default_ref,
            url=repo_data.get("html_url"),
            pipelines=pipelines,
        )

    async def _list_workflows(
        self,
        client: httpx.AsyncClient,
        locator: RepositoryLocator,
    ) -> list[Pipeline]:
        """워크플로 목록을 Link 헤더의 next 페이지까지 모두 조회합니다.

        Raises:
            ValueError: 응답 본문이 JSON 객체가 아닌 경우
        """
        pipelines: list[Pipeline] = []
        page_url: str | None = f"/repos/{locator.owner}/{locator.name}/actions/workflows"
        params: dict[str, Any] | None = {"per_page": self.WORKFLOWS_PAGE_SIZE}

        while page_url:
            response = await client.get(page_url, params=params)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError("workflows payload is not an object")

            pipelines.extend(
                Pipeline(name=item.get("name") or item["path"], path=item["path"])
                for item in data.get("workflows") or []
                if isinstance(item, dict) and item.get("path")
            )
            # next URL에는 per_page가 이미 포함되어 있음
            page_url = response.links.get("next", {}).get("url")
            params = None

        return pipelines

    # ─────────────────────────────────────────────────────────────
    # WorkflowTriggerGateway
    # ─────────────────────────────────────────────────────────────

    async def trigger_workflow(self, trigger: WorkflowTrigger) -> CommandResult:
        """workflow_dispatch 이벤트를 생성합니다.

        실패는 예외 대신 status=error CommandResult로 반환합니다.
        """
        workflow_file = posixpath.basename(trigger.workflow) or trigger.workflow
        owner = trigger.owner or ""
        path = f"/repos/{owner}/{trigger.repository}/actions/workflows/{workflow_file}/dispatches"
        payload = {
            "ref": trigger.ref or self._default_ref,
            "inputs": dict(trigger.parameters),
        }

        try:
            client = await self._get_client()
            response = await client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error(
                "Failed to trigger workflow",
                extra={
                    "repository": trigger.repository,
                    "workflow": trigger.workflow,
                    "error": str(e),
                },
            )
            cause = str(e) or type(e).__name__
            return CommandResult.error(f"Failed to trigger workflow: {cause}")

        if response.status_code >= 400:
            logger.warning(
                "Workflow trigger rejected",
                extra={
                    "repository": trigger.repository,
                    "workflow": trigger.workflow,
                    "status_code": response.status_code,
                },
            )
            return CommandResult.error(
                f"Failed to trigger workflow: HTTP {response.status_code}"
            )

        return CommandResult.success(TRIGGER_SUCCESS_MESSAGE)
