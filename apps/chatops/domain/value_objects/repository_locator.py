"""RepositoryLocator value object - host/owner/name parsed from a URL."""

from __future__ import annotations

import re
from dataclasses import dataclass

# https://github.com/org/repo(.git), ssh://git@github.com/org/repo.git
_URL_PATTERN = re.compile(
    r"^(?:https?|ssh|git)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/"
    r"(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"
)
# git@github.com:org/repo.git
_SCP_PATTERN = re.compile(
    r"^[^@/]+@(?P<host>[^:/]+):(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"
)


@dataclass(frozen=True, slots=True)
class RepositoryLocator:
    """저장소 URL에서 추출한 위치 정보."""

    host: str
    owner: str
    name: str

    @classmethod
    def parse(cls, url: str) -> RepositoryLocator | None:
        """HTTPS/SSH 저장소 URL을 파싱합니다.

        owner/name 경로가 없는 URL이면 None을 반환합니다.
        """
        candidate = (url or "").strip()
        match = _URL_PATTERN.match(candidate) or _SCP_PATTERN.match(candidate)
        if match is None:
            return None
        return cls(
            host=match.group("host").lower(),
            owner=match.group("owner"),
            name=match.group("name"),
        )

    def is_hosted_on(self, hosts: tuple[str, ...] | list[str]) -> bool:
        """주어진 호스트(또는 www. 접두어 변형)에 속하는지 확인합니다."""
        host = self.host.removeprefix("www.")
        return host in {h.lower() for h in hosts}

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
