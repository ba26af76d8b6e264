"""PipelineSelector 단위 테스트."""

from __future__ import annotations

import pytest

from apps.chatops.domain.entities import Pipeline
from apps.chatops.domain.services import AskUser, NoPipelines, PipelineSelector, RunPipeline


@pytest.fixture
def selector() -> PipelineSelector:
    return PipelineSelector()


class TestPipelineSelector:
    """파이프라인 선택 결정표 테스트."""

    def test_empty_list_returns_no_pipelines(self, selector: PipelineSelector) -> None:
        assert selector.select([]) == NoPipelines()

    def test_single_default_runs_it(self, selector: PipelineSelector) -> None:
        """기본값이 정확히 하나면 해당 파이프라인 실행."""
        a = Pipeline(name="A", path="a.yml")
        b = Pipeline(name="B", path="b.yml", is_default=True)

        decision = selector.select([a, b])

        assert isinstance(decision, RunPipeline)
        assert decision.pipeline is b

    def test_single_non_default_asks_user(self, selector: PipelineSelector) -> None:
        """파이프라인이 하나여도 기본값이 아니면 선택 요청."""
        a = Pipeline(name="A", path="a.yml")

        decision = selector.select([a])

        assert decision == AskUser((a,))

    def test_no_defaults_asks_user_in_original_order(self, selector: PipelineSelector) -> None:
        a = Pipeline(name="A", path="a.yml")
        b = Pipeline(name="B", path="b.yml")
        c = Pipeline(name="C", path="c.yml")

        decision = selector.select([c, a, b])

        assert isinstance(decision, AskUser)
        assert [p.name for p in decision.pipelines] == ["C", "A", "B"]

    def test_multiple_defaults_asks_user(self, selector: PipelineSelector) -> None:
        """기본값이 둘 이상이면 임의로 고르지 않음."""
        a = Pipeline(name="A", path="a.yml", is_default=True)
        b = Pipeline(name="B", path="b.yml", is_default=True)

        decision = selector.select([a, b])

        assert isinstance(decision, AskUser)
        assert decision.pipelines == (a, b)

    def test_select_is_pure(self, selector: PipelineSelector) -> None:
        pipelines = [Pipeline(name="A", path="a.yml", is_default=True)]

        first = selector.select(pipelines)
        second = selector.select(pipelines)

        assert first == second
        assert pipelines[0].is_default is True
