"""Shared fixtures: record factory, fake classifier and session reset."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from site_architect.agents.architecture_classifier import (
    ArchitectureClassifierInput,
    ArchitectureClassifierOutput,
)
from site_architect.schemas.keyword import ClassifiedKeyword, KeywordClassification
from site_architect.services.analysis_session import reset_analysis_session


def make_record(keyword: str, **overrides: Any) -> ClassifiedKeyword:
    """Build a classified keyword with sensible defaults."""
    payload: dict[str, Any] = {
        "keyword": keyword,
        "translation": f"{keyword} (tr)",
        "volume": 0,
        "intent": "Collection",
        "parent_topic": "Artificial Flowers",
        "pillar": "Flowers",
        "primary_variant": keyword,
        "relation": "Primary",
        "content_strategy": "Category page",
        "confidence_score": 90,
    }
    payload.update(overrides)
    return ClassifiedKeyword.model_validate(payload)


class FakeClassifier:
    """Classifier double that records calls and returns canned classifications."""

    def __init__(
        self,
        classifications: list[KeywordClassification] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.classifications = classifications
        self.error = error
        self.calls: list[ArchitectureClassifierInput] = []

    async def run(self, input_data: ArchitectureClassifierInput) -> ArchitectureClassifierOutput:
        self.calls.append(input_data)
        if self.error is not None:
            raise self.error
        if self.classifications is not None:
            return ArchitectureClassifierOutput(keywords=self.classifications)
        return ArchitectureClassifierOutput(
            keywords=[
                KeywordClassification(
                    keyword=item.term,
                    translation=item.term,
                    intent="Collection",
                    parent_topic="Theme",
                    pillar="Pillar",
                    primary_variant=item.term,
                    relation="Primary",
                    content_strategy="Page",
                    confidence_score=80,
                )
                for item in input_data.keywords
            ]
        )


@pytest.fixture
def record_factory() -> Callable[..., ClassifiedKeyword]:
    return make_record


@pytest.fixture(autouse=True)
def _fresh_analysis_session() -> Iterator[None]:
    reset_analysis_session()
    yield
    reset_analysis_session()


@pytest.fixture
def fake_classifier_cls() -> type[FakeClassifier]:
    return FakeClassifier
