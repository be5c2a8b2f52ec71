"""Unit tests for the analysis and architecture HTTP endpoints."""

from __future__ import annotations

import csv
import io
from typing import Any

from fastapi import FastAPI
from fastapi.testclient import TestClient

from site_architect.api.v1.analysis.constants import ANALYSIS_NOT_FOUND_DETAIL
from site_architect.api.v1.dependencies import get_keyword_classifier
from site_architect.config import settings
from site_architect.core.exceptions import ClassificationError
from site_architect.main import create_app
from site_architect.schemas.keyword import KeywordClassification
from site_architect.services.export import EXPORT_FILENAME, EXPORT_HEADERS

API = settings.api_v1_prefix

PASTED_TEXT = "fake flowers\t18100\nfaux flowers\t6600\nartificial rose\t390\nhow to clean fake flowers\t500"


def _classifications() -> list[KeywordClassification]:
    base = {
        "translation": "",
        "parent_topic": "Artificial Flowers",
        "content_strategy": "",
        "confidence_score": 90,
    }
    return [
        KeywordClassification(
            keyword="faux flowers",
            intent="Collection",
            pillar="Flowers",
            primary_variant="fake flowers",
            relation="Synonym",
            **base,
        ),
        KeywordClassification(
            keyword="fake flowers",
            intent="Collection",
            pillar="Flowers",
            primary_variant="fake flowers",
            relation="Primary",
            **base,
        ),
        KeywordClassification(
            keyword="artificial rose",
            intent="Product",
            pillar="Single Stems",
            primary_variant="artificial rose",
            relation="Primary",
            **base,
        ),
        KeywordClassification(
            keyword="how to clean fake flowers",
            intent="Article",
            pillar="",
            primary_variant="how to clean fake flowers",
            relation="LongTail",
            **base,
        ),
    ]


def _app_with_classifier(classifier: Any) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_keyword_classifier] = lambda: classifier
    return app


def test_health_endpoint() -> None:
    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": settings.app_version}


def test_sample_endpoint_returns_paste_text() -> None:
    with TestClient(create_app()) as client:
        response = client.get(f"{API}/analysis/sample")

    assert response.status_code == 200
    assert "fake flowers\t18100" in response.json()["text"]


def test_run_analysis_from_text_and_read_views(fake_classifier_cls: Any) -> None:
    classifier = fake_classifier_cls(_classifications())

    with TestClient(_app_with_classifier(classifier)) as client:
        run_response = client.post(f"{API}/analysis", json={"text": PASTED_TEXT})
        list_response = client.get(
            f"{API}/analysis",
            params={"intent": "ALL", "sort": "volume", "direction": "desc"},
        )
        product_response = client.get(f"{API}/analysis", params={"intent": "Product"})
        architecture_response = client.get(f"{API}/analysis/architecture")
        summary_response = client.get(f"{API}/analysis/summary")

    assert run_response.status_code == 200
    payload = run_response.json()
    assert [(k["keyword"], k["volume"]) for k in payload["keywords"]] == [
        ("faux flowers", 6600),
        ("fake flowers", 18100),
        ("artificial rose", 390),
        ("how to clean fake flowers", 500),
    ]
    assert payload["summary"]["theme_count"] == 1
    assert payload["summary"]["page_count"] == 3
    assert len(classifier.calls) == 1

    assert list_response.status_code == 200
    assert [item["keyword"] for item in list_response.json()["items"]] == [
        "fake flowers",
        "faux flowers",
        "how to clean fake flowers",
        "artificial rose",
    ]
    assert [item["keyword"] for item in product_response.json()["items"]] == ["artificial rose"]

    themes = architecture_response.json()["themes"]
    assert len(themes) == 1
    assert themes[0]["health"] == "Medium"
    assert [pillar["name"] for pillar in themes[0]["pillars"]] == [
        "Flowers",
        "General",
        "Single Stems",
    ]
    flowers_page = themes[0]["pillars"][0]["pages"][0]
    assert flowers_page["primary"]["keyword"] == "fake flowers"
    assert [s["keyword"] for s in flowers_page["synonyms"]] == ["faux flowers"]

    summary = summary_response.json()
    assert summary["summary"]["hub_count"] == 1
    assert [b["intent"] for b in summary["intent_distribution"]] == [
        "Product",
        "Collection",
        "Article",
    ]


def test_run_analysis_accepts_parsed_keywords(fake_classifier_cls: Any) -> None:
    classifier = fake_classifier_cls()

    with TestClient(_app_with_classifier(classifier)) as client:
        response = client.post(
            f"{API}/analysis",
            json={"keywords": [{"term": " fake plants ", "volume": 18100}]},
        )

    assert response.status_code == 200
    assert response.json()["keywords"][0]["volume"] == 18100


def test_run_analysis_rejects_empty_and_oversized_input(fake_classifier_cls: Any) -> None:
    classifier = fake_classifier_cls()
    too_many = "\n".join(f"keyword {i}\t{i}" for i in range(101))

    with TestClient(_app_with_classifier(classifier)) as client:
        empty_response = client.post(f"{API}/analysis", json={"text": "   "})
        missing_response = client.post(f"{API}/analysis", json={})
        too_many_response = client.post(f"{API}/analysis", json={"text": too_many})

    assert empty_response.status_code == 400
    assert missing_response.status_code == 400
    assert too_many_response.status_code == 400
    assert "100" in too_many_response.json()["detail"]
    assert classifier.calls == []


def test_run_analysis_classifier_failure_keeps_previous_results(fake_classifier_cls: Any) -> None:
    working = fake_classifier_cls()
    failing = fake_classifier_cls(error=RuntimeError("quota exceeded"))
    app = _app_with_classifier(working)

    with TestClient(app) as client:
        assert client.post(f"{API}/analysis", json={"text": "fake flowers\t10"}).status_code == 200

        app.dependency_overrides[get_keyword_classifier] = lambda: failing
        failed = client.post(f"{API}/analysis", json={"text": "fake plants\t20"})
        still_there = client.get(f"{API}/analysis")

    assert failed.status_code == 502
    assert failed.json()["detail"] == ClassificationError.USER_MESSAGE
    assert [item["keyword"] for item in still_there.json()["items"]] == ["fake flowers"]


def test_views_return_404_before_any_analysis() -> None:
    with TestClient(create_app()) as client:
        responses = [
            client.get(f"{API}/analysis"),
            client.get(f"{API}/analysis/architecture"),
            client.get(f"{API}/analysis/summary"),
            client.get(f"{API}/analysis/export"),
        ]

    assert [response.status_code for response in responses] == [404, 404, 404, 404]
    assert {response.json()["detail"] for response in responses} == {ANALYSIS_NOT_FOUND_DETAIL}


def test_export_and_reset(fake_classifier_cls: Any) -> None:
    with TestClient(_app_with_classifier(fake_classifier_cls(_classifications()))) as client:
        client.post(f"{API}/analysis", json={"text": PASTED_TEXT})
        export_response = client.get(f"{API}/analysis/export")
        reset_response = client.delete(f"{API}/analysis")
        after_reset = client.get(f"{API}/analysis")

    assert export_response.status_code == 200
    assert export_response.headers["content-type"].startswith("text/csv")
    assert EXPORT_FILENAME in export_response.headers["content-disposition"]
    rows = list(csv.reader(io.StringIO(export_response.text)))
    assert rows[0] == EXPORT_HEADERS
    assert len(rows) == 5

    assert reset_response.status_code == 204
    assert after_reset.status_code == 404


def test_build_architecture_is_stateless() -> None:
    records = [
        {
            "keyword": "fake plants",
            "volume": 18100,
            "intent": "Collection",
            "parentTopic": "Artificial Plants",
            "pillar": "Plants",
            "primaryVariant": "fake plants",
            "relation": "Primary",
            "confidenceScore": 90,
        },
        {
            "keyword": "artificial plants",
            "volume": 9900,
            "intent": "Collection",
            "parentTopic": "Artificial Plants",
            "pillar": "Plants",
            "primaryVariant": "fake plants",
            "relation": "Synonym",
            "confidenceScore": 80,
        },
    ]

    with TestClient(create_app()) as client:
        response = client.post(f"{API}/architecture/build", json=records)
        filtered = client.post(
            f"{API}/architecture/build",
            params={"intent": "Article"},
            json=records,
        )
        stored = client.get(f"{API}/analysis")

    assert response.status_code == 200
    theme = response.json()["themes"][0]
    assert theme["name"] == "Artificial Plants"
    assert theme["total_volume"] == 28000
    assert theme["health"] == "Weak"
    assert filtered.json()["themes"] == []
    assert stored.status_code == 404


def test_build_architecture_rejects_out_of_range_confidence() -> None:
    with TestClient(create_app()) as client:
        response = client.post(
            f"{API}/architecture/build",
            json=[{"keyword": "fake plants", "confidence_score": 101}],
        )

    assert response.status_code == 422
