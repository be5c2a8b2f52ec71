"""Tests for the analyze_keywords CLI."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

import pytest

from scripts import analyze_keywords as cli
from site_architect.schemas.architecture import HealthLabel, Page, PillarGroup, ThemeGroup


@pytest.mark.asyncio
async def test_cli_prints_tree_and_writes_csv(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    fake_classifier_cls: Any,
) -> None:
    input_path = tmp_path / "keywords.tsv"
    input_path.write_text("fake flowers\t18100\nfake plants\t9900\n", encoding="utf-8")
    csv_path = tmp_path / "out.csv"

    exit_code = await cli.async_main(
        [str(input_path), "--csv", str(csv_path)],
        classifier=fake_classifier_cls(),
    )

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "1 themes, 1 pillars, 2 pages" in output
    assert "* fake flowers (18,100)" in output
    rows = list(csv.reader(csv_path.open(encoding="utf-8")))
    assert len(rows) == 3


@pytest.mark.asyncio
async def test_cli_json_output_with_sample(
    capsys: pytest.CaptureFixture[str],
    fake_classifier_cls: Any,
) -> None:
    exit_code = await cli.async_main(["--sample", "--json"], classifier=fake_classifier_cls())

    themes = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert themes[0]["name"] == "Theme"
    assert themes[0]["health"] == "Strong"


@pytest.mark.asyncio
async def test_cli_reports_input_errors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    fake_classifier_cls: Any,
) -> None:
    input_path = tmp_path / "empty.txt"
    input_path.write_text("\n\n", encoding="utf-8")
    classifier = fake_classifier_cls()

    exit_code = await cli.async_main([str(input_path)], classifier=classifier)

    assert exit_code == 1
    assert "at least one keyword" in capsys.readouterr().err
    assert classifier.calls == []


@pytest.mark.asyncio
async def test_cli_reports_missing_input_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    fake_classifier_cls: Any,
) -> None:
    missing = tmp_path / "missing.tsv"
    classifier = fake_classifier_cls()

    exit_code = await cli.async_main([str(missing)], classifier=classifier)

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Cannot read keyword input" in err
    assert "missing.tsv" in err
    assert classifier.calls == []


@pytest.mark.asyncio
async def test_cli_reports_classifier_failure(
    capsys: pytest.CaptureFixture[str],
    fake_classifier_cls: Any,
) -> None:
    exit_code = await cli.async_main(
        ["--sample"],
        classifier=fake_classifier_cls(error=ConnectionError("offline")),
    )

    assert exit_code == 1
    assert "analysis failed" in capsys.readouterr().err


def test_render_tree_lists_synonyms_under_primary(record_factory: Any) -> None:
    primary = record_factory("fake flowers", volume=18100)
    synonym = record_factory(
        "faux flowers", volume=6600, primary_variant="fake flowers", relation="Synonym"
    )
    theme = ThemeGroup(
        name="Artificial Flowers",
        total_volume=24700,
        page_count=1,
        health=HealthLabel.WEAK,
        pillars=[
            PillarGroup(
                name="Flowers",
                total_volume=24700,
                pages=[Page(page_key="fake flowers", primary=primary, synonyms=[synonym])],
            )
        ],
    )

    tree = cli.render_tree([theme]).splitlines()

    assert tree[0].startswith("Artificial Flowers  [Weak:")
    assert tree[2] == "    * fake flowers (18,100) Collection, 90% high"
    assert tree[3] == "        - faux flowers (6,600) Synonym"
