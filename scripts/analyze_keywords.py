"""Plan a Theme -> Pillar -> Page site architecture from a keyword list."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from site_architect.core.exceptions import ClassificationError, KeywordInputError
from site_architect.core.logging import setup_logging
from site_architect.schemas.architecture import IntentFilter, ThemeGroup
from site_architect.services.analysis_session import AnalysisSession
from site_architect.services.classification import KeywordClassifier
from site_architect.services.export import export_csv
from site_architect.services.hierarchy import build_hierarchy
from site_architect.services.keyword_input import SAMPLE_INPUT_TEXT, parse_keyword_text
from site_architect.services.result_view import confidence_band, summarize_results

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Keyword file, one `term<TAB>volume` per line (default: stdin)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in sample keyword list instead of INPUT",
    )
    parser.add_argument(
        "--intent",
        choices=[item.value for item in IntentFilter],
        default=IntentFilter.ALL.value,
        help="Only show keywords with this intent (default: ALL)",
    )
    parser.add_argument(
        "--csv",
        dest="csv_path",
        help="Also write the flat CSV export to this path",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the architecture as JSON instead of a tree",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for site_architect loggers (default: WARNING)",
    )
    return parser.parse_args(argv)


def read_input_text(args: argparse.Namespace) -> str:
    """Resolve the raw keyword text from --sample, a file, or stdin."""
    if args.sample:
        return SAMPLE_INPUT_TEXT
    if args.input == "-":
        return sys.stdin.read()
    return Path(args.input).read_text(encoding="utf-8")


def render_tree(themes: list[ThemeGroup]) -> str:
    """Render the architecture as an indented text tree."""
    lines: list[str] = []
    for theme in themes:
        lines.append(
            f"{theme.name}  [{theme.health.value}: {theme.health_description}] "
            f"pages={theme.page_count} volume={theme.total_volume:,}"
        )
        for pillar in theme.pillars:
            lines.append(f"  {pillar.name}  volume={pillar.total_volume:,}")
            for page in pillar.pages:
                primary = page.primary
                lines.append(
                    f"    * {primary.keyword} ({primary.volume:,}) "
                    f"{primary.intent.value}, {primary.confidence_score}% "
                    f"{confidence_band(primary.confidence_score)}"
                )
                for synonym in page.synonyms:
                    lines.append(
                        f"        - {synonym.keyword} ({synonym.volume:,}) "
                        f"{synonym.relation.value}"
                    )
    return "\n".join(lines)


async def async_main(
    argv: list[str] | None = None,
    classifier: KeywordClassifier | None = None,
) -> int:
    """Async CLI entrypoint."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        text = read_input_text(args)
    except OSError as exc:
        print(f"Cannot read keyword input: {exc}", file=sys.stderr)
        return 1

    keywords = parse_keyword_text(text)
    session = AnalysisSession()
    try:
        result = await session.run(keywords, classifier)
    except (KeywordInputError, ClassificationError) as exc:
        message = exc.user_message if isinstance(exc, ClassificationError) else exc.message
        print(message, file=sys.stderr)
        return 1

    themes = build_hierarchy(result.records, IntentFilter(args.intent))
    if args.json:
        print(json.dumps([theme.model_dump(mode="json") for theme in themes], indent=2, ensure_ascii=False))
    else:
        summary = summarize_results(result.records)
        print(
            f"{summary.theme_count} themes, {summary.pillar_count} pillars, "
            f"{summary.page_count} pages, {summary.hub_count} hub collections\n"
        )
        print(render_tree(themes))

    if args.csv_path:
        Path(args.csv_path).write_text(export_csv(result.records), encoding="utf-8")
        logger.info("CSV export written", extra={"path": args.csv_path})
    return 0


def main() -> int:
    """Sync wrapper."""
    return asyncio.run(async_main())


if __name__ == "__main__":
    raise SystemExit(main())
