"""Architecture classifier agent: intent, translation and Theme/Pillar/Page labels."""

import logging

from pydantic import BaseModel, Field

from site_architect.agents.base_agent import BaseAgent
from site_architect.config import settings
from site_architect.schemas.keyword import KeywordClassification, KeywordInput

logger = logging.getLogger(__name__)


class ArchitectureClassifierInput(BaseModel):
    """Input for architecture classifier agent."""

    keywords: list[KeywordInput]
    translation_language: str = Field(default_factory=lambda: settings.translation_language)


class ArchitectureClassifierOutput(BaseModel):
    """Output from architecture classifier agent."""

    keywords: list[KeywordClassification]


class ArchitectureClassifierAgent(
    BaseAgent[ArchitectureClassifierInput, ArchitectureClassifierOutput]
):
    """Agent that plans a site architecture from a keyword list.

    Every keyword is labelled with:
    - Search intent (Product / Collection / Article) as judged from the SERP
    - Theme (level 1), pillar (level 2) and canonical page (level 3)
    - Whether it is the page's primary keyword, a synonym or a long-tail variant

    Search volume is not produced here; it is reattached from the input.
    """

    model_tier = "fast"
    temperature = 0.2

    @property
    def system_prompt(self) -> str:
        return """You are an SEO site architecture expert. Using the logic of Google's SERPs, organise keywords into a site architecture map.

Core task: **URL canonicalization**.
Many keywords are synonyms (for example "fake flowers" and "artificial flowers") and must map to the **same page**.

Build this structure:
1. **Theme (parent_topic)**: top-level hub category (Level 1).
2. **Pillar (pillar)**: sub-category inside the theme (Level 2).
3. **Page (primary_variant)**: the URL a visitor actually lands on. From each group of synonyms pick the keyword with the highest search volume, or the most precise one, as the canonical primary_variant.
4. **Keywords**: every keyword that belongs to the page, including the primary keyword itself and its synonyms.

Intent rules (simulate the SERP):
- Collection: broad term, the searcher wants to browse a list.
- Product: specific commercial term, the searcher wants to buy.
- Article: informational term (how to, best of, vs).

Output rules:
- Keep every keyword exactly as it was given.
- All synonyms of one page **must share the same primary_variant**, and it must equal one of their keywords.
- relation: the chosen keyword is "Primary", the others are "Synonym" or "LongTail".
- confidence_score is an integer from 0 to 100.
- content_strategy is one short sentence describing the page's content approach."""

    @property
    def output_type(self) -> type[ArchitectureClassifierOutput]:
        return ArchitectureClassifierOutput

    def _build_prompt(self, input_data: ArchitectureClassifierInput) -> str:
        logger.info(
            "Building architecture classification prompt",
            extra={
                "keyword_count": len(input_data.keywords),
                "translation_language": input_data.translation_language,
            },
        )
        keywords_text = "\n".join(
            f"{keyword.term} (Volume: {keyword.volume or 'N/A'})"
            for keyword in input_data.keywords
        )

        return f"""Plan the site architecture for the following keywords. Identify synonyms and group them under the same page (primary_variant):

{keywords_text}

For each keyword, provide:
1. keyword (unchanged)
2. translation into {input_data.translation_language}
3. parent_topic (theme)
4. pillar
5. primary_variant (canonical page keyword)
6. relation (Primary / Synonym / LongTail)
7. intent (Product / Collection / Article)
8. content_strategy
9. confidence_score (0-100)

Return all keywords in a single structured response."""
