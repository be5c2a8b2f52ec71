"""Site architecture schemas (Theme -> Pillar -> Page)."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from site_architect.schemas.keyword import ClassifiedKeyword, IntentType, KeywordInput


class IntentFilter(str, Enum):
    """Intent selection applied before grouping or sorting."""

    ALL = "ALL"
    PRODUCT = IntentType.PRODUCT.value
    COLLECTION = IntentType.COLLECTION.value
    ARTICLE = IntentType.ARTICLE.value
    UNKNOWN = IntentType.UNKNOWN.value

    def matches(self, record: ClassifiedKeyword) -> bool:
        if self is IntentFilter.ALL:
            return True
        return record.intent.value == self.value


class HealthLabel(str, Enum):
    """Qualitative strength of a theme cluster."""

    STRONG = "Strong"
    MEDIUM = "Medium"
    WEAK = "Weak"

    @property
    def description(self) -> str:
        match self:
            case HealthLabel.STRONG:
                return "Authoritative cluster, structurally complete"
            case HealthLabel.MEDIUM:
                return "Growing cluster, room to expand"
            case HealthLabel.WEAK:
                return "Thin content, consider merging"


SortKey = Literal["keyword", "volume", "confidence_score"]
SortDirection = Literal["asc", "desc"]


class Page(BaseModel):
    """One canonical page: a primary keyword plus the synonyms folded into it."""

    page_key: str
    primary: ClassifiedKeyword
    synonyms: list[ClassifiedKeyword] = Field(default_factory=list)

    @property
    def records(self) -> list[ClassifiedKeyword]:
        return [self.primary, *self.synonyms]

    @property
    def total_volume(self) -> int:
        return sum(record.volume for record in self.records)


class PillarGroup(BaseModel):
    """Level 2 grouping of pages inside a theme."""

    name: str
    total_volume: int = 0
    pages: list[Page] = Field(default_factory=list)


class ThemeGroup(BaseModel):
    """Level 1 topic cluster."""

    name: str
    total_volume: int = 0
    page_count: int = 0
    health: HealthLabel
    health_description: str = ""
    pillars: list[PillarGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fill_health_description(self) -> "ThemeGroup":
        if not self.health_description:
            self.health_description = self.health.description
        return self


class ArchitectureResponse(BaseModel):
    """Ordered themes for one intent selection."""

    intent: IntentFilter
    themes: list[ThemeGroup]


class IntentBucket(BaseModel):
    """Keyword count for one intent, with its display color."""

    intent: IntentType
    count: int
    color: str


class AnalysisSummary(BaseModel):
    """Headline numbers for a completed analysis."""

    keyword_count: int = 0
    total_volume: int = 0
    theme_count: int = 0
    pillar_count: int = 0
    page_count: int = 0
    hub_count: int = 0


class AnalysisSummaryResponse(BaseModel):
    """Summary plus intent distribution."""

    summary: AnalysisSummary
    intent_distribution: list[IntentBucket]


class AnalyzeRequest(BaseModel):
    """Analysis request: raw pasted text or already-parsed keywords."""

    text: str | None = None
    keywords: list[KeywordInput] | None = None


class AnalysisResponse(BaseModel):
    """Result of a completed analysis."""

    keywords: list[ClassifiedKeyword]
    summary: AnalysisSummary


class KeywordListResponse(BaseModel):
    """Flat, filtered and sorted keyword list."""

    items: list[ClassifiedKeyword]
    total: int
    intent: IntentFilter
    sort: SortKey
    direction: SortDirection
