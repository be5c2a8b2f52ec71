"""Keyword schemas."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator


class IntentType(str, Enum):
    """Page intent assigned by the classifier."""

    PRODUCT = "Product"
    COLLECTION = "Collection"
    ARTICLE = "Article"
    UNKNOWN = "Unknown"

    @classmethod
    def coerce(cls, value: object) -> "IntentType":
        """Map a raw classifier value onto a known intent, defaulting to UNKNOWN."""
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower()
        for member in cls:
            if raw in (member.value.lower(), member.name.lower()):
                return member
        return cls.UNKNOWN


class KeywordRelation(str, Enum):
    """Role of a keyword within its page."""

    PRIMARY = "Primary"
    SYNONYM = "Synonym"
    LONG_TAIL = "LongTail"

    @classmethod
    def coerce(cls, value: object) -> "KeywordRelation":
        """Map a raw classifier value onto a known relation, defaulting to SYNONYM."""
        if isinstance(value, cls):
            return value
        raw = str(value or "").strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        for member in cls:
            if raw in (member.value.lower(), member.name.lower().replace("_", "")):
                return member
        return cls.SYNONYM


class KeywordInput(BaseModel):
    """One keyword line with its monthly search volume."""

    term: str = Field(min_length=1)
    volume: int = Field(default=0, ge=0)

    @field_validator("term", mode="before")
    @classmethod
    def _strip_term(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("volume", mode="before")
    @classmethod
    def _default_volume(cls, value: object) -> object:
        return 0 if value is None else value


class KeywordClassification(BaseModel):
    """Classifier output for a single keyword (volume is filled in afterwards)."""

    keyword: str = Field(default="", description="The keyword exactly as it was given")
    translation: str = Field(default="", description="Translation of the keyword")
    intent: IntentType = Field(
        default=IntentType.UNKNOWN,
        description="Product, Collection, or Article",
    )
    parent_topic: str = Field(
        default="",
        validation_alias=AliasChoices("parent_topic", "parentTopic"),
        description="Level 1 theme (topic cluster)",
    )
    pillar: str = Field(default="", description="Level 2 pillar (sub-category) within the theme")
    primary_variant: str = Field(
        default="",
        validation_alias=AliasChoices("primary_variant", "primaryVariant"),
        description="Level 3 canonical page keyword shared by all synonyms of the page",
    )
    relation: KeywordRelation = Field(
        default=KeywordRelation.SYNONYM,
        description="Primary, Synonym, or LongTail",
    )
    content_strategy: str = Field(
        default="",
        validation_alias=AliasChoices("content_strategy", "contentStrategy"),
        description="Short content strategy for the page",
    )
    confidence_score: int = Field(
        default=0,
        ge=0,
        le=100,
        validation_alias=AliasChoices("confidence_score", "confidenceScore"),
        description="Confidence 0-100",
    )

    @field_validator("intent", mode="before")
    @classmethod
    def _coerce_intent(cls, value: object) -> IntentType:
        return IntentType.coerce(value)

    @field_validator("relation", mode="before")
    @classmethod
    def _coerce_relation(cls, value: object) -> KeywordRelation:
        return KeywordRelation.coerce(value)

    @field_validator("keyword", "parent_topic", "pillar", "primary_variant", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class ClassifiedKeyword(KeywordClassification):
    """Classified keyword with its search volume reattached from the input."""

    volume: int = Field(default=0, ge=0)

    @field_validator("volume", mode="before")
    @classmethod
    def _default_volume(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def page_key(self) -> str:
        """Canonical page this keyword folds into."""
        return self.primary_variant or self.keyword
