"""
Schemas for influence-map endpoints.

POST /v1/influence-map - Highlight the phrases the analysis flagged in an article body
POST /v1/influence-map/html - Same, rendered as an HTML fragment
POST /v1/articles/influence-map - Same, from a dashboard Article payload
GET /v1/influence-map/categories - The section -> category colour table
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bias_review.services.influence_map import Category, HighlightEntry, InfluenceMap, Segment


class CategoryResponse(BaseModel):
    """A visual category (colour + label) for one analysis section."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Section name the category is keyed by")
    label: str = Field(..., description="Display label for tooltips and the legend")
    background: str = Field(..., description="Highlight tint (CSS rgba)")
    underline: str = Field(..., description="Highlight underline colour (CSS hex)")
    dot: str = Field(..., description="Legend dot colour (CSS hex)")
    is_fallback: bool = Field(False, description="True for the neutral FLAGGED category")


class HighlightEntryResponse(BaseModel):
    """A flagged phrase with its category and the reason it was flagged."""

    phrase: str = Field(..., description="Phrase as quoted in the analysis")
    section: str = Field(..., description="Analysis section the phrase was quoted under")
    reason: str = Field(..., description="Snippet of the analysis explaining the flag")
    category: CategoryResponse

    @classmethod
    def from_entry(cls, entry: HighlightEntry) -> "HighlightEntryResponse":
        return cls(
            phrase=entry.phrase,
            section=entry.section,
            reason=entry.reason,
            category=CategoryResponse.model_validate(entry.category),
        )


class SegmentResponse(BaseModel):
    """A contiguous slice of the article body."""

    kind: str = Field(..., description="plain|highlight")
    text: str = Field(..., description="Exact slice of the body")
    start: int = Field(..., description="Start offset in the body")
    end: int = Field(..., description="End offset in the body (exclusive)")
    entry: HighlightEntryResponse | None = Field(None, description="Set on highlighted segments only")

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentResponse":
        return cls(
            kind=segment.kind.value,
            text=segment.text,
            start=segment.start,
            end=segment.end,
            entry=HighlightEntryResponse.from_entry(segment.entry) if segment.entry else None,
        )


class InfluenceMapRequest(BaseModel):
    """Article body plus the two analysis texts."""

    content: str = Field("", description="Article body")
    bias_explanation: str = Field("", description="Bias explanation analysis text")
    behavioural_analysis: str = Field("", description="Behavioural analysis text")


class InfluenceMapResponse(BaseModel):
    """Annotated article body."""

    entries: list[HighlightEntryResponse] = Field(
        default_factory=list, description="Deduplicated flagged phrases"
    )
    segments: list[SegmentResponse] = Field(
        default_factory=list, description="Ordered segments that concatenate to the body"
    )
    legend: list[CategoryResponse] = Field(
        default_factory=list, description="Categories present in the analysis, unique by label"
    )
    highlight_count: int = Field(0, description="Number of highlighted segments")
    summary: str = Field(..., description="Sub-heading for the influence map card")

    @classmethod
    def from_influence_map(cls, influence_map: InfluenceMap) -> "InfluenceMapResponse":
        return cls(
            entries=[HighlightEntryResponse.from_entry(e) for e in influence_map.entries],
            segments=[SegmentResponse.from_segment(s) for s in influence_map.segments],
            legend=[CategoryResponse.model_validate(c) for c in influence_map.legend],
            highlight_count=influence_map.highlight_count,
            summary=influence_map.summary,
        )


class InfluenceMapHtmlResponse(BaseModel):
    """Rendered influence map fragment."""

    html: str = Field(..., description="HTML fragment (empty when there is no body)")
    summary: str = Field(..., description="Sub-heading for the influence map card")


class CategoryTableResponse(BaseModel):
    """The fixed section -> category table."""

    categories: list[CategoryResponse] = Field(default_factory=list, description="One row per recognized header")
    fallback: CategoryResponse = Field(..., description="Category used for unrecognized sections")


class ArticleInfluenceMapRequest(BaseModel):
    """
    Article as delivered by the dashboard's article store.

    Accepts both snake_case and the dashboard's camelCase field names.
    Scores are carried through unvalidated; only content and the two
    analysis texts feed the influence map.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Article ID")
    headline: str = Field("", description="Article headline")
    publisher: str = Field("", description="Publisher name")
    date: datetime | None = Field(None, description="Publish date")
    content: str = Field("", description="Article body")

    political_leaning: float | None = Field(None, alias="politicalLeaning")
    emotional_intensity: float | None = Field(None, alias="emotionalIntensity")
    tribal_activation: float | None = Field(None, alias="tribalActivation")
    threat_signal: float | None = Field(None, alias="threatSignal")
    sensationalism: float | None = None
    group_conflict: float | None = Field(None, alias="groupConflict")

    bias_explanation: str = Field("", alias="biasExplanation")
    behavioural_analysis: str = Field("", alias="behaviouralAnalysis")
    highlighted_sentences: list[str] = Field(default_factory=list, alias="highlightedSentences")


class ArticleInfluenceMapResponse(BaseModel):
    """Influence map for one dashboard article."""

    article_id: str = Field(..., description="Article ID")
    headline: str = Field("", description="Article headline")
    influence_map: InfluenceMapResponse


def category_rows(categories: list[Category]) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in categories]
