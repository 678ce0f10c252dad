from dataclasses import dataclass


@dataclass(frozen=True)
class DiscussionPreview:
    """DTO for a teaser thread shown on the public landing page."""
    id: int
    title: str
    summary: str
    field: str
    votes: int
    replies: int


FEATURED_DISCUSSIONS = (
    DiscussionPreview(
        id=1,
        title="How can we model inflation expectations in emerging markets?",
        summary="Looking for papers or models that connect survey-based expectations with market-implied measures.",
        field="Economics / Finance",
        votes=27,
        replies=9,
    ),
    DiscussionPreview(
        id=2,
        title="Best resources to start with measure-theoretic probability?",
        summary="I finished a standard probability course and want to prepare for graduate-level stochastic processes.",
        field="Mathematics",
        votes=34,
        replies=12,
    ),
    DiscussionPreview(
        id=3,
        title="Datasets for studying the impact of air pollution on cardiovascular health?",
        summary="Preferably open-source datasets that connect air quality indices with hospital admissions.",
        field="Environmental Science",
        votes=19,
        replies=6,
    ),
)
