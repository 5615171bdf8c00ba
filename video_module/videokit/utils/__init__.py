from .filters import (
    parse_duration,
    filter_embeddable,
    filter_min_duration,
    deduplicate_candidates,
)
from .scoring import freshness, engagement, relevance_score, rank_candidates, rank

__all__ = [
    "parse_duration",
    "filter_embeddable",
    "filter_min_duration",
    "deduplicate_candidates",
    "freshness",
    "engagement",
    "relevance_score",
    "rank_candidates",
    "rank",
]
