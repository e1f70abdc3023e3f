from .scoring import score
from .constraints import (
    LetterConstraintRequest,
    build_request,
    filter_candidates,
    has_required,
    lacks_excluded,
    matches,
    matches_positions,
)
from .feedback import request_from_feedback
from .search import filter_words

__all__ = [
    "score",
    "LetterConstraintRequest",
    "build_request",
    "filter_candidates",
    "matches",
    "matches_positions",
    "has_required",
    "lacks_excluded",
    "request_from_feedback",
    "filter_words",
]
