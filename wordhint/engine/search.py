"""
Run one letter-constraint request against a word corpus.

This is the entry point the service and the CLI call. It does three things:
  - reject anything that isn't a valid LetterConstraintRequest up front
  - issue exactly one corpus query
  - apply the optional result cap (bounded, not fatal: truncate + warn)

It holds no state between calls, so concurrent calls need no coordination.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from wordhint.errors import CorpusUnavailable, InvalidConstraint
from .constraints import LetterConstraintRequest

logger = logging.getLogger(__name__)


def filter_words(corpus, request: LetterConstraintRequest, *,
                 limit: Optional[int] = None) -> List[str]:
    """
    Return every corpus word satisfying `request`, in corpus order.

    Args:
      corpus  : any object with query(request) -> list[str] (see wordhint.corpus)
      request : a validated LetterConstraintRequest
      limit   : optional cap on the number of words returned

    Raises:
      InvalidConstraint : request is not a LetterConstraintRequest / empty exact
      CorpusUnavailable : the corpus could not be queried
    """
    if not isinstance(request, LetterConstraintRequest):
        raise InvalidConstraint(f"expected LetterConstraintRequest, got {type(request).__name__}")
    if not request.exact:
        raise InvalidConstraint("exact must contain at least one position")
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be >= 1; got {limit}")

    try:
        words = corpus.query(request)
    except CorpusUnavailable:
        raise
    except OSError as e:
        logger.exception("Corpus query failed for %s", request.as_dict())
        raise CorpusUnavailable(str(e)) from e

    if limit is not None and len(words) > limit:
        logger.warning("Truncating %d matches to %d for %s",
                       len(words), limit, request.as_dict())
        words = words[:limit]
    return list(words)
