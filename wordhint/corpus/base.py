from __future__ import annotations

from typing import Dict, Iterable, List, Type

from wordhint.engine.constraints import LetterConstraintRequest
from wordhint.engine.validation import normalize_word

# ---- Global backend registry ----
REGISTRY: Dict[str, Type["WordCorpus"]] = {}


def register(cls: Type["WordCorpus"]) -> Type["WordCorpus"]:
    """
    Decorator: @register on a corpus class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate corpus id: {cid}")
    REGISTRY[cid] = cls
    return cls


def clean_words(words: Iterable[str]) -> List[str]:
    """
    Canonicalize a raw word list: lowercase a-z tokens only, first occurrence
    wins (order preserved).
    """
    seen = set()
    out: List[str] = []
    for raw in words:
        w = normalize_word(raw)
        if w is None or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


# ---- Base class that backends inherit ----
class WordCorpus:
    """
    A read-only collection of lowercase words that can answer one question:
    which words satisfy this LetterConstraintRequest?

    Subclasses implement `query` and `__len__`. They must agree exactly with
    wordhint.engine.constraints.matches, whatever indexing they use.
    """
    id = "base"
    name = "Base"

    def query(self, request: LetterConstraintRequest) -> List[str]:
        raise NotImplementedError("Override in subclass")

    def __len__(self) -> int:
        raise NotImplementedError("Override in subclass")
