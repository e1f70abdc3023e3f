"""
wordhint -- letter-constraint word filter for word-guessing games.

Public API::

    from wordhint.engine import build_request, filter_words
    from wordhint.corpus import MemoryCorpus, open_corpus
    from wordhint.service import create_app
"""

__version__ = "0.1.0"
