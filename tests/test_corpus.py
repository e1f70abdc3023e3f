from pathlib import Path

import pytest
from wordhint.corpus import (
    ArrayCorpus, MemoryCorpus, SqliteCorpus, clean_words, get_corpus_ids, open_corpus,
)
from wordhint.corpus.sqlite import build_query
from wordhint.datasets import read_lines, default_wordlist
from wordhint.engine import build_request, filter_candidates, filter_words
from wordhint.engine.constraints import LetterConstraintRequest
from wordhint.errors import CorpusUnavailable, InvalidConstraint

SCENARIO = ["apple", "angle", "ankle", "amble"]

REQUESTS = [
    ("a???e", "l", "p"),
    ("?????", "", ""),
    ("????", "", ""),
    ("??a??", "e", "s"),
    ("?????", "q", ""),
    ("l????", "e", "v"),
    ("??????", "t", ""),
    ("s???e", "t", ""),
]


@pytest.fixture(params=["memory", "array", "sqlite"])
def make_corpus(request, tmp_path: Path):
    def _make(words):
        if request.param == "memory":
            return MemoryCorpus(words)
        if request.param == "array":
            return ArrayCorpus(words)
        return SqliteCorpus.from_words(tmp_path / "words.db", words)
    return _make


def test_registry_has_all_backends():
    assert get_corpus_ids() == ["array", "memory", "sqlite"]


def test_clean_words_dedupes_and_normalizes():
    assert clean_words(["Crane", "crane ", "", "c-ane", "raise"]) == ["crane", "raise"]


def test_scenario_every_backend(make_corpus):
    corpus = make_corpus(SCENARIO)
    got = filter_words(corpus, build_request("a???e", "l", "p"))
    assert set(got) == {"angle", "ankle", "amble"}


def test_backends_agree_with_reference_scan(make_corpus):
    words = read_lines(default_wordlist())
    corpus = make_corpus(words)
    assert len(corpus) == len(clean_words(words))
    for exact, required, excluded in REQUESTS:
        req = build_request(exact, required, excluded)
        assert corpus.query(req) == filter_candidates(words, req), req.as_dict()


def test_all_wildcards_every_word_of_length(make_corpus):
    corpus = make_corpus(["able", "bake", "crane", "cake"])
    assert set(corpus.query(build_request("????"))) == {"able", "bake", "cake"}


def test_unknown_length_is_empty(make_corpus):
    corpus = make_corpus(SCENARIO)
    assert corpus.query(build_request("??????????")) == []


def test_filter_words_limit_truncates_in_corpus_order(make_corpus):
    corpus = make_corpus(SCENARIO)
    assert filter_words(corpus, build_request("?????"), limit=2) == ["apple", "angle"]


def test_filter_words_rejects_non_request():
    with pytest.raises(InvalidConstraint):
        filter_words(MemoryCorpus(SCENARIO), {"exact": "a???e"})


def test_filter_words_translates_os_errors():
    class Broken:
        def query(self, request):
            raise ConnectionError("backend down")

    with pytest.raises(CorpusUnavailable):
        filter_words(Broken(), build_request("?????"))


def test_sqlite_missing_database_is_unavailable(tmp_path: Path):
    corpus = SqliteCorpus(tmp_path / "nope.db")
    with pytest.raises(CorpusUnavailable):
        filter_words(corpus, build_request("?????"))
    assert not (tmp_path / "nope.db").exists()


def test_sqlite_query_is_parameterized():
    sql, params = build_query(build_request("a???e", "l", "p"))
    assert "'" not in sql and "a___e" not in sql
    assert params == [5, "a___e", "l", "p"]


def test_open_corpus_builds_sqlite_next_to_list(tmp_path: Path):
    src = tmp_path / "words.txt"
    src.write_text("\n".join(SCENARIO) + "\n", encoding="utf-8")
    corpus = open_corpus("sqlite", src)
    assert isinstance(corpus, SqliteCorpus)
    assert (tmp_path / "words.db").exists()
    assert len(open_corpus("sqlite", src)) == 4


def test_open_corpus_unknown_kind():
    with pytest.raises(ValueError):
        open_corpus("trie", default_wordlist())


def test_hand_built_uppercase_request_every_backend(make_corpus):
    corpus = make_corpus(SCENARIO)
    req = LetterConstraintRequest(exact=(None,) * 5, excluded=frozenset("P"))
    assert filter_words(corpus, req) == ["angle", "ankle", "amble"]
    req = LetterConstraintRequest(exact=("A", None, None, None, None), required=frozenset("K"))
    assert filter_words(corpus, req) == ["ankle"]


@pytest.mark.parametrize("dirname", ["my#words", "what?words", "100%words"])
def test_sqlite_path_with_uri_characters(tmp_path: Path, dirname):
    corpus = SqliteCorpus.from_words(tmp_path / dirname / "w.db", SCENARIO)
    assert len(corpus) == 4
    assert corpus.query(build_request("a???e", "l", "p")) == ["angle", "ankle", "amble"]
