import pytest
from wordhint.engine import (
    build_request, filter_candidates, matches, matches_positions, has_required,
    lacks_excluded, request_from_feedback, score,
)
from wordhint.engine.constraints import LetterConstraintRequest
from wordhint.errors import InvalidConstraint

WORDS = ["apple", "angle", "ankle", "amble", "crane", "able", "bake", "level", "letter"]


# --- request construction ---

def test_build_request_canonicalizes():
    req = build_request("A?_.e", "LL, x", "P")
    assert req.exact == ("a", None, None, None, "e")
    assert req.required == frozenset("lx")
    assert req.excluded == frozenset("p")
    assert req.length == 5
    assert req.pattern == "a???e"
    assert req.pinned == {0: "a", 4: "e"}
    assert req.as_dict() == {"exact": "a???e", "required": "lx", "excluded": "p"}


@pytest.mark.parametrize("exact,required,excluded", [
    ("", "", ""),              # empty pattern
    ("a?1?e", "", ""),         # digit in pattern
    ("a???e", "l!", ""),       # junk in required
    ("a???e", "", "p-"),       # junk in excluded
    ("a???e", "l", "l"),       # required & excluded overlap
    ("a???e", "", "a"),        # pinned letter excluded
])
def test_build_request_rejects(exact, required, excluded):
    with pytest.raises(InvalidConstraint):
        build_request(exact, required, excluded)


def test_direct_construction_still_validates():
    with pytest.raises(InvalidConstraint):
        LetterConstraintRequest(exact=())
    with pytest.raises(InvalidConstraint):
        LetterConstraintRequest(exact=(None,), required=frozenset("a"), excluded=frozenset("a"))


def test_invalid_constraint_is_value_error():
    with pytest.raises(ValueError):
        build_request("")


# --- predicates, one at a time ---

def test_matches_positions():
    req = build_request("a???e")
    assert matches_positions("angle", req)
    assert not matches_positions("crane", req)
    assert not matches_positions("able", req)  # wrong length


def test_has_required_counts_pinned_letters():
    req = build_request("a???e", "ae")
    assert has_required("angle", req)
    assert not has_required("crone", build_request("?????", "a"))


def test_lacks_excluded():
    req = build_request("?????", "", "pz")
    assert lacks_excluded("angle", req)
    assert not lacks_excluded("apple", req)


def test_empty_sets_are_vacuous():
    req = build_request("?????")
    assert all(has_required(w, req) and lacks_excluded(w, req) for w in WORDS)


# --- filtering ---

def test_filter_candidates_scenario():
    req = build_request("a???e", "l", "p")
    assert filter_candidates(WORDS, req) == ["angle", "ankle", "amble"]


def test_all_wildcards_returns_every_word_of_that_length():
    req = build_request("????")
    assert set(filter_candidates(WORDS, req)) == {"able", "bake"}


def test_required_letter_absent_everywhere_is_empty_not_error():
    assert filter_candidates(WORDS, build_request("?????", "q")) == []


def test_case_insensitive_and_hygiene():
    words = ["ANGLE", "  Ankle ", "an-le", "", "amble"]
    assert filter_candidates(words, build_request("A???E", "L")) == ["angle", "ankle", "amble"]


def test_filter_is_sound_and_complete():
    req = build_request("?e???", "l", "r")
    got = set(filter_candidates(WORDS, req))
    for w in WORDS:
        if len(w) != req.length:
            continue
        ok = matches_positions(w, req) and has_required(w, req) and lacks_excluded(w, req)
        assert (w in got) == ok
    assert got == {"level"}


def test_filter_is_idempotent():
    req = build_request("a???e", "l")
    assert filter_candidates(WORDS, req) == filter_candidates(WORDS, req)


# --- scoring (N=5 goldens, duplicates + placements) ---

@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")


# --- feedback -> request ---

def test_request_from_feedback():
    req = request_from_feedback([("raise", "YY--G")], N=5)
    assert req.exact == (None, None, None, None, "e")
    assert req.required == frozenset("rae")
    assert req.excluded == frozenset("is")
    assert matches("crane", req)


def test_request_from_feedback_keeps_letter_with_grey_duplicate():
    # the first two e's of "geese" are grey only because "crane" has a single 'e'
    patt = score("geese", "crane")
    assert patt == "----G"
    req = request_from_feedback([("geese", patt)], N=5)
    assert req.excluded == frozenset("gs")
    assert matches("crane", req)


def test_request_from_feedback_history_is_consistent_with_answer():
    answer = "angle"
    history = [(g, score(g, answer)) for g in ("crane", "amble")]
    req = request_from_feedback(history, N=5)
    assert answer in filter_candidates(WORDS, req)


@pytest.mark.parametrize("history", [
    [("crane", "GGG")],                      # short pattern
    [("cran", "GGGG-")],                     # short guess
    [("crane", "GXY--")],                    # bad mark
    [("crane", "G----"), ("brine", "G----")],  # conflicting greens at 0
])
def test_request_from_feedback_rejects(history):
    with pytest.raises(InvalidConstraint):
        request_from_feedback(history, N=5)


# --- hand-built requests get the same canonicalization ---

def test_direct_construction_lowercases():
    req = LetterConstraintRequest(exact=("A", None, None, None, "E"),
                                  required=frozenset("L"), excluded=frozenset("P"))
    assert req.exact == ("a", None, None, None, "e")
    assert req.required == frozenset("l")
    assert req.excluded == frozenset("p")
    assert filter_candidates(WORDS, req) == ["angle", "ankle", "amble"]


@pytest.mark.parametrize("kwargs", [
    {"exact": ("a", "?", None)},
    {"exact": (None, 1)},
    {"exact": (None,), "required": frozenset({"ab"})},
    {"exact": (None,), "excluded": frozenset({"1"})},
    {"exact": (None,), "required": frozenset("A"), "excluded": frozenset("a")},
])
def test_direct_construction_rejects_non_letters(kwargs):
    with pytest.raises(InvalidConstraint):
        LetterConstraintRequest(**kwargs)
