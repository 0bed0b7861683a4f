import logging

from compoundword.ranking import build_trie, iter_compound_words, rank_compound_words
from compoundword.result import CompoundResult


WORDS = ["cat", "dog", "catdog", "dogcatcat", "catdogdog"]


def test_longest_and_second_longest():
    result = rank_compound_words(WORDS)

    # Equal lengths: the word that appears first wins
    assert result.longest == "dogcatcat"
    assert result.second_longest == "catdogdog"
    assert result.segments["dogcatcat"] == ["dog", "cat", "cat"]
    assert result.examined == 2


def test_tie_break_follows_list_order():
    result = rank_compound_words(["cat", "dog", "catdogdog", "dogcatcat"])
    assert result.longest == "catdogdog"
    assert result.second_longest == "dogcatcat"


def test_skips_longer_non_compounds():
    words = ["rat", "cat", "cats", "s", "catsrat", "ratcatdogs", "catrat"]
    result = rank_compound_words(words)
    assert result.longest == "catsrat"
    assert result.second_longest == "catrat"
    assert result.examined == 3


def test_only_one_compound():
    result = rank_compound_words(["cat", "dog", "catdog", "bird"])
    assert result.longest == "catdog"
    assert result.second_longest is None
    assert result.words == ["catdog"]
    assert result.examined == 4


def test_no_compounds():
    result = rank_compound_words(["cat", "dog", "bird"])
    assert result.longest is None
    assert result.second_longest is None
    assert not result


def test_empty_list():
    result = rank_compound_words([])
    assert result == CompoundResult()
    assert result.examined == 0


def test_blank_entries_are_ignored():
    result = rank_compound_words(["", "cat", "", "dog", "catdog", ""])
    assert result.longest == "catdog"
    assert result.second_longest is None
    assert rank_compound_words(["", "", ""]).examined == 0


def test_input_is_not_modified():
    words = list(WORDS)
    rank_compound_words(words)
    assert words == WORDS


def test_repeat_runs_agree():
    first = rank_compound_words(list(WORDS))
    second = rank_compound_words(list(WORDS))
    assert first == second
    assert first.words == second.words


def test_nested_compounds():
    words = ["ab", "cd", "abcd", "abcdabcd"]
    result = rank_compound_words(words)
    assert result.longest == "abcdabcd"
    assert result.segments["abcdabcd"] == ["ab", "cd", "ab", "cd"]
    assert result.second_longest == "abcd"


def test_invalid_tokens_are_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="compoundword"):
        result = rank_compound_words(["cat", "dog", "Cat-Dog", "catdog"])

    assert result.longest == "catdog"
    assert result.skipped == 1
    assert "Cat-Dog" in caplog.text


def test_iter_compound_words_yields_all_in_order():
    found = [w for w, _ in iter_compound_words(WORDS + ["catcat"])]
    assert found == ["dogcatcat", "catdogdog", "catdog", "catcat"]


def test_build_trie_counts_skipped():
    trie, skipped = build_trie(["ok", "", "NO", "fine"])
    assert skipped == 1
    assert len(trie) == 2
    assert "ok" in trie
