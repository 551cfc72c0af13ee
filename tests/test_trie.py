import pytest

from structkit.trie import Trie, main


@pytest.fixture
def trie():
    result = Trie()
    for word in ("apple", "app", "bat"):
        result.insert(word)
    return result


@pytest.mark.parametrize(
    "word, expected",
    [("apple", True), ("app", True), ("bat", True), ("bad", False)],
)
def test_search(trie, word, expected):
    assert trie.search(word) is expected


@pytest.mark.parametrize(
    "prefix, expected", [("ap", True), ("ba", True), ("cat", False)]
)
def test_starts_with(trie, prefix, expected):
    assert trie.starts_with(prefix) is expected


def test_prefix_is_not_a_word(trie):
    assert trie.starts_with("appl")
    assert not trie.search("appl")


def test_empty_string():
    trie = Trie()
    assert trie.starts_with("")
    assert not trie.search("")
    trie.insert("")
    assert trie.search("")


@pytest.mark.parametrize("text", ["Apple", "a1", "a b"])
def test_non_lowercase_rejected(trie, text):
    with pytest.raises(ValueError):
        trie.insert(text)
    with pytest.raises(ValueError):
        trie.search(text)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Search 'bad': false\n" in out
    assert "Prefix 'ap': true\n" in out
    assert "Prefix 'cat': false\n" in out