import pytest

from pipex.splitting import count_words, split_words


def test_plain_split():
    assert split_words("ls -l", " ") == ["ls", "-l"]


def test_repeated_and_edge_separators():
    assert split_words("  wc   -l  ", " ") == ["wc", "-l"]


def test_empty_text():
    assert split_words("", " ") == []
    assert count_words("", " ") == 0


def test_only_separators():
    assert split_words("    ", " ") == []


def test_single_quotes_keep_spaces():
    assert split_words("awk '{print $1}'", " ") == ["awk", "{print $1}"]


def test_double_quotes_keep_spaces():
    assert split_words('grep "a b"', " ") == ["grep", "a b"]


def test_single_quote_inside_double_quotes_is_kept():
    assert split_words("echo \"it's\"", " ") == ["echo", "it's"]


def test_double_quote_inside_single_quotes_is_kept():
    assert split_words("echo 'say \"hi\"'", " ") == ["echo", 'say "hi"']


def test_empty_quoted_word():
    assert split_words('a "" b', " ") == ["a", "", "b"]


def test_unterminated_quote_runs_to_end():
    assert split_words("echo 'a b", " ") == ["echo", "a b"]


def test_other_separator():
    assert split_words("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


@pytest.mark.parametrize(
    "text",
    ["ls -l", "  a  b  c ", "awk '{print $1}' x", 'a "" b', "echo 'a b", ""],
)
def test_count_matches_split(text):
    assert count_words(text, " ") == len(split_words(text, " "))


def test_words_never_contain_unquoted_separator():
    for word in split_words("cat -e file  more", " "):
        assert " " not in word and word


@pytest.mark.parametrize("sep", ["", "ab"])
def test_bad_separator(sep):
    with pytest.raises(ValueError):
        split_words("a b", sep)
    with pytest.raises(ValueError):
        count_words("a b", sep)