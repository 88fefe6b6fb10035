import pytest

from reindex_tool.core import extract_key, format_index_name, SortKey


@pytest.mark.parametrize("name", ["readme.md", "42", "", "abc.txt", "10x-bar", "x-1-foo", ".hidden"])
def test_names_without_index_prefix(name):
    assert extract_key(name) is None


def test_single_index():
    entry = extract_key("3-foo.txt")
    assert entry.key == SortKey((3,))
    assert entry.residual == "foo.txt"
    assert entry.name == "3-foo.txt"


def test_leading_separator_counts_as_zero():
    entry = extract_key("-foo.txt")
    assert entry.key == SortKey((0,))
    assert entry.residual == "foo.txt"


def test_multiple_index_groups():
    entry = extract_key("1-2-bar")
    assert entry.key == SortKey((1, 2))
    assert entry.residual == "bar"


def test_empty_group_between_separators():
    entry = extract_key("4--x")
    assert entry.key.indices == (4, 0)
    assert entry.residual == "x"


def test_unterminated_digit_run_is_discarded():
    entry = extract_key("3-4x-y")
    assert entry.key.indices == (3,)
    assert entry.residual == "4x-y"


def test_trailing_digits_are_discarded():
    entry = extract_key("7-12")
    assert entry.key.indices == (7,)
    assert entry.residual == "12"


def test_accumulator_resets_after_separator():
    assert extract_key("12-3-z").key.indices == (12, 3)


def test_leading_zeros():
    assert extract_key("007-bond").key.indices == (7,)


def test_long_digit_runs_do_not_overflow():
    digits = "9" * 40
    assert extract_key(digits + "-big").key.indices == (int(digits),)


def test_only_ascii_digits():
    # Arabic-Indic digit three
    assert extract_key("٣-foo") is None


def test_empty_residual():
    entry = extract_key("5-")
    assert entry.key.indices == (5,)
    assert entry.residual == ""


def test_format_index_name():
    assert format_index_name(3, 2, "foo.txt") == "03-foo.txt"
    assert format_index_name(123, 2, "foo") == "123-foo"
    assert format_index_name(0, 0, "") == "0-"
