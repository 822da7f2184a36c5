from astroprompt.branch import (
    get_graphemes,
    get_hg_branch_name,
    get_hg_current_bookmark,
    graphemes_len,
    truncate_branch,
)

COMBINED_E = "e\u0301"


def test_combining_sequence_is_one_grapheme():
    text = COMBINED_E * 3
    assert graphemes_len(text) == 3
    assert len(text) == 6


def test_get_graphemes_keeps_clusters_whole():
    assert get_graphemes(COMBINED_E + "abc", 1) == COMBINED_E


def test_get_graphemes_longer_than_text_returns_text():
    assert get_graphemes("main", 100) == "main"


def test_short_name_is_not_truncated():
    assert truncate_branch("main", 10, "…") == "main"


def test_name_of_exact_length_gets_no_symbol():
    assert truncate_branch("main", graphemes_len("main"), "…") == "main"


def test_non_positive_length_disables_truncation():
    assert truncate_branch("feature/very-long-name", 0, "…") == "feature/very-long-name"
    assert truncate_branch("feature/very-long-name", -4, "…") == "feature/very-long-name"


def test_long_name_is_cut_and_marked():
    assert truncate_branch("feature", 3, "…") == "fea…"


def test_only_first_grapheme_of_symbol_is_used():
    assert truncate_branch("feature", 3, "->") == "fea-"


def test_truncated_result_has_length_plus_symbol():
    name = COMBINED_E * 8
    result = truncate_branch(name, 5, "…")
    assert graphemes_len(result) == 5 + 1
    assert result.startswith(get_graphemes(name, 5))


def test_hg_branch_name_is_read_and_trimmed(tmp_path):
    (tmp_path / ".hg").mkdir()
    (tmp_path / ".hg" / "branch").write_text("  stable\n", encoding="utf-8")
    assert get_hg_branch_name(tmp_path) == "stable"


def test_hg_branch_name_defaults_when_missing(tmp_path):
    assert get_hg_branch_name(tmp_path) == "default"


def test_hg_bookmark_is_read_and_trimmed(tmp_path):
    (tmp_path / ".hg").mkdir()
    (tmp_path / ".hg" / "bookmarks.current").write_text("release\n", encoding="utf-8")
    assert get_hg_current_bookmark(tmp_path) == "release"


def test_hg_bookmark_missing_is_none(tmp_path):
    assert get_hg_current_bookmark(tmp_path) is None