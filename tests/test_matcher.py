"""Tests for wildfilter.matcher."""

import pytest

from wildfilter.case import CaseMode
from wildfilter.matcher import split_on_tokens, wildcard_match

NAMES = ["", "a", "aaa", "abc", "Foo.java", "MyTestFile.java", "x/y/z.txt", "*", "?"]
MODES = [CaseMode.SENSITIVE, CaseMode.INSENSITIVE]


class TestSplitOnTokens:
    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("", [""]),
            ("abc", ["abc"]),
            ("a?c", ["a?c"]),
            ("*", ["", ""]),
            ("*.java", ["", ".java"]),
            ("a*b*c", ["a", "b", "c"]),
            ("a**b", ["a", "", "b"]),
            ("*test*.java", ["", "test", ".java"]),
        ],
    )
    def test_segments(self, pattern: str, expected: list[str]) -> None:
        assert split_on_tokens(pattern) == expected


class TestLiteralPatterns:
    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("", "", True),
            ("x", "", False),
            ("", "x", False),
            ("abc", "abc", True),
            ("abc", "abd", False),
            ("abc", "ab", False),
            ("ab", "abc", False),
            ("abc", "ABC", False),
        ],
    )
    def test_sensitive_equality(self, name: str, pattern: str, expected: bool) -> None:
        assert wildcard_match(name, pattern, CaseMode.SENSITIVE) is expected

    @pytest.mark.parametrize(("name", "pattern"), [("abc", "ABC"), ("Straße", "STRASSE")])
    def test_insensitive_equality(self, name: str, pattern: str) -> None:
        # per-character folding: "ß" never equals two characters
        expected = len(name) == len(pattern)
        assert wildcard_match(name, pattern, CaseMode.INSENSITIVE) is expected

    def test_default_mode_is_sensitive(self) -> None:
        assert wildcard_match("ABC", "abc") is False
        assert wildcard_match("abc", "abc") is True


class TestWildcards:
    @pytest.mark.parametrize("name", NAMES)
    @pytest.mark.parametrize("mode", MODES)
    @pytest.mark.parametrize("pattern", ["*", "**", "***"])
    def test_star_matches_everything(self, name: str, mode: CaseMode, pattern: str) -> None:
        assert wildcard_match(name, pattern, mode) is True

    @pytest.mark.parametrize("name", NAMES)
    def test_question_mark_matches_exactly_one(self, name: str) -> None:
        assert wildcard_match(name, "?", CaseMode.SENSITIVE) is (len(name) == 1)

    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("aaa", "a*a", True),
            ("aa", "a*a", True),
            ("a", "a*a", False),
            ("aaa", "*a*a", True),
            ("aba", "*a*a", True),
            ("ab", "*a*a", False),
            (".txt", "?.txt", False),
            ("a.txt", "?.txt", True),
            ("ab.txt", "?.txt", False),
            ("abcabd", "*ab?", True),
            ("abcabd", "a*c*d", True),
            ("abcabd", "a*d*c", False),
            ("Foo.java", "*.java", True),
            ("Foo.javax", "*.java", False),
            ("Foo.java", "Foo*", True),
            ("xFoo.java", "Foo*", False),
            ("x/y/z.txt", "x*z.txt", True),
            ("mississippi", "m*iss*ppi", True),
            ("mississippi", "m*iss*iss*ppi", True),
            ("mississippi", "m*iss*iss*iss*ppi", False),
            ("abc", "a??", True),
            ("abc", "a???", False),
            ("abcd", "*?c?", True),
            ("*", "?", True),
            ("a", "\\*", False),
        ],
    )
    def test_mixed(self, name: str, pattern: str, expected: bool) -> None:
        assert wildcard_match(name, pattern, CaseMode.SENSITIVE) is expected

    def test_metacharacters_in_name_need_wildcards(self) -> None:
        assert wildcard_match("a*b", "a*b") is True  # via the wildcard
        assert wildcard_match("axb", "a*b") is True
        assert wildcard_match("a?b", "a?b") is True
        assert wildcard_match("axb", "a?b") is True

    def test_long_input_does_not_backtrack_exponentially(self) -> None:
        name = "a" * 2000
        pattern = "*a" * 50 + "b"
        assert wildcard_match(name, pattern) is False


class TestCaseModes:
    def test_sensitive_vs_insensitive(self) -> None:
        assert wildcard_match("MyTESTFile.java", "*test*.java", CaseMode.SENSITIVE) is False
        assert wildcard_match("MyTESTFile.java", "*test*.java", CaseMode.INSENSITIVE) is True

    def test_capitalized_test_needs_insensitive_mode(self) -> None:
        """``MyTestFile.java`` is listed as a case-sensitive match of
        ``*test*.java`` in the scenario list, but a literal ``t`` never equals
        ``T``, so it only matches case-insensitively.
        """
        assert wildcard_match("MytestFile.java", "*test*.java", CaseMode.SENSITIVE) is True
        assert wildcard_match("MyTestFile.java", "*test*.java", CaseMode.SENSITIVE) is False
        assert wildcard_match("MyTestFile.java", "*test*.java", CaseMode.INSENSITIVE) is True

    @pytest.mark.parametrize(
        ("name", "pattern"),
        [
            ("ABC", "abc"),
            ("Foo.JAVA", "*.java"),
            ("ÀÉÎ", "àéî"),
            ("README", "read?e"),
        ],
    )
    def test_insensitive_is_a_relaxation(self, name: str, pattern: str) -> None:
        assert wildcard_match(name, pattern, CaseMode.SENSITIVE) is False
        assert wildcard_match(name, pattern, CaseMode.INSENSITIVE) is True

    @pytest.mark.parametrize("name", NAMES)
    @pytest.mark.parametrize("pattern", ["*", "?", "a*a", "*.java", "x*", "abc"])
    def test_sensitive_match_implies_insensitive(self, name: str, pattern: str) -> None:
        if wildcard_match(name, pattern, CaseMode.SENSITIVE):
            assert wildcard_match(name, pattern, CaseMode.INSENSITIVE)

    def test_system_resolves_per_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("wildfilter.case._host_case_sensitive", lambda: False)
        assert wildcard_match("ABC", "abc", CaseMode.SYSTEM) is True
        monkeypatch.setattr("wildfilter.case._host_case_sensitive", lambda: True)
        assert wildcard_match("ABC", "abc", CaseMode.SYSTEM) is False


class TestGeneralization:
    @pytest.mark.parametrize(
        ("name", "pattern"),
        [("aaa", "a*a"), ("Foo.java", "*.java"), ("a.txt", "?.txt"), ("", "")],
    )
    def test_trailing_star_and_leading_prefix(self, name: str, pattern: str) -> None:
        assert wildcard_match(name, pattern)
        assert wildcard_match(name, pattern + "*")
        assert wildcard_match("prefix-" + name, "*" + pattern)
