"""Tests for property path parsing."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from dotreflect.reflection import path
from dotreflect.reflection.errors import InvalidPathError
from dotreflect.reflection.path import parse_path, split_leaf


def describe_parse_path():
    def parses_single_token(expect):
        expect(parse_path("flag")) == ("flag",)

    def parses_dotted_path_in_order(expect):
        expect(parse_path("child.grandchild.flag")) == ("child", "grandchild", "flag")

    def accepts_private_and_dunder_names(expect):
        expect(parse_path("_cache.__secret")) == ("_cache", "__secret")

    def accepts_unicode_identifiers(expect):
        expect(parse_path("größe.wert2")) == ("größe", "wert2")

    @pytest.mark.parametrize("text", ["", ".", "a..b", ".a", "a.", "a b", "1a", "a.2", "a-b"])
    def rejects_malformed_paths(text):
        with pytest.raises(InvalidPathError):
            parse_path(text)

    def rejects_non_strings():
        with pytest.raises(InvalidPathError):
            parse_path(None)  # type: ignore[arg-type]

    def parses_from_threads_before_the_parser_exists(expect, monkeypatch):
        monkeypatch.setattr(path, "_g_parser", None)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(parse_path, ["child.grandchild.flag"] * 16))
        expect(set(results)) == {("child", "grandchild", "flag")}
        expect(path._g_parser is not None) == True


def describe_split_leaf():
    def splits_off_last_token(expect):
        expect(split_leaf("child.grandchild.flag")) == (("child", "grandchild"), "flag")

    def single_token_has_no_parents(expect):
        expect(split_leaf("child")) == ((), "child")
