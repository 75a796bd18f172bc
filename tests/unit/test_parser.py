"""Tests for the tree-sitter syntax check of the reference solutions."""

from __future__ import annotations

import pytest

from streakviz import constants
from streakviz.parser import (
    ParserFactory,
    TreeSitterParserFactory,
    check_source,
    check_sources,
    parse_solution,
)
from streakviz.sources import language_line_count


class FakeNode:
    """Mimics the tree_sitter.Node attributes the checker reads."""

    def __init__(self, type_, line=0, children=(), is_missing=False):
        self.type = type_
        self.start_point = (line, 0)
        self.children = list(children)
        self.is_missing = is_missing
        self.has_error = (
            type_ == "ERROR"
            or is_missing
            or any(c.has_error for c in self.children)
        )


class FakeTree:
    def __init__(self, root):
        self.root_node = root


class FakeParser:
    def __init__(self, root):
        self._root = root
        self.parsed = []

    def parse(self, source_bytes):
        self.parsed.append(source_bytes)
        return FakeTree(self._root)


class FakeParserFactory(ParserFactory):
    def __init__(self, root):
        self.parser = FakeParser(root)
        self.requested = []

    def get_parser(self, language: str):
        self.requested.append(language)
        return self.parser


class TestCheckWithFakeParser:
    def test_clean_tree_reports_no_errors(self):
        root = FakeNode("program", children=[FakeNode("class_declaration", line=0)])
        factory = FakeParserFactory(root)

        check = check_source("java", factory)

        assert check.ok
        assert check.error_lines == ()
        assert check.line_count == 26
        assert factory.requested == ["java"]
        assert factory.parser.parsed[0].startswith(b"class Solution")

    def test_error_nodes_are_reported_one_based(self):
        root = FakeNode(
            "module",
            children=[
                FakeNode("block", children=[FakeNode("ERROR", line=4)]),
                FakeNode("identifier", line=9, is_missing=True),
            ],
        )

        check = check_source("python", FakeParserFactory(root))

        assert not check.ok
        assert check.error_lines == (5, 10)

    def test_check_sources_covers_every_language(self):
        factory = FakeParserFactory(FakeNode("root"))

        checks = check_sources(factory)

        assert set(checks) == set(constants.SUPPORTED_LANGUAGES)
        assert factory.requested == list(constants.SUPPORTED_LANGUAGES)

    def test_unknown_language_fails_before_parsing(self):
        factory = FakeParserFactory(FakeNode("root"))

        with pytest.raises(ValueError, match="Unsupported language"):
            parse_solution("cobol", factory)
        assert factory.requested == []


class TestTreeSitter:
    @pytest.mark.parametrize("language", constants.SUPPORTED_LANGUAGES)
    def test_reference_sources_parse_cleanly(self, language):
        check = check_source(language)

        assert check.ok, check.error_lines
        assert check.line_count == language_line_count(language)

    def test_parse_solution_returns_tree(self):
        tree = parse_solution("python")

        assert tree.root_node.type == "module"
        assert not tree.root_node.has_error

    def test_unknown_language_raises(self):
        with pytest.raises(ValueError, match="No tree-sitter grammar"):
            TreeSitterParserFactory().get_parser("cobol")
