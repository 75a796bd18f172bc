"""Syntax check of the reference solutions with tree-sitter."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from . import constants
from .sources import get_source

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Supplies a parser for one of the supported solution languages."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Looks up the solution language's grammar in tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        grammar = constants.TREE_SITTER_GRAMMARS.get(language)
        if grammar is None:
            raise ValueError(f"No tree-sitter grammar for language: {language}")
        return tslp.get_parser(grammar)


@dataclass(frozen=True)
class SourceCheck:
    """Syntax check outcome for one reference solution."""

    language: str
    line_count: int
    error_lines: tuple[int, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.error_lines


def _error_lines(node) -> list[int]:
    """1-based start lines of every ERROR or MISSING node under *node*."""
    if node.type == "ERROR" or node.is_missing:
        return [node.start_point[0] + 1]
    if not node.has_error:
        return []
    return [line for child in node.children for line in _error_lines(child)]


def parse_solution(language: str, factory: ParserFactory | None = None):
    """Syntax tree of the reference solution for *language*."""
    factory = factory or TreeSitterParserFactory()
    source = get_source(language)
    return factory.get_parser(language).parse(source.encode("utf-8"))


def check_source(
    language: str, factory: ParserFactory | None = None
) -> SourceCheck:
    """Parse one reference solution and report any syntax errors."""
    tree = parse_solution(language, factory)
    errors = tuple(_error_lines(tree.root_node))
    if errors:
        logger.warning("%s source has syntax errors at lines %s", language, errors)
    return SourceCheck(
        language=language,
        line_count=len(get_source(language).splitlines()),
        error_lines=errors,
    )


def check_sources(factory: ParserFactory | None = None) -> dict[str, SourceCheck]:
    """Syntax-check the reference solution of every supported language."""
    factory = factory or TreeSitterParserFactory()
    return {
        language: check_source(language, factory)
        for language in constants.SUPPORTED_LANGUAGES
    }
