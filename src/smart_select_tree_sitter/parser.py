"""tree-sitter parsing into immutable ``SyntaxNode`` trees."""

from pathlib import Path
from typing import Callable, Dict, List, Optional

import tree_sitter_javascript as tsjs
import tree_sitter_json as tsjson
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult, SyntaxNode

TRIVIA_KINDS = frozenset({"comment", "html_comment"})

# Attribute-like children of an opening tag; jsx_expression covers `{...spread}`
JSX_TAG_KINDS = frozenset({"jsx_opening_element", "jsx_self_closing_element"})
JSX_ATTRIBUTE_KINDS = frozenset({"jsx_attribute", "jsx_expression"})
JSX_ATTRIBUTES = "jsx_attributes"

_LANGUAGE_FACTORIES: Dict[str, Callable[[], object]] = {
    "typescript": tsts.language_typescript,
    "tsx": tsts.language_tsx,
    "javascript": tsjs.language,
    "json": tsjson.language,
}

EXTENSION_DIALECTS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".json": "json",
    ".jsonc": "json",
}

LANGUAGE_ID_DIALECTS = {
    "typescript": "typescript",
    "typescriptreact": "tsx",
    "javascript": "javascript",
    "javascriptreact": "javascript",
    "json": "json",
    "jsonc": "json",
}

DEFAULT_DIALECT = "typescript"

_LANGUAGES: Dict[str, Language] = {}


class UnsupportedDialectError(ValueError):
    """Raised when a grammar dialect has no tree-sitter language behind it."""


def dialect_for(file_name: str = "", language_id: Optional[str] = None) -> str:
    """Pick the grammar dialect from the file extension, then the language id."""
    suffix = Path(file_name).suffix.lower() if file_name else ""
    if suffix in EXTENSION_DIALECTS:
        return EXTENSION_DIALECTS[suffix]
    if language_id and language_id in LANGUAGE_ID_DIALECTS:
        return LANGUAGE_ID_DIALECTS[language_id]
    return DEFAULT_DIALECT


def get_language(dialect: str) -> Language:
    if dialect not in _LANGUAGE_FACTORIES:
        raise UnsupportedDialectError(f"No tree-sitter grammar for dialect '{dialect}'")
    if dialect not in _LANGUAGES:
        _LANGUAGES[dialect] = Language(_LANGUAGE_FACTORIES[dialect]())
    return _LANGUAGES[dialect]


class _OffsetMap:
    """Translates tree-sitter byte offsets into string indices."""

    def __init__(self, source: str, data: bytes):
        self._identity = len(data) == len(source)
        self._table: List[int] = []
        if not self._identity:
            for index, char in enumerate(source):
                self._table.extend([index] * len(char.encode("utf-8")))
            self._table.append(len(source))

    def __call__(self, byte_offset: int) -> int:
        if self._identity:
            return byte_offset
        return self._table[min(byte_offset, len(self._table) - 1)]


class SourceParser:
    """Parses JavaScript, TypeScript, TSX and JSON sources with tree-sitter."""

    def parse_string(
        self, source: str, file_name: str = "", language_id: Optional[str] = None
    ) -> ParseResult:
        dialect = dialect_for(file_name, language_id)
        parser = Parser(get_language(dialect))
        data = source.encode("utf-8")
        tree = parser.parse(data)
        offsets = _OffsetMap(source, data)

        ts_root = tree.root_node
        children = self._convert_children(ts_root, 0, offsets)
        root = SyntaxNode(
            kind=ts_root.type,
            full_start=0,
            start=min(offsets(ts_root.start_byte), len(source)),
            end=len(source),
            children=children,
        )

        errors = []
        if ts_root.has_error:
            errors = self._collect_errors(ts_root, source, offsets)
        return ParseResult(root=root, source=source, dialect=dialect, errors=errors)

    def parse_file(self, file_path: Path, language_id: Optional[str] = None) -> ParseResult:
        source = Path(file_path).read_text(encoding="utf-8")
        return self.parse_string(source, str(file_path), language_id)

    def _convert(self, node: Node, full_start: int, offsets: _OffsetMap) -> SyntaxNode:
        start = offsets(node.start_byte)
        end = offsets(node.end_byte)
        full_start = min(full_start, start)
        children = self._convert_children(node, full_start, offsets)
        if node.type in JSX_TAG_KINDS:
            children = self._group_attributes(children, start)
        return SyntaxNode(kind=node.type, full_start=full_start, start=start, end=end, children=children)

    def _convert_children(self, node: Node, full_start: int, offsets: _OffsetMap) -> tuple:
        converted = []
        previous_end = full_start
        for child in node.children:
            if child.type in TRIVIA_KINDS:
                continue
            if child.is_named:
                converted.append(self._convert(child, previous_end, offsets))
            previous_end = max(previous_end, offsets(child.end_byte))
        return tuple(converted)

    @staticmethod
    def _group_attributes(children: tuple, tag_start: int) -> tuple:
        """Wrap the attribute run of a tag in a synthetic ``jsx_attributes`` node.

        Every tag gets a container. A tag without attributes gets an empty one
        right after its name, so a search from an enclosing element stops at
        the element's own list instead of reaching a nested element's.
        """
        positions = [i for i, child in enumerate(children) if i > 0 and child.kind in JSX_ATTRIBUTE_KINDS]
        if not positions:
            # fragments have no name
            position = children[0].end if children else tag_start + 1
            container = SyntaxNode(kind=JSX_ATTRIBUTES, full_start=position, start=position, end=position)
            return children[:1] + (container,) + children[1:]
        first, last = positions[0], positions[-1]
        members = children[first:last + 1]
        container = SyntaxNode(
            kind=JSX_ATTRIBUTES,
            full_start=members[0].full_start,
            start=members[0].start,
            end=members[-1].end,
            children=members,
        )
        return children[:first] + (container,) + children[last + 1:]

    def _collect_errors(self, node: Node, source: str, offsets: _OffsetMap) -> List[str]:
        errors = []
        if node.type == "ERROR" or node.is_missing:
            row, column = node.start_point
            snippet = source[offsets(node.start_byte):offsets(node.end_byte)][:40]
            label = "missing" if node.is_missing else "syntax error"
            errors.append(f"{row + 1}:{column + 1}: {label} {snippet!r}")
        for child in node.children:
            errors.extend(self._collect_errors(child, source, offsets))
        return errors
