"""
Relative import extraction for TypeScript / JavaScript sources.

Sources are parsed with tree-sitter. `.ts` files use the TypeScript grammar,
everything else uses the TSX grammar so JSX markup parses too. The whole tree
is walked, so imports and require() calls nested in functions, conditionals
or class bodies are found as well.
"""

import os
from typing import Dict, List, Optional

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

from .models import ExtractionResult, ParseWarning

RELATIVE_PREFIXES = ("./", "../")
REQUIRE_FUNCTION = "require"

_LANGUAGES: Dict[str, Language] = {}


def _language(dialect: str) -> Language:
    if dialect not in _LANGUAGES:
        if dialect == "typescript":
            _LANGUAGES[dialect] = Language(ts_typescript.language_typescript())
        else:
            _LANGUAGES[dialect] = Language(ts_typescript.language_tsx())
    return _LANGUAGES[dialect]


def dialect_for(path: Optional[str]) -> str:
    """Pick the grammar for a file; plain `.ts` cannot contain JSX."""
    if path and os.path.splitext(path)[1] == ".ts":
        return "typescript"
    return "tsx"


def is_relative(specifier: str) -> bool:
    return specifier.startswith(RELATIVE_PREFIXES)


def _string_value(node: Node) -> Optional[str]:
    if node is None or node.type != "string":
        return None
    raw = node.text.decode("utf-8", errors="replace")
    return raw[1:-1]


def _first_error(root: Node) -> Optional[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _import_source(node: Node) -> Optional[str]:
    return _string_value(node.child_by_field_name("source"))


def _require_argument(node: Node) -> Optional[str]:
    callee = node.child_by_field_name("function")
    if callee is None or callee.type != "identifier" or callee.text != REQUIRE_FUNCTION.encode():
        return None
    arguments = node.child_by_field_name("arguments")
    if arguments is None:
        return None
    args = [child for child in arguments.named_children if child.type != "comment"]
    if len(args) != 1:
        return None
    return _string_value(args[0])


def collect_specifiers(root: Node) -> List[str]:
    """Pre-order walk of the tree, collecting relative import/require specifiers."""
    found: List[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        value = None
        if node.type == "import_statement":
            value = _import_source(node)
        elif node.type == "call_expression":
            value = _require_argument(node)
        if value is not None and is_relative(value):
            found.append(value)
        stack.extend(reversed(node.children))
    return found


def extract_imports(source_text: str, path: Optional[str] = None) -> ExtractionResult:
    """
    Extract the relative module specifiers referenced by a source file.

    Never raises for bad input: a file with syntax errors yields an empty
    specifier list and a ParseWarning naming the file and the first bad line.

    Args:
        source_text: Full text of the file
        path: File path, used to pick the grammar and to label warnings

    Returns:
        ExtractionResult with specifiers in tree-walk order
    """
    parser = Parser(_language(dialect_for(path)))
    tree = parser.parse(source_text.encode("utf-8", errors="replace"))

    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        line = bad.start_point[0] + 1 if bad is not None else None
        return ExtractionResult(warning=ParseWarning(path=path, message="syntax error", line=line))

    return ExtractionResult(specifiers=collect_specifiers(root))
