"""
Breadth-first dependency closure with a soft token budget.

Starting at the entry file, every included file is parsed for relative
imports, each import is resolved to a file on disk and queued once. The
budget is checked before a file is included: while anything is left, the next
file goes in whole (even if it overshoots), once it is used up every further
file is skipped.
"""

import os
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional, Sequence, Set, Tuple

from .extractor import extract_imports
from .logger import ComponentLogger
from .models import (
    DEFAULT_TOKEN_LIMIT,
    EXTENSIONS,
    IncludedDocument,
    IncludedFile,
    Manifest,
    ParseWarning,
)
from .resolver import resolve_module
from .tokens import estimate_tokens


def file_ref(path: str) -> str:
    """Canonical identity for a file: absolute, normalized path."""
    return os.path.abspath(path)


def read_source(path: str) -> str:
    """Read a source file; invalid UTF-8 bytes become replacement characters."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


@dataclass
class TraversalContext:
    """State owned by one traversal run."""
    limit: int
    visited: Set[str] = field(default_factory=set)
    queue: Deque[str] = field(default_factory=deque)
    pending: Set[str] = field(default_factory=set)
    consumed: int = 0
    included: List[IncludedFile] = field(default_factory=list)
    skipped: int = 0
    warnings: List[ParseWarning] = field(default_factory=list)

    def enqueue(self, ref: str) -> bool:
        if ref in self.visited or ref in self.pending:
            return False
        self.queue.append(ref)
        self.pending.add(ref)
        return True

    def dequeue(self) -> str:
        ref = self.queue.popleft()
        self.pending.discard(ref)
        return ref

    @property
    def exhausted(self) -> bool:
        return self.consumed >= self.limit


def traverse(entry: str,
             token_limit: int = DEFAULT_TOKEN_LIMIT,
             *,
             extensions: Sequence[str] = EXTENSIONS,
             display_root: Optional[str] = None,
             read_file: Callable[[str], str] = read_source,
             logger: Optional[ComponentLogger] = None) -> Tuple[IncludedDocument, Manifest]:
    """
    Collect the entry file and everything it (transitively) imports.

    Args:
        entry: Path to the entry file
        token_limit: Soft ceiling on the summed token estimates
        extensions: Supported extensions, also the resolution order
        display_root: Directory display paths are relative to (cwd when None)
        read_file: Reads a path to text; any OSError counts as a skipped file
        logger: Receives parse warnings

    Returns:
        (IncludedDocument, Manifest)
    """
    root = display_root or os.getcwd()
    ctx = TraversalContext(limit=token_limit)
    ctx.enqueue(file_ref(entry))

    while ctx.queue:
        current = ctx.dequeue()
        if current in ctx.visited:
            continue
        ctx.visited.add(current)

        ext = os.path.splitext(current)[1]
        if ext not in extensions:
            continue

        try:
            content = read_file(current)
        except OSError:
            ctx.skipped += 1
            continue

        tokens = estimate_tokens(content)
        if ctx.exhausted:
            ctx.skipped += 1
            continue

        ctx.included.append(IncludedFile(
            path=current,
            display_path=os.path.relpath(current, root),
            extension=ext[1:],
            content=content,
            tokens=tokens,
        ))
        ctx.consumed += tokens

        result = extract_imports(content, current)
        if result.warning is not None:
            ctx.warnings.append(result.warning)
            if logger:
                logger.warning(str(result.warning))

        base_dir = os.path.dirname(current)
        for specifier in result.specifiers:
            resolved = resolve_module(specifier, base_dir, extensions)
            if resolved:
                ctx.enqueue(resolved)

    document = IncludedDocument(entries=list(ctx.included), consumed_tokens=ctx.consumed)
    manifest = Manifest(
        included_count=len(ctx.included),
        skipped_count=ctx.skipped,
        included_paths=[item.display_path for item in ctx.included],
        discovered_count=len(ctx.visited),
        warnings=list(ctx.warnings),
    )
    return document, manifest
