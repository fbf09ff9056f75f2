# core/models.py
from dataclasses import dataclass, field
from typing import List, Optional

# Supported source extensions, in resolution priority order
EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")

DEFAULT_TOKEN_LIMIT = 16000


@dataclass(frozen=True)
class ParseWarning:
    """A file whose source could not be parsed; it contributes no imports."""
    path: Optional[str]
    message: str
    line: Optional[int] = None

    def __str__(self):
        where = self.path or "<source>"
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"Failed to parse {where}: {self.message}"


@dataclass
class ExtractionResult:
    specifiers: List[str] = field(default_factory=list)
    warning: Optional[ParseWarning] = None

    @property
    def ok(self) -> bool:
        return self.warning is None


@dataclass(frozen=True)
class IncludedFile:
    path: str            # absolute FileRef
    display_path: str    # relative to the display root
    extension: str       # without the leading dot
    content: str
    tokens: int


@dataclass
class IncludedDocument:
    entries: List[IncludedFile] = field(default_factory=list)
    consumed_tokens: int = 0

    @property
    def paths(self) -> List[str]:
        return [entry.path for entry in self.entries]

    def __len__(self):
        return len(self.entries)


@dataclass
class Manifest:
    included_count: int
    skipped_count: int
    included_paths: List[str] = field(default_factory=list)
    discovered_count: int = 0
    warnings: List[ParseWarning] = field(default_factory=list)
