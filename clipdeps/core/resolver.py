# core/resolver.py
import os
from typing import List, Optional, Sequence

from .extractor import is_relative
from .models import EXTENSIONS


def module_candidates(specifier: str, base_dir: str,
                      extensions: Sequence[str] = EXTENSIONS) -> List[str]:
    """
    Ordered candidate files for a relative specifier.

    `<specifier><ext>` for every extension first, then `<specifier>/index<ext>`.
    """
    files = [os.path.abspath(os.path.join(base_dir, f"{specifier}{ext}")) for ext in extensions]
    target = os.path.abspath(os.path.join(base_dir, specifier))
    indexes = [os.path.join(target, f"index{ext}") for ext in extensions]
    return files + indexes


def resolve_module(specifier: str, base_dir: str,
                   extensions: Sequence[str] = EXTENSIONS) -> Optional[str]:
    """Return the first candidate that is a regular file, or None."""
    if not is_relative(specifier):
        return None
    for candidate in module_candidates(specifier, base_dir, extensions):
        if os.path.isfile(candidate):
            return candidate
    return None
