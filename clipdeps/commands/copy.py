#!/usr/bin/env python3
"""
Copy an entry file and its local dependencies to a sink.

Traverses relative imports from the entry file, renders the included files as
one Markdown document, publishes it (clipboard by default) and prints a summary.
"""

import os
import sys

from clipdeps.core.config import Config
from clipdeps.core.exceptions import EntryFileError
from clipdeps.core.logger import ComponentLogger
from clipdeps.core.renderer import DocumentRenderer
from clipdeps.core.sink import SinkKind
from clipdeps.core.traversal import traverse


def copy_main(entry: str, token_limit: int = None, config_path: str = None,
              sink: str = None, output: str = None, root: str = None):
    """
    Run one traversal and publish the result.

    Args:
        entry: Entry file, relative to the current directory or absolute
        token_limit: Overrides the configured limit
        config_path: Explicit clipdeps.yaml
        sink: clipboard, stdout or file
        output: Output file (implies the file sink)
        root: Directory display paths are relative to

    Returns:
        Exit code (0 for success)

    Raises:
        EntryFileError: If the entry file does not exist
        ConfigurationError: If configuration is invalid
        SinkError: If publishing fails
    """
    cfg = Config.load(os.getcwd(), config_path).override(
        token_limit=token_limit, sink=sink, output=output, display_root=root
    )

    # Keep stdout clean when the document itself goes there
    stream = sys.stderr if cfg.sink is SinkKind.STDOUT else None
    log = ComponentLogger("clipdeps", stream=stream)
    for warning in cfg.warnings:
        log.warning(warning)

    entry_path = os.path.abspath(entry)
    if not os.path.exists(entry_path):
        raise EntryFileError(f"Entry file '{entry_path}' does not exist.",
                             context={"entry": entry})

    document, manifest = traverse(
        entry_path,
        cfg.token_limit,
        extensions=cfg.extensions,
        display_root=cfg.display_root,
        logger=ComponentLogger("traverse", stream=stream),
    )

    renderer = DocumentRenderer()
    target = cfg.build_sink()
    target.publish(renderer.render_document(document))

    log.success(f"Copied up to {cfg.token_limit} tokens to {target.describe()}.")
    log.info(f"Included files ({manifest.included_count}):")
    log.info("\n" + renderer.render_summary(manifest))
    log.info(f"Skipped files: {manifest.skipped_count}.")
    return 0
