"""
Destinations for the aggregated document.

Publishing happens once, after the traversal has finished. A failing sink
raises SinkError; the document itself is still complete and valid.
"""

import sys
from enum import Enum
from typing import Optional

import pyperclip

from .exceptions import SinkError


class SinkKind(str, Enum):
    """Where the aggregated document is published."""
    CLIPBOARD = "clipboard"
    STDOUT = "stdout"
    FILE = "file"


class Sink:
    kind: SinkKind

    def publish(self, text: str):
        raise NotImplementedError

    def describe(self) -> str:
        return self.kind.value


class ClipboardSink(Sink):
    kind = SinkKind.CLIPBOARD

    def publish(self, text: str):
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise SinkError(f"Failed to copy to clipboard: {e}")


class StdoutSink(Sink):
    kind = SinkKind.STDOUT

    def __init__(self, stream=None):
        self.stream = stream

    def publish(self, text: str):
        out = self.stream or sys.stdout
        out.write(text)
        out.flush()


class FileSink(Sink):
    kind = SinkKind.FILE

    def __init__(self, path: str):
        self.path = path

    def publish(self, text: str):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise SinkError(f"Failed to write {self.path}: {e}", context={"path": self.path})

    def describe(self) -> str:
        return self.path


def make_sink(kind: SinkKind, output: Optional[str] = None) -> Sink:
    """Build the sink for a kind; the file sink needs an output path."""
    kind = SinkKind(kind)
    if kind is SinkKind.CLIPBOARD:
        return ClipboardSink()
    if kind is SinkKind.STDOUT:
        return StdoutSink()
    if not output:
        raise SinkError("The file sink requires an output path")
    return FileSink(output)
