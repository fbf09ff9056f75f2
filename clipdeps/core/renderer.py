# core/renderer.py
import os
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .models import IncludedDocument, Manifest

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")


class DocumentRenderer:
    def __init__(self, template_dir: str = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, tpl_name: str, **ctx) -> str:
        tpl = self.env.get_template(tpl_name)
        return tpl.render(**ctx)

    def render_document(self, document: IncludedDocument) -> str:
        """
        One fenced block per included file, in inclusion order:
        header, separator, content fenced and tagged with the extension, blank line.
        """
        return self.render("document.md.j2", files=document.entries)

    def render_summary(self, manifest: Manifest) -> str:
        return self.render("summary.txt.j2", paths=manifest.included_paths)
