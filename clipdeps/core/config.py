# core/config.py
import os
from typing import List, Optional

from .exceptions import ConfigurationError
from .sink import SinkKind, make_sink
from .validation import ClipdepsConfig, ConfigValidator

CONFIG_FILENAME = 'clipdeps.yaml'


class Config:
    def __init__(self, data: ClipdepsConfig, root: str, warnings: Optional[List[str]] = None):
        self.root         = root
        self.warnings     = warnings or []

        self.token_limit  = data.token_limit
        self.extensions   = tuple(data.extensions)
        self.sink         = data.sink
        self.output       = data.output
        self.display_root = (os.path.abspath(os.path.join(root, data.display_root))
                             if data.display_root else root)

    @classmethod
    def load(cls, project_root: str, config_path: Optional[str] = None):
        """
        Load clipdeps.yaml from project_root, or from config_path when given.

        A missing default file means defaults; a missing explicit file is an error.
        """
        project_root = os.path.abspath(project_root)
        validator = ConfigValidator(project_root)
        if config_path is None:
            path = os.path.join(project_root, CONFIG_FILENAME)
            if not os.path.isfile(path):
                return cls(ClipdepsConfig(), project_root)
        else:
            path = os.path.abspath(config_path)
        data = validator.validate_config_file(path)
        return cls(data, project_root, validator.validate_display_root(data))

    def override(self, token_limit=None, sink=None, output=None, display_root=None):
        """Apply command-line flags on top of the file values."""
        if token_limit is not None:
            if token_limit < 0:
                raise ConfigurationError(f"Token limit must be non-negative, got {token_limit}")
            self.token_limit = token_limit
        if output is not None:
            self.output = output
            # --output alone means "write to this file"
            if sink is None:
                sink = SinkKind.FILE
        if sink is not None:
            self.sink = SinkKind(sink)
        if display_root is not None:
            self.display_root = os.path.abspath(display_root)
        if self.sink is SinkKind.FILE and not self.output:
            raise ConfigurationError("The file sink requires --output")
        return self

    def build_sink(self):
        return make_sink(self.sink, self.output)
