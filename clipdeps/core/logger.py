"""
Colored logging utility with component name prefixes.

Provides consistent, colored console output for the traversal and the CLI.
"""

import sys
from colorama import Fore, Style


class ComponentLogger:
    """Logger that prefixes all output with a colored component name."""

    COLORS = [
        Fore.BLUE,
        Fore.MAGENTA,
        Fore.CYAN,
        Fore.GREEN,
        Fore.LIGHTBLUE_EX,
        Fore.LIGHTMAGENTA_EX,
        Fore.LIGHTCYAN_EX,
        Fore.LIGHTGREEN_EX,
    ]

    _color_index = 0
    _component_colors = {}

    @classmethod
    def _get_color_for_component(cls, component_name: str) -> str:
        """Get a consistent color for a component name."""
        if component_name not in cls._component_colors:
            cls._component_colors[component_name] = cls.COLORS[cls._color_index % len(cls.COLORS)]
            cls._color_index += 1
        return cls._component_colors[component_name]

    def __init__(self, component_name: str, stream=None):
        """
        Initialize logger for a specific component.

        Args:
            component_name: Tag printed in front of every line
            stream: Where info/success lines go (stdout when None)
        """
        self.component_name = component_name
        self.stream = stream
        self.color = self._get_color_for_component(component_name)
        self.prefix = f"{self.color}[{component_name}]{Style.RESET_ALL} "

    def log(self, message: str, file=None):
        """Log a message with the component prefix."""
        # Resolved at call time so redirected/captured streams are honoured
        out = file or self.stream or sys.stdout
        lines = message.splitlines() or [""]
        for line in lines:
            print(f"{self.prefix}{line}", file=out)

    def info(self, message: str):
        """Log an info message."""
        self.log(message)

    def warning(self, message: str):
        """Log a warning message."""
        self.log(f"{Fore.YELLOW}WARNING:{Style.RESET_ALL} {message}", file=sys.stderr)

    def error(self, message: str):
        """Log an error message."""
        self.log(f"{Fore.RED}ERROR:{Style.RESET_ALL} {message}", file=sys.stderr)

    def success(self, message: str):
        """Log a success message."""
        self.log(f"{Fore.GREEN}✓{Style.RESET_ALL} {message}")
