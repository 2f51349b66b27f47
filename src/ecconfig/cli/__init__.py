"""ecconfig CLI: inspect EditorConfig files and glob patterns."""

from ._helpers import main, parse_main  # noqa: F401 (entry points)

# Import command modules to register Click commands with the main group.
from . import _parse, _inspect  # noqa: F401
