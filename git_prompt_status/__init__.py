"""
git-prompt-status - A compact git working tree summary for shell prompts
"""

from .__version__ import __version__
from .core import StatusAggregator, StatusResult, current_gitstatus
from .cli.main import main

__all__ = ["StatusAggregator", "StatusResult", "current_gitstatus", "main", "__version__"]
