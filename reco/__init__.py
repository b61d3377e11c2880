"""reco package exports."""

from .cli import main as cli_main
from .config import Category, Configuration, DuplicateStrategy
from .organizer import Organizer

__all__ = [
    "Category",
    "Configuration",
    "DuplicateStrategy",
    "Organizer",
    "cli_main",
]
