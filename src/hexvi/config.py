"""
Editor configuration.
"""

import argparse
from dataclasses import dataclass

from .core.modes import DirectionalPolicy

DEFAULT_ROW_WIDTH = 16
DEFAULT_PAGE_ROWS = 5


@dataclass
class EditorConfig:
    """Settings consumed by the editor session."""

    row_width: int = DEFAULT_ROW_WIDTH
    page_rows: int = DEFAULT_PAGE_ROWS
    directional_policy: DirectionalPolicy = DirectionalPolicy.IGNORE
    confirm_quit: bool = True
    placeholder: str = '.'

    def __post_init__(self) -> None:
        if self.row_width < 1:
            raise ValueError(f"Row width must be at least 1, got {self.row_width}")
        if self.page_rows < 1:
            raise ValueError(f"Page size must be at least 1, got {self.page_rows}")
        if len(self.placeholder) != 1:
            raise ValueError("Placeholder must be a single character")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'EditorConfig':
        """Build a configuration from parsed command line arguments."""

        policy = DirectionalPolicy.COMMIT if args.commit_on_move else DirectionalPolicy.IGNORE
        return cls(
            row_width=args.width,
            directional_policy=policy,
            confirm_quit=not args.no_confirm_quit,
        )
