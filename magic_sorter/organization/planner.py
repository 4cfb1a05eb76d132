"""
Destination planning for sorted files.

Computes category folders and collision-free destination paths. The planner
only reads the filesystem through an existence oracle, so it can be tested
against a fake filesystem.
"""

import os
from pathlib import Path
from typing import Callable, List, Union

from ..core.categories import category_label
from ..core.messages import default_parent_folder_name
from ..core.types import Category, Locale, PlannedMove, SortOptions
from ..shared.path_utils import is_within_any

ExistsOracle = Callable[[Path], bool]


def resolve_parent_folder_name(name: str, locale: Locale = Locale.ENGLISH) -> str:
    """Use the user-supplied name if not blank, else the localized default."""
    name = name.strip()
    return name if name else default_parent_folder_name(locale)


def resolve_destination_root(root: Path, options: SortOptions) -> Path:
    """
    Get the folder category folders are created in.

    Args:
        root: Source directory being sorted
        options: Run options

    Returns:
        root itself, or root / parent folder name
    """
    if not options.create_parent_folder:
        return root
    return root / resolve_parent_folder_name(
        options.parent_folder_name, options.locale
    )


def numbered_candidate(folder: Path, name: str, counter: int) -> Path:
    """Build "<stem> <counter><suffix>" inside folder."""
    original = Path(name)
    return folder / f"{original.stem} {counter}{original.suffix}"


class DestinationPlanner:
    """Plan where each file of a run goes."""

    def __init__(
        self,
        root: Union[Path, str],
        options: SortOptions,
        exists: ExistsOracle = os.path.exists,
    ) -> None:
        """
        Initialize the planner.

        Args:
            root: Source directory being sorted
            options: Run options
            exists: Existence check used for collision resolution
        """
        self.root = Path(root)
        self.options = options
        self.exists = exists
        self.destination_root = resolve_destination_root(self.root, options)

    def category_folder(self, category: Category) -> Path:
        """Get the localized folder for a category."""
        return self.destination_root / category_label(category, self.options.locale)

    def destination_tree(self) -> List[Path]:
        """
        Get the folders this run writes into.

        With a parent folder this is the parent folder. Without one the files
        land directly in the source root, so only the category folders count.
        """
        if self.destination_root != self.root:
            return [self.destination_root]
        return [self.category_folder(category) for category in Category]

    def is_in_destination(self, path: Path) -> bool:
        """Check if a path already lies inside the destination tree."""
        return is_within_any(Path(path), self.destination_tree())

    def resolve_collision(self, source: Path, candidate: Path) -> Path:
        """
        Find a free name for source, starting at candidate.

        Appends " 1", " 2", ... before the extension while the candidate
        exists. Stops early if the candidate is the source itself.

        Args:
            source: File being moved
            candidate: Preferred destination

        Returns:
            Collision-free destination path, or source if already in place
        """
        folder = candidate.parent
        counter = 1
        while candidate != source and self.exists(candidate):
            candidate = numbered_candidate(folder, source.name, counter)
            counter += 1
        return candidate

    def plan(self, source: Union[Path, str], category: Category) -> PlannedMove:
        """
        Plan the move of a single file.

        Args:
            source: File to move
            category: Category of the file

        Returns:
            Planned move with a collision-free destination
        """
        source = Path(source)
        candidate = self.category_folder(category) / source.name
        destination = self.resolve_collision(source, candidate)
        return PlannedMove(
            source_path=source,
            destination_path=destination,
            category=category,
        )
