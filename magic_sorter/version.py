"""Version of the magic-sorter package, with the git revision when run from a checkout."""

import subprocess
from pathlib import Path
from typing import Optional

__version__ = "1.0.0"

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def get_git_hash(length: int = 7) -> Optional[str]:
    """Short hash of the checked out commit, or None outside a git checkout."""
    command = ["git", "rev-parse", f"--short={length}", "HEAD"]
    try:
        completed = subprocess.run(
            command,
            cwd=PACKAGE_ROOT,
            capture_output=True,
            text=True,
            check=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError):
        # git missing, not a repository, or too slow to answer
        return None
    return completed.stdout.strip() or None


def get_version_string() -> str:
    """Version shown by --version and the interactive banner."""
    git_hash = get_git_hash()
    return f"{__version__} (git:{git_hash})" if git_hash else __version__
