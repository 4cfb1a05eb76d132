"""
Extension-based file classification.

Maps file extensions to categories and categories to localized folder labels.
Classification is by extension only, never by content.
"""

from pathlib import Path
from typing import Dict, FrozenSet, Union

from .types import Category, Locale

# Extensions per category, lower-case, without the leading dot
CATEGORY_EXTENSIONS: Dict[Category, FrozenSet[str]] = {
    Category.IMAGES: frozenset(
        {"jpg", "jpeg", "png", "gif", "heic", "svg", "tiff", "bmp", "webp", "raw"}
    ),
    Category.VIDEOS: frozenset({"mp4", "mov", "mkv", "avi", "webm", "m4v"}),
    Category.MUSIC: frozenset({"mp3", "wav", "aac", "flac", "m4a", "ogg", "wma"}),
    Category.DOCUMENTS: frozenset(
        {
            "pdf",
            "doc",
            "docx",
            "xls",
            "xlsx",
            "ppt",
            "pptx",
            "txt",
            "pages",
            "numbers",
            "key",
            "md",
            "rtf",
        }
    ),
    Category.ARCHIVES: frozenset({"zip", "rar", "7z", "tar", "gz", "dmg", "iso"}),
    Category.APPS: frozenset({"app", "exe", "pkg"}),
    Category.CODE: frozenset(
        {"swift", "py", "js", "html", "css", "c", "cpp", "json", "java", "php", "ts"}
    ),
    Category.OTHER: frozenset(),
}

# Reverse index; each extension belongs to exactly one category
_EXTENSION_INDEX: Dict[str, Category] = {
    ext: category
    for category, extensions in CATEGORY_EXTENSIONS.items()
    for ext in extensions
}

CATEGORY_LABELS: Dict[Locale, Dict[Category, str]] = {
    Locale.ENGLISH: {
        Category.IMAGES: "Images",
        Category.VIDEOS: "Videos",
        Category.MUSIC: "Music",
        Category.DOCUMENTS: "Documents",
        Category.ARCHIVES: "Archives",
        Category.APPS: "Apps",
        Category.CODE: "Code",
        Category.OTHER: "Other",
    },
    Locale.FRENCH: {
        Category.IMAGES: "Images",
        Category.VIDEOS: "Vidéos",
        Category.MUSIC: "Musique",
        Category.DOCUMENTS: "Documents",
        Category.ARCHIVES: "Archives",
        Category.APPS: "Apps",
        Category.CODE: "Code",
        Category.OTHER: "Autres",
    },
}


def classify(extension: str) -> Category:
    """
    Map a file extension to its category.

    Args:
        extension: Extension with or without the leading dot, any case

    Returns:
        Matching category, or Category.OTHER for unknown or empty extensions
    """
    ext = extension.lower().lstrip(".")
    return _EXTENSION_INDEX.get(ext, Category.OTHER)


def classify_path(path: Union[Path, str]) -> Category:
    """Classify a file by the last suffix of its name."""
    return classify(Path(path).suffix)


def category_label(category: Category, locale: Locale = Locale.ENGLISH) -> str:
    """Get the localized folder label for a category."""
    return CATEGORY_LABELS[Locale(locale)][Category(category)]


def extensions_for(category: Category) -> FrozenSet[str]:
    """Get the extensions associated with a category."""
    return CATEGORY_EXTENSIONS[Category(category)]
