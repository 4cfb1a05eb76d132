"""Tests for extension-based classification."""

from pathlib import Path

import pytest

from magic_sorter.core.categories import (
    CATEGORY_EXTENSIONS,
    CATEGORY_LABELS,
    category_label,
    classify,
    classify_path,
    extensions_for,
)
from magic_sorter.core.types import Category, Locale

ALL_KNOWN = [
    (ext, category)
    for category, extensions in CATEGORY_EXTENSIONS.items()
    for ext in sorted(extensions)
]


class TestClassify:
    """Test classify()."""

    @pytest.mark.parametrize("ext,category", ALL_KNOWN)
    def test_known_extensions(self, ext: str, category: Category) -> None:
        """Test every mapped extension resolves to its category."""
        assert classify(ext) == category

    @pytest.mark.parametrize("ext,category", ALL_KNOWN)
    def test_case_insensitive(self, ext: str, category: Category) -> None:
        """Test upper-case extensions classify like lower-case ones."""
        assert classify(ext.upper()) == classify(ext) == category

    @pytest.mark.parametrize("ext", ["", "xyz", "docxx", "jp", "backup", "."])
    def test_unknown_extensions_are_other(self, ext: str) -> None:
        """Test unmapped or empty extensions resolve to other."""
        assert classify(ext) == Category.OTHER

    def test_leading_dot_is_tolerated(self) -> None:
        """Test '.JPG' and 'jpg' classify the same."""
        assert classify(".JPG") == Category.IMAGES

    def test_each_extension_has_one_category(self) -> None:
        """Test no extension is listed under two categories."""
        seen = {}
        for category, extensions in CATEGORY_EXTENSIONS.items():
            for ext in extensions:
                assert ext not in seen, f"{ext} in {seen.get(ext)} and {category}"
                seen[ext] = category

    def test_other_has_no_extensions(self) -> None:
        assert extensions_for(Category.OTHER) == frozenset()


class TestClassifyPath:
    """Test classify_path()."""

    def test_uses_last_suffix(self) -> None:
        """Test multi-suffix names use the last suffix."""
        assert classify_path(Path("backup.tar.gz")) == Category.ARCHIVES
        assert classify_path("notes.final.TXT") == Category.DOCUMENTS

    def test_no_suffix(self) -> None:
        assert classify_path(Path("Makefile")) == Category.OTHER


class TestCategoryLabel:
    """Test localized labels."""

    def test_every_category_has_labels(self) -> None:
        """Test both locales label every category."""
        for locale in Locale:
            assert set(CATEGORY_LABELS[locale]) == set(Category)

    def test_english_labels(self) -> None:
        assert category_label(Category.IMAGES) == "Images"
        assert category_label(Category.MUSIC, Locale.ENGLISH) == "Music"
        assert category_label(Category.OTHER, Locale.ENGLISH) == "Other"

    def test_french_labels(self) -> None:
        assert category_label(Category.VIDEOS, Locale.FRENCH) == "Vidéos"
        assert category_label(Category.MUSIC, Locale.FRENCH) == "Musique"
        assert category_label(Category.OTHER, Locale.FRENCH) == "Autres"

    def test_accepts_raw_values(self) -> None:
        """Test string tags and locale codes are accepted."""
        assert category_label("documents", "fr") == "Documents"
