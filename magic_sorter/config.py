"""Application configuration."""

from typing import Set

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.types import Category, Locale, SortOptions


class Settings(BaseSettings):
    """Default sort options loaded from environment variables."""

    locale: Locale = Locale.ENGLISH
    recursive: bool = False
    dry_run: bool = False
    create_parent_folder: bool = True
    parent_folder_name: str = ""
    disabled_categories: Set[Category] = Field(default_factory=set)

    # Number of log events kept for display
    log_capacity: int = Field(default=150, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="MAGIC_SORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_sort_options(self, **overrides: object) -> SortOptions:
        """
        Build an immutable options snapshot from these settings.

        Args:
            **overrides: Option values replacing the configured ones

        Returns:
            Sort options for one run
        """
        values = {
            "locale": self.locale,
            "recursive": self.recursive,
            "dry_run": self.dry_run,
            "create_parent_folder": self.create_parent_folder,
            "parent_folder_name": self.parent_folder_name,
            "disabled_categories": frozenset(self.disabled_categories),
        }
        values.update(overrides)
        return SortOptions(**values)


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
