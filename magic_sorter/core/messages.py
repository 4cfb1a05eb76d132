"""Localized messages for log events."""

from typing import Dict

from .types import Locale

MESSAGES: Dict[Locale, Dict[str, str]] = {
    Locale.ENGLISH: {
        "sort_started": "--- SORTING STARTED ---",
        "simulation_started": "--- SIMULATION STARTED ---",
        "read_error": "Error reading directory",
        "no_files": "No files found.",
        "would_move": "Would move: {name} -> {label}",
        "moved": "Moved: {name}",
        "move_error": "Error moving {name}: {reason}",
        "finished": "Finished.",
        "undo_started": "Undoing last operation...",
        "restore_error": "Error restoring {name}: {reason}",
        "undo_complete": "Undo complete: {count} files restored.",
        "default_parent_folder": "Sorted",
    },
    Locale.FRENCH: {
        "sort_started": "--- TRI DÉMARRÉ ---",
        "simulation_started": "--- SIMULATION DÉMARRÉE ---",
        "read_error": "Erreur de lecture du dossier",
        "no_files": "Aucun fichier trouvé.",
        "would_move": "Déplacerait : {name} -> {label}",
        "moved": "Déplacé : {name}",
        "move_error": "Erreur de déplacement de {name} : {reason}",
        "finished": "Terminé.",
        "undo_started": "Annulation en cours...",
        "restore_error": "Erreur de restauration de {name} : {reason}",
        "undo_complete": "Annulation terminée : {count} fichiers restaurés.",
        "default_parent_folder": "Trié",
    },
}


def message(key: str, locale: Locale = Locale.ENGLISH, **kwargs: object) -> str:
    """
    Look up and format a localized message.

    Args:
        key: Message key
        locale: Display language
        **kwargs: Values substituted into the template

    Returns:
        Formatted message
    """
    return MESSAGES[Locale(locale)][key].format(**kwargs)


def default_parent_folder_name(locale: Locale = Locale.ENGLISH) -> str:
    """Parent folder name used when the user leaves it blank."""
    return message("default_parent_folder", locale)
