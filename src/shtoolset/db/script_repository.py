"""
============================================================
 File: script_repository.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Questo modulo scopre gli script .sh presenti nella
     cartella radice e nelle sue sottocartelle. Ogni cartella
     (a qualsiasi profondità) che contiene direttamente dei
     file .sh diventa una categoria, identificata dal suo
     percorso relativo alla radice.

     La scansione non usa cache: ogni chiamata rilegge il
     filesystem, così script aggiunti o rimossi tra un giro
     del menu e l'altro vengono visti subito.
============================================================
"""

import os
from pathlib import Path

from shtoolset.models.script_model import CategoryInfo
from shtoolset.utils.formatting import format_display_path, natural_key
from shtoolset.utils.logger import logger

SCRIPT_SUFFIX = ".sh"


def _is_script(name):
    return name.endswith(SCRIPT_SUFFIX) and not name.startswith(".")


def _sorted_by_filename(paths):
    return sorted(paths, key=natural_key)


class ScriptRepository:
    def __init__(self, base_path="scripts"):
        self.base_path = Path(base_path).expanduser().resolve()

    def list_root_scripts(self):
        """Script .sh direttamente nella radice (non ricorsivo)"""
        try:
            with os.scandir(self.base_path) as entries:
                scripts = [
                    self.base_path / entry.name
                    for entry in entries
                    if _is_script(entry.name) and entry.is_file()
                ]
        except OSError as e:
            logger.debug(f"Radice non leggibile {self.base_path}: {e}")
            return []
        return _sorted_by_filename(scripts)

    def collect_categories(self):
        """Tutte le cartelle sotto la radice con file .sh diretti, ordinate per nome"""
        if not self.base_path.is_dir():
            return []

        def _skip(error):
            # La sottocartella viene saltata, la scansione prosegue
            logger.debug(f"Cartella saltata durante la scansione: {error}")

        categories = []
        # I link a cartelle vengono seguiti; una cartella reale già vista non viene riletta (cicli)
        seen = {os.path.realpath(self.base_path)}
        for dirpath, dirnames, filenames in os.walk(self.base_path, onerror=_skip, followlinks=True):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]

            current = Path(dirpath)
            if current == self.base_path:
                continue

            real = os.path.realpath(dirpath)
            if real in seen:
                logger.debug(f"Cartella già visitata, saltata: {dirpath} -> {real}")
                dirnames[:] = []
                continue
            seen.add(real)

            scripts = [
                current / name
                for name in filenames
                if _is_script(name) and (current / name).is_file()
            ]
            if not scripts:
                continue

            segments = current.relative_to(self.base_path).parts
            categories.append(CategoryInfo(
                name="/".join(segments),
                display_name=format_display_path(segments),
                dir_path=current,
                script_paths=tuple(_sorted_by_filename(scripts)),
            ))

        categories.sort(key=lambda c: natural_key(c.name))
        return categories

    def get_scripts_by_category(self, category, categories=None):
        """Percorsi degli script di una categoria, lista vuota se non esiste"""
        for info in categories if categories is not None else self.collect_categories():
            if info.name == category:
                return list(info.script_paths)
        return []

    def get_all_scripts(self, root_scripts=None, categories=None):
        """Script della radice più quelli di ogni categoria, ordinati per nome file"""
        if root_scripts is None:
            root_scripts = self.list_root_scripts()
        if categories is None:
            categories = self.collect_categories()
        paths = list(root_scripts)
        for info in categories:
            paths.extend(info.script_paths)
        return _sorted_by_filename(paths)

    def total_scripts(self, root_scripts=None, categories=None):
        if root_scripts is None:
            root_scripts = self.list_root_scripts()
        if categories is None:
            categories = self.collect_categories()
        return len(root_scripts) + sum(c.script_count for c in categories)
