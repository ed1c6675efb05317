"""
============================================================
 File: script_loader.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Costruisce gli oggetti ScriptEntry leggendo l'intestazione
     di ogni script: descrizione dal primo commento e marcatore
     che indica la necessità di sudo.

     La cache appartiene al loader e vive quanto la sessione.
     Non viene mai invalidata: uno script modificato durante
     la sessione mantiene i dati letti la prima volta.
============================================================
"""

import os
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from shtoolset.errors import EntryLoadError
from shtoolset.models.script_model import ScriptEntry
from shtoolset.utils.file_loader import load_head
from shtoolset.utils.logger import logger

DESCRIPTION_SCAN_LINES = 20
SUDO_SCAN_LINES = 5
SUDO_MARKER = re.compile(r"needs-sudo|require.*sudo|require.*root")
_COMMENT_PREFIX = re.compile(r"^#+\s*")


def extract_description(lines):
    """Testo del primo commento in testa al file, stringa vuota se manca"""
    for line in lines[:DESCRIPTION_SCAN_LINES]:
        if line.startswith("#!"):
            continue
        trimmed = line.strip()
        if not trimmed:
            continue
        if trimmed.startswith("#"):
            return _COMMENT_PREFIX.sub("", trimmed)
        break
    return ""


def detect_sudo(lines):
    header = "\n".join(lines[:SUDO_SCAN_LINES]).lower()
    return SUDO_MARKER.search(header) is not None


def _cache_key(path):
    return Path(os.path.abspath(os.path.expanduser(str(path))))


class ScriptEntryLoader:
    """Loader con cache per-sessione degli ScriptEntry"""

    def __init__(self, max_workers=8):
        self.max_workers = max(1, max_workers)
        self._cache = {}

    def __contains__(self, path):
        return _cache_key(path) in self._cache

    def __len__(self):
        return len(self._cache)

    def load_one(self, path):
        key = _cache_key(path)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        return self._cache.setdefault(key, self._read_entry(key))

    def load(self, paths):
        """
        Carica gli entry nell'ordine dei percorsi ricevuti.

        Le intestazioni non ancora in cache vengono lette in
        parallelo. Il primo errore di lettura interrompe il
        caricamento con EntryLoadError.
        """
        keys = [_cache_key(p) for p in paths]
        missing = list(dict.fromkeys(k for k in keys if k not in self._cache))

        if missing:
            logger.debug(f"Lettura intestazioni di {len(missing)} script")
            workers = min(self.max_workers, len(missing))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                for key, entry in zip(missing, pool.map(self._read_entry, missing)):
                    self._cache.setdefault(key, entry)

        return [self._cache[k] for k in keys]

    @staticmethod
    def _read_entry(path):
        try:
            lines = load_head(path, DESCRIPTION_SCAN_LINES)
        except OSError as e:
            logger.error(f"Lettura fallita per {path}: {e}")
            raise EntryLoadError(path, e.strerror or str(e)) from e

        return ScriptEntry(
            path=path,
            name=path.name,
            description=extract_description(lines),
            needs_sudo=detect_sudo(lines),
        )
