"""
============================================================
 File: paths.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Risoluzione della cartella radice degli script. Prova i
     candidati in ordine di priorità e sceglie il primo che
     può essere preparato. Il popolamento con script di
     default è affidato all'hook prepare.
============================================================
"""

from dataclasses import dataclass
from pathlib import Path

from shtoolset.errors import RootUnavailable
from shtoolset.utils.logger import logger


@dataclass(frozen=True)
class RootCandidate:
    path: Path
    create: bool = True


def ensure_directory(path):
    Path(path).mkdir(parents=True, exist_ok=True)


def resolve_script_root(candidates, prepare=ensure_directory):
    """
    Restituisce la prima cartella candidata utilizzabile.

    Args:
        candidates: sequenza di RootCandidate in ordine di priorità
        prepare: callable(Path) che crea o popola la cartella

    Raises:
        RootUnavailable: se nessun candidato è utilizzabile
    """
    tried = []
    for candidate in candidates:
        path = Path(candidate.path).expanduser()
        tried.append(path)

        if not candidate.create and not path.exists():
            logger.debug(f"Candidato saltato (non esiste): {path}")
            continue

        try:
            prepare(path)
        except OSError as e:
            logger.warning(f"Impossibile preparare la cartella script {path}: {e}")
            continue

        if path.is_dir():
            resolved = path.resolve()
            logger.info(f"Cartella script: {resolved}")
            return resolved

        logger.warning(f"Il candidato non è una cartella: {path}")

    raise RootUnavailable(tried)
