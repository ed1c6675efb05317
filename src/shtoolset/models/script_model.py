"""
============================================================
 File: script_model.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Modelli dati del toolset. Uno script scoperto su disco,
     le categorie ricavate dalle cartelle, la scelta fatta
     dall'utente nel menu e il riepilogo di un'esecuzione.
     Tutti i modelli sono immutabili.
============================================================
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class ScriptEntry:
    """Uno script .sh con le informazioni lette dalla sua intestazione"""
    path: Path
    name: str
    description: str = ""
    needs_sudo: bool = False


@dataclass(frozen=True)
class CategoryInfo:
    """Cartella sotto la root che contiene direttamente file .sh"""
    name: str
    display_name: str
    dir_path: Path
    script_paths: Tuple[Path, ...] = ()

    @property
    def script_count(self) -> int:
        return len(self.script_paths)

    @property
    def depth(self) -> int:
        return len(self.name.split("/"))


class SelectionKind(Enum):
    ALL = "all"
    RANDOM = "random"
    CATEGORY = "category"
    EXIT = "exit"


@dataclass(frozen=True)
class Selection:
    """Scelta fatta nel menu principale, già risolta in una lista di percorsi"""
    kind: SelectionKind
    label: str = ""
    script_paths: Tuple[Path, ...] = ()

    @property
    def is_exit(self) -> bool:
        return self.kind is SelectionKind.EXIT


class ConfirmationResult(Enum):
    PROCEED = "proceed"
    BACK_TO_SELECTION = "back_to_selection"
    BACK_TO_CATEGORY = "back_to_category"
    EXIT = "exit"


@dataclass(frozen=True)
class HeaderContext:
    """Informazioni mostrate in testa al menu, costruite una volta all'avvio"""
    repo_url: str
    install_location: Path


@dataclass(frozen=True)
class ScriptResult:
    entry: ScriptEntry
    exit_code: Optional[int] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class ExecutionSummary:
    """Esito di un batch. Le liste seguono l'ordine di completamento."""
    succeeded: Tuple[ScriptEntry, ...] = ()
    failed: Tuple[ScriptEntry, ...] = ()
    results: Tuple[ScriptResult, ...] = field(default=(), repr=False)
    duration_seconds: int = 0
    sudo_denied: bool = False
    stopped_by_user: bool = False

    @property
    def total_run(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.sudo_denied and not self.failed
