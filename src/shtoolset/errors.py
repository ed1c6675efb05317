"""
============================================================
 File: errors.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Eccezioni del toolset. Gli errori di lettura durante la
     scansione delle cartelle non compaiono qui: vengono
     registrati nel log e la sottocartella viene saltata.
============================================================
"""


class ToolsetError(Exception):
    """Classe base per tutti gli errori del toolset"""


class RootUnavailable(ToolsetError):
    """Nessuna cartella degli script utilizzabile: errore fatale per la sessione"""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        tried = ", ".join(str(c) for c in self.candidates) or "nessuna"
        super().__init__(f"Script directory could not be prepared (tried: {tried})")


class EntryLoadError(ToolsetError):
    """Impossibile leggere l'intestazione di uno script"""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read script '{path}': {reason}")


class SudoAuthFailure(ToolsetError):
    """Autorizzazione sudo non ottenuta: il batch viene abbandonato"""
