"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Funzioni di utilità dedicate alla gestione di file.
     Legge solo le prime righe di un file di testo, quanto
     basta per interpretare l'intestazione di uno script.
============================================================
"""

from itertools import islice
from pathlib import Path


def load_head(path, max_lines):
    """
    Restituisce al massimo max_lines righe del file, senza terminatori.

    I byte non decodificabili vengono sostituiti. Gli OSError
    (file mancante, permessi) vengono propagati al chiamante.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\r\n") for line in islice(f, max_lines)]
