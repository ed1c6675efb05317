"""
============================================================
 File: formatting.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Funzioni di supporto per ordinamento e presentazione:
     chiave di ordinamento locale dei nomi file, nomi di
     categoria leggibili, data/ora e nome utente.
============================================================
"""

import getpass
import locale
import os
import re
from datetime import datetime
from pathlib import Path

_SEGMENT_SEPARATORS = re.compile(r"[-_]")


def natural_key(value):
    """Chiave di ordinamento dipendente dalla locale, senza distinzione maiuscole"""
    text = value.name if isinstance(value, Path) else str(value)
    return (locale.strxfrm(text.casefold()), text)


def format_category_name(segment: str) -> str:
    """'dev_tools' -> 'Dev Tools'"""
    parts = [p for p in _SEGMENT_SEPARATORS.split(segment) if p]
    return " ".join(p[0].upper() + p[1:] for p in parts)


def format_display_path(segments) -> str:
    return " / ".join(format_category_name(s) for s in segments)


def format_datetime(now=None) -> str:
    now = now or datetime.now()
    return now.strftime("%A %d %B %Y - %H:%M:%S")


def resolve_user_name() -> str:
    for var in ("SUDO_USER", "USER", "LOGNAME"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "user"
