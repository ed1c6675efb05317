"""
============================================================
 File: console.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Messaggi di stato per l'operatore (info, successo,
     avviso, errore) stampati con Rich.
============================================================
"""

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

ICONS = {
    "info": "ℹ",
    "success": "✔",
    "warning": "⚠",
    "error": "✖",
}

STYLES = {
    "info": "bold bright_blue",
    "success": "bold bright_green",
    "warning": "bold yellow",
    "error": "bold bright_red",
}


def report(console: Console, level: str, message: str) -> None:
    style = STYLES[level]
    console.print(f"[{style}]{ICONS[level]} {escape(message)}[/{style}]", highlight=False)


def draw_line(console: Console, char: str = "─") -> None:
    console.print(Rule(characters=char, style="dim"))
