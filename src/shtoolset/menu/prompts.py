"""
============================================================
 File: prompts.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Punti di decisione interattivi (conferme, selezione
     multipla, pausa) implementati con Rich. L'executor e il
     menu ricevono un oggetto con questa interfaccia, così nei
     test possono essere sostituiti da risposte predefinite.
============================================================
"""

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.table import Table

from shtoolset.models.script_model import ConfirmationResult

ACK_MESSAGE = "Press Enter to return to the main menu"

_CONFIRM_CHOICES = {
    "y": ConfirmationResult.PROCEED,
    "e": ConfirmationResult.BACK_TO_SELECTION,
    "b": ConfirmationResult.BACK_TO_CATEGORY,
    "q": ConfirmationResult.EXIT,
}

_RANDOM_CHOICES = {
    "y": ConfirmationResult.PROCEED,
    "r": ConfirmationResult.BACK_TO_SELECTION,
    "b": ConfirmationResult.BACK_TO_CATEGORY,
    "q": ConfirmationResult.EXIT,
}


def parse_selection(text, count):
    """
    Interpreta una selezione come "1,3,5-7" o "a" (tutti).

    Restituisce gli indici (base 0) senza duplicati e nell'ordine
    della lista, None per "0" (torna indietro).

    Raises:
        ValueError: input non valido o fuori intervallo
    """
    text = (text or "").strip().lower()
    if text == "0":
        return None
    if text in ("a", "all"):
        return list(range(count))
    if not text:
        raise ValueError("empty selection")

    chosen = set()
    for token in text.replace(" ", ",").split(","):
        if not token:
            continue
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            start, end = int(start_str), int(end_str)
            if start > end:
                start, end = end, start
            numbers = range(start, end + 1)
        else:
            numbers = [int(token)]
        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"{number} is out of range (1-{count})")
            chosen.add(number - 1)
    if not chosen:
        raise ValueError("empty selection")
    return sorted(chosen)


def format_selection(indexes):
    return ",".join(str(i + 1) for i in indexes)


class RichPrompter:
    def __init__(self, console=None):
        self.console = console or Console()

    def ask_continue(self):
        return Confirm.ask("Continue with the next script?", default=True, console=self.console)

    def pause(self, message=ACK_MESSAGE):
        Prompt.ask(f"\n[dim]{message}[/dim]", default="", show_default=False, console=self.console)

    def _entries_table(self, entries, numbered=True):
        table = Table(show_header=True, header_style="bold blue")
        if numbered:
            table.add_column("No.", justify="right")
        table.add_column("Script Name")
        table.add_column("Description")
        table.add_column("Sudo", justify="center")
        for idx, entry in enumerate(entries, start=1):
            row = [escape(entry.name), escape(entry.description), "[yellow]yes[/yellow]" if entry.needs_sudo else ""]
            if numbered:
                row.insert(0, str(idx))
            table.add_row(*row)
        return table

    def select_scripts(self, label, entries, previous=None):
        """Selezione multipla; None se l'operatore torna indietro"""
        while True:
            self.console.print(f"\n[bold magenta]Category: {escape(label)}[/bold magenta]")
            table = self._entries_table(entries)
            table.add_row("0", "Back", "Return to category selection", "")
            self.console.print(table)

            kwargs = {"default": format_selection(previous)} if previous else {}
            answer = Prompt.ask(
                "\nSelect scripts (e.g. 1,3-5, 'a' for all)",
                console=self.console,
                **kwargs,
            )
            try:
                return parse_selection(answer, len(entries))
            except ValueError as e:
                self.console.print(f"[red]Invalid selection: {e}[/red]")

    def confirm_execution(self, entries):
        if not entries:
            self.console.print("[yellow]No valid scripts selected.[/yellow]")
            return ConfirmationResult.BACK_TO_SELECTION

        self.console.print("\n[bold cyan]Scripts to run[/bold cyan]")
        self.console.print(self._entries_table(entries, numbered=False))
        choice = Prompt.ask(
            r"Run now? \[y]es / \[e]dit selection / \[b]ack to categories / \[q]uit",
            choices=list(_CONFIRM_CHOICES),
            default="y",
            show_choices=False,
            console=self.console,
        )
        if choice == "e":
            self.console.print("[dim]Execution cancelled.[/dim]")
        return _CONFIRM_CHOICES[choice]

    def confirm_random(self, entry):
        self.console.print(f"\n[bold cyan]Random pick:[/bold cyan] [bold]{escape(entry.name)}[/bold]")
        if entry.description:
            self.console.print(f"[dim]{escape(entry.description)}[/dim]")
        choice = Prompt.ask(
            r"Run it? \[y]es / \[r]oll again / \[b]ack to categories / \[q]uit",
            choices=list(_RANDOM_CHOICES),
            default="y",
            show_choices=False,
            console=self.console,
        )
        return _RANDOM_CHOICES[choice]
