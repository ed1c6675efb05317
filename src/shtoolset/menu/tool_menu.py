"""
============================================================
File: tool_menu.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Modulo responsabile della gestione del menu principale
dell'applicazione usando la libreria Rich.
A ogni giro il menu riscansiona la cartella degli script,
mostra le categorie, risolve la scelta e passa gli script
selezionati all'executor.
============================================================
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from shtoolset.errors import EntryLoadError
from shtoolset.menu.selection import SelectionModel
from shtoolset.models.script_model import ConfirmationResult, SelectionKind
from shtoolset.utils.console import report
from shtoolset.utils.formatting import format_datetime, resolve_user_name
from shtoolset.utils.logger import logger


class ToolMenu:
    def __init__(self, repository, loader, executor, header, prompter,
                 console=None, rng=None, title="SH-Toolset"):
        self.repository = repository
        self.loader = loader
        self.executor = executor
        self.header = header
        self.prompter = prompter
        self.console = console or Console()
        self.rng = rng
        self.title = title

    def start(self):
        while True:
            model = SelectionModel(self.repository, rng=self.rng)
            self._show_intro(model)

            if not model.all_scripts:
                report(self.console, "warning", f"No .sh scripts found in '{self.repository.base_path}'.")
                self.show_outro()
                break

            selection = self._prompt_category(model)
            if self.handle_selection(selection, model):
                break

        report(self.console, "success", f"Thank you for using {self.title}!")

    def _show_intro(self, model):
        facts = [
            f"[cyan]Repository[/cyan]: [bold]{escape(self.header.repo_url)}[/bold]",
            f"[cyan]Install location[/cyan]: [bold]{escape(str(self.header.install_location))}[/bold]",
            f"[cyan]Date[/cyan]: [bold]{format_datetime()}[/bold]",
            f"[cyan]Total categories[/cyan]: [bold]{len(model.categories)}[/bold]",
            f"[cyan]Total scripts[/cyan]: [bold]{model.total_scripts}[/bold]",
        ]
        if model.root_scripts:
            facts.append(f"[cyan]Root scripts[/cyan]: [bold]{len(model.root_scripts)}[/bold]")

        self.console.print(f"\n[bold cyan]{escape(self.title)}[/bold cyan] - Welcome, {escape(resolve_user_name())}!")
        self.console.print(Panel("\n".join(facts), title="Repository information", border_style="cyan"))

    def _prompt_category(self, model):
        options = [
            ("All Scripts", f"Combine {model.total_scripts} scripts from every category", model.all),
            ("Random", "Pick one random script from every category", model.random),
        ]
        if model.root_scripts:
            options.append(("Root Scripts", f"{len(model.root_scripts)} scripts at root level", model.root))
        for info in model.categories:
            options.append((
                info.display_name,
                f"{info.script_count} scripts",
                lambda name=info.name: model.category(name),
            ))

        table = Table(show_header=True, header_style="bold blue")
        table.add_column("No.", justify="right")
        table.add_column("Category")
        table.add_column("Details")
        for idx, (label, hint, _) in enumerate(options, start=1):
            table.add_row(str(idx), escape(label), hint)
        table.add_row("0", "Exit", "Close the application")

        self.console.print("\n[bold cyan]Select a category or execution mode[/bold cyan]\n")
        self.console.print(table)
        choice = Prompt.ask(
            "\nSelect a category",
            choices=[str(i) for i in range(len(options) + 1)],
            show_choices=False,
            console=self.console,
        )
        if choice == "0":
            return model.exit()
        return options[int(choice) - 1][2]()

    def handle_selection(self, selection, model):
        """Gestisce la scelta; True se l'utente ha chiesto di uscire"""
        if selection.kind is SelectionKind.EXIT:
            self.show_outro()
            return True

        try:
            entries = self.loader.load(selection.script_paths)
        except EntryLoadError as e:
            logger.error(str(e))
            report(self.console, "error", str(e))
            return False

        if not entries:
            report(self.console, "warning", "The selected category has no scripts yet.")
            return False

        if selection.kind is SelectionKind.RANDOM:
            return self._handle_random(entries, model)
        return self._handle_multi(selection.label, entries)

    def _handle_random(self, entries, model):
        while True:
            entry = entries[model.draw(entries)]
            logger.debug(f"Random ha scelto {entry.name}")
            confirmation = self.prompter.confirm_random(entry)

            if confirmation is ConfirmationResult.PROCEED:
                self.executor.run([entry], self.header)
                return False
            if confirmation is ConfirmationResult.BACK_TO_CATEGORY:
                return False
            if confirmation is ConfirmationResult.EXIT:
                self.show_outro()
                return True
            # BACK_TO_SELECTION: nuova estrazione

    def _handle_multi(self, label, entries):
        previous = []
        while True:
            indexes = self.prompter.select_scripts(label, entries, previous)
            if indexes is None:
                return False
            previous = list(indexes)

            chosen = [entries[i] for i in indexes if 0 <= i < len(entries)]
            confirmation = self.prompter.confirm_execution(chosen)

            if confirmation is ConfirmationResult.PROCEED:
                self.executor.run(chosen, self.header)
                return False
            if confirmation is ConfirmationResult.BACK_TO_CATEGORY:
                return False
            if confirmation is ConfirmationResult.EXIT:
                self.show_outro()
                return True
            # BACK_TO_SELECTION: si torna alla selezione mantenendo la precedente

    def show_outro(self):
        self.console.print("[bold green]See you next time! ✨[/bold green]")
