"""
============================================================
File: script_executor.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-18

Description:
Esecuzione di un batch di script, uno alla volta e nell'ordine
ricevuto. Se almeno uno script richiede sudo le credenziali
vengono verificate una sola volta prima di iniziare; senza
autorizzazione il batch viene abbandonato senza eseguire nulla.

Ogni script gira in primo piano ereditando stdin/stdout/stderr
del terminale, quindi gli script interattivi funzionano come
se fossero lanciati a mano. Non c'è timeout.
============================================================
"""

import os
import subprocess
import time

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from shtoolset.errors import SudoAuthFailure
from shtoolset.models.script_model import ExecutionSummary, ScriptResult
from shtoolset.utils.console import draw_line, report
from shtoolset.utils.formatting import format_datetime
from shtoolset.utils.logger import logger

SCRIPT_MODE = 0o755


class ScriptExecutor:
    """Esegue gli script selezionati e produce un ExecutionSummary"""

    def __init__(self, prompter, console=None, shell="bash", sudo="sudo",
                 runner=None, clock=time.monotonic):
        self.prompter = prompter
        self.console = console or Console()
        self.shell = shell
        self.sudo = sudo
        # Stessa firma di subprocess.run; sostituibile nei test
        self.runner = runner or subprocess.run
        self.clock = clock

    def build_command(self, entry):
        command = [self.shell, str(entry.path)]
        if entry.needs_sudo:
            command.insert(0, self.sudo)
        return command

    def run(self, entries, header):
        entries = list(entries)
        if not entries:
            report(self.console, "warning", "No scripts to run.")
            return ExecutionSummary()

        self._render_intro(len(entries), header)
        logger.info(f"Avvio batch di {len(entries)} script da {header.install_location}")

        try:
            self.ensure_sudo(entries)
        except SudoAuthFailure as e:
            logger.error(f"Batch annullato: {e}")
            report(self.console, "error", "Cannot continue without the required sudo access.")
            self.prompter.pause()
            return ExecutionSummary(sudo_denied=True)

        succeeded = []
        failed = []
        results = []
        stopped = False
        start = self.clock()

        for index, entry in enumerate(entries):
            step = escape(f"[{index + 1}/{len(entries)}]")
            self.console.print(f"\n[bold]Running {step} {escape(entry.name)}[/bold]")
            result = self.run_one(entry)
            results.append(result)

            if result.ok:
                succeeded.append(entry)
                continue

            failed.append(entry)
            if index < len(entries) - 1 and not self.prompter.ask_continue():
                report(self.console, "info", "Execution stopped by user.")
                logger.info(f"Batch interrotto dall'utente dopo {entry.name}")
                stopped = True
                break

        # .5 arrotonda per eccesso
        duration = max(0, int(self.clock() - start + 0.5))
        summary = ExecutionSummary(
            succeeded=tuple(succeeded),
            failed=tuple(failed),
            results=tuple(results),
            duration_seconds=duration,
            stopped_by_user=stopped,
        )
        logger.info(
            f"Batch completato in {duration}s: "
            f"{len(succeeded)} ok, {len(failed)} falliti"
        )
        self._render_summary(summary)
        self.prompter.pause()
        return summary

    def ensure_sudo(self, entries):
        """
        Richiede una sola volta le credenziali sudo (sudo -v).

        Raises:
            SudoAuthFailure: se nessuno script la richiede non fa nulla,
                altrimenti quando la verifica fallisce o non parte
        """
        if not any(entry.needs_sudo for entry in entries):
            return

        report(self.console, "warning", "Some scripts require root privileges (sudo).")
        try:
            completed = self.runner([self.sudo, "-v"], check=False)
        except OSError as e:
            raise SudoAuthFailure(f"cannot start '{self.sudo}': {e}") from e

        if completed.returncode != 0:
            raise SudoAuthFailure(f"'{self.sudo} -v' exited with code {completed.returncode}")

        report(self.console, "success", "Sudo access granted.")
        logger.info("Credenziali sudo verificate")

    def run_one(self, entry):
        self.console.print(Panel(f"[bold white]RUNNING: {escape(entry.name)}[/bold white]", style="on blue"))
        self._make_executable(entry.path)

        command = self.build_command(entry)
        self.console.print(f"[dim]Command: {escape(' '.join(command))}[/dim]")
        draw_line(self.console, "·")
        logger.info(f"Esecuzione: {' '.join(command)}")

        try:
            completed = self.runner(command, check=False)
        except OSError as e:
            draw_line(self.console)
            logger.error(f"Avvio fallito per {entry.path}: {e}")
            report(self.console, "error", f"Could not start '{entry.name}': {e}")
            return ScriptResult(entry, exit_code=None, error=str(e))

        draw_line(self.console)
        exit_code = completed.returncode
        logger.info(f"{entry.name} terminato con exit code {exit_code}")

        if exit_code == 0:
            report(self.console, "success", f"Script '{entry.name}' completed successfully.")
            return ScriptResult(entry, exit_code=0)

        report(self.console, "error", f"Script '{entry.name}' failed (exit code: {exit_code}).")
        return ScriptResult(entry, exit_code=exit_code, error=f"exit code {exit_code}")

    @staticmethod
    def _make_executable(path):
        # Un errore qui non è fatale: decide l'esecuzione
        try:
            os.chmod(path, SCRIPT_MODE)
        except OSError as e:
            logger.debug(f"chmod non riuscito per {path}: {e}")

    def _render_intro(self, total, header):
        lines = [
            f"[cyan]Total scripts[/cyan]: [bold]{total}[/bold]",
            f"[cyan]Location[/cyan]: [bold]{escape(str(header.install_location))}[/bold]",
            f"[cyan]Repository[/cyan]: [bold]{escape(header.repo_url)}[/bold]",
            f"[cyan]Started[/cyan]: [bold]{format_datetime()}[/bold]",
        ]
        self.console.print()
        self.console.print(Panel("\n".join(lines), title="Execution details", border_style="cyan"))

    def _render_summary(self, summary):
        lines = [
            f"[cyan]Total time[/cyan]: [bold]{summary.duration_seconds} seconds[/bold]",
            f"[cyan]Succeeded[/cyan]: [bold bright_green]{len(summary.succeeded)}[/bold bright_green]",
            f"[cyan]Failed[/cyan]: [bold bright_red]{len(summary.failed)}[/bold bright_red]",
        ]
        if summary.succeeded:
            lines += ["", "[bright_green]Succeeded scripts:[/bright_green]"]
            lines += [f"  [bright_green]✓[/bright_green] {escape(e.name)}" for e in summary.succeeded]
        if summary.failed:
            lines += ["", "[bright_red]Failed scripts:[/bright_red]"]
            lines += [f"  [bright_red]✗[/bright_red] {escape(e.name)}" for e in summary.failed]

        self.console.print(Panel("\n".join(lines), title="Execution summary", border_style="cyan"))
        if summary.failed:
            report(self.console, "warning", "Some scripts ran into problems.")
        else:
            report(self.console, "success", "All scripts completed successfully!")
