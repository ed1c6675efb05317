"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Entry point principale del Toolset CLI. Carica la
configurazione, individua la cartella degli script,
costruisce loader, executor e menu interattivo e avvia
il ciclo principale.

Codici di uscita: 0 normale, 130 interruzione (Ctrl-C),
1 cartella script non disponibile o errore imprevisto.
============================================================
"""

import argparse
import locale
import sys

from rich.console import Console

from shtoolset import __version__
from shtoolset.config.config import ENV_SCRIPT_DIR, ConfigManager
from shtoolset.config.paths import resolve_script_root
from shtoolset.db.script_loader import ScriptEntryLoader
from shtoolset.db.script_repository import ScriptRepository
from shtoolset.errors import RootUnavailable
from shtoolset.executor.script_executor import ScriptExecutor
from shtoolset.menu.prompts import RichPrompter
from shtoolset.menu.tool_menu import ToolMenu
from shtoolset.models.script_model import HeaderContext
from shtoolset.utils.console import report
from shtoolset.utils.logger import logger, setup_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="shtoolset",
        description="Interactive menu for discovering and running shell scripts.",
    )
    parser.add_argument("--scripts-dir", help=f"script root directory (overrides {ENV_SCRIPT_DIR})")
    parser.add_argument("--config", help="path to a config.ini file")
    parser.add_argument("--debug", action="store_true", help="verbose console logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_menu(config, root, console):
    header = HeaderContext(repo_url=config.repo_url, install_location=root)
    prompter = RichPrompter(console)
    executor = ScriptExecutor(
        prompter,
        console=console,
        shell=config.shell,
        sudo=config.sudo_command,
    )
    return ToolMenu(
        ScriptRepository(root),
        ScriptEntryLoader(max_workers=config.loader_workers),
        executor,
        header,
        prompter,
        console=console,
        title=config.app_title,
    )


def main(argv=None, console=None):
    args = parse_args(argv)
    console = console or Console()

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass

    try:
        config = ConfigManager(args.config)
        setup_logging(config.logs_dir, debug=args.debug or config.debug)
        config.print_info()

        logger.info("=" * 60)
        logger.info(f"Startup {config.app_title} {__version__}")

        try:
            root = resolve_script_root(config.root_candidates(args.scripts_dir))
        except RootUnavailable as e:
            logger.error(str(e))
            report(console, "error",
                   f"Script directory could not be prepared. Check {ENV_SCRIPT_DIR} or filesystem permissions.")
            return EXIT_ERROR

        menu = build_menu(config, root, console)
        menu.start()
        return EXIT_OK

    except KeyboardInterrupt:
        console.print()
        report(console, "warning", "Execution cancelled by user")
        console.print("[bold green]See you next time! ✨[/bold green]")
        logger.info("Sessione interrotta dall'utente")
        return EXIT_INTERRUPTED
    except EOFError:
        # stdin chiuso: uscita normale
        console.print()
        return EXIT_OK
    except Exception as e:
        logger.exception(f"ERRORE CRITICO: {e}")
        report(console, "error", f"Unexpected error: {e}")
        return EXIT_ERROR


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
