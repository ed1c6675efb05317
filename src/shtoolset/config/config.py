"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-18

Description:
Gestione della configurazione centralizzata dell'applicazione.
Legge da config.ini e fornisce accesso ai settings in tutta l'app.
Le variabili d'ambiente MY_SCRIPT_DIR e MY_SCRIPT_REPO_URL
hanno la precedenza sui valori del file.
============================================================
"""

import configparser
import os
from pathlib import Path

from shtoolset.config.paths import RootCandidate
from shtoolset.utils.logger import logger

ENV_SCRIPT_DIR = "MY_SCRIPT_DIR"
ENV_REPO_URL = "MY_SCRIPT_REPO_URL"
ENV_CONFIG_FILE = "SHTOOLSET_CONFIG"

DEFAULT_REPO_URL = "https://github.com/podsni/segx"
USER_HOME_DIR = Path.home() / ".shtoolset"
BUNDLED_SCRIPTS_DIR = Path(__file__).resolve().parents[3] / "scripts"


class ConfigManager:
    """Gestore centralizzato della configurazione dell'applicazione"""

    def __init__(self, config_path=None):
        logger.debug("Inizializzazione ConfigManager...")
        self._config = configparser.ConfigParser()
        self._load_defaults()
        self._config_path = self._find_config_file(config_path)

        if self._config_path and self._config_path.exists():
            logger.info(f"Config trovato: {self._config_path}")
            self._config.read(self._config_path, encoding='utf-8')
        else:
            logger.debug("config.ini non trovato, usando defaults")

    def _find_config_file(self, explicit=None):
        """Cerca il file config.ini in varie locazioni"""

        # 1. Percorso esplicito (--config)
        if explicit:
            return Path(explicit).expanduser()

        # 2. Variabile d'ambiente
        env_path = os.environ.get(ENV_CONFIG_FILE, "").strip()
        if env_path:
            return Path(env_path).expanduser()

        # 3. Cartella config/ e root del progetto
        for config_file in (Path('config') / 'config.ini', Path('config.ini')):
            if config_file.exists():
                return config_file

        # 4. Cartella utente
        config_file = USER_HOME_DIR / 'config.ini'
        if config_file.exists():
            return config_file

        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config.read_dict({
            'PATHS': {
                'scripts_directory': '',
                'logs_directory': str(USER_HOME_DIR / 'logs'),
            },
            'APP': {
                'title': 'SH-Toolset - Script Manager',
                'repo_url': DEFAULT_REPO_URL,
                'debug': 'false',
            },
            'EXECUTION': {
                'shell': 'bash',
                'sudo_command': 'sudo',
                'loader_workers': '8',
            },
        })

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_int(self, section, key, fallback=None):
        """Ottiene un valore intero dalla configurazione"""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso assoluto, None se la chiave è vuota"""
        path_str = (self.get(section, key) or "").strip()
        if not path_str:
            logger.debug(f"get_path: '{section}.{key}' non impostato")
            return None
        return Path(path_str).expanduser().resolve()

    @property
    def scripts_override(self):
        """Cartella degli script imposta dall'utente (env o config), altrimenti None"""
        env_dir = os.environ.get(ENV_SCRIPT_DIR, "").strip()
        if env_dir:
            logger.debug(f"Scripts dir da {ENV_SCRIPT_DIR}: {env_dir}")
            return Path(env_dir).expanduser().resolve()
        return self.get_path('PATHS', 'scripts_directory')

    def root_candidates(self, override=None):
        """
        Cartelle candidate per gli script, in ordine di priorità.

        Un override esplicito esclude i fallback. Senza override si
        prova la cartella scripts/ del progetto (solo se esiste) e poi
        quella dell'utente, che viene creata se manca.
        """
        if override is None:
            override = self.scripts_override
        if override is not None:
            return [RootCandidate(Path(override).expanduser().resolve(), create=True)]
        return [
            RootCandidate(BUNDLED_SCRIPTS_DIR, create=False),
            RootCandidate(USER_HOME_DIR / 'scripts', create=True),
        ]

    @property
    def logs_dir(self):
        """Directory dei log"""
        return self.get_path('PATHS', 'logs_directory') or USER_HOME_DIR / 'logs'

    @property
    def repo_url(self):
        env_url = os.environ.get(ENV_REPO_URL, "").strip()
        if env_url:
            return env_url
        return self.get('APP', 'repo_url', DEFAULT_REPO_URL)

    @property
    def app_title(self):
        """Titolo dell'applicazione"""
        return self.get('APP', 'title', 'SH-Toolset - Script Manager')

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool('APP', 'debug', False)

    @property
    def shell(self):
        return self.get('EXECUTION', 'shell', 'bash')

    @property
    def sudo_command(self):
        return self.get('EXECUTION', 'sudo_command', 'sudo')

    @property
    def loader_workers(self):
        return max(1, self.get_int('EXECUTION', 'loader_workers', 8))

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path

    def print_info(self):
        """Scrive nel log le informazioni di configurazione (debug)"""
        logger.debug(f"[CONFIG] Config file: {self._config_path}")
        logger.debug(f"[CONFIG] Scripts override: {self.scripts_override}")
        logger.debug(f"[CONFIG] Logs directory: {self.logs_dir}")
        logger.debug(f"[CONFIG] Shell: {self.shell} / sudo: {self.sudo_command}")
