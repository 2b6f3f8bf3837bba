"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-18

Description:
Gestione della configurazione del generatore. Legge i
default da config.ini (sezione [DOCGEN]), li unisce ai
flag passati da riga di comando e produce una
GeneratorConfig immutabile passata a ogni fase.
============================================================
"""

import configparser
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from scriptwiki.config import settings
from scriptwiki.db.script_repository import parse_exclude_list
from scriptwiki.errors import ConfigError
from scriptwiki.utils.logger import logger


class TocStyle(Enum):
    AZURE_DEVOPS = "AzureDevOps"
    GITHUB = "Github"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        for style in cls:
            if style.value.lower() == str(value).strip().lower():
                return style
        choices = ", ".join(style.value for style in cls)
        raise ConfigError(f"Unknown wiki TOC style '{value}' (expected one of: {choices})")


@dataclass(frozen=True)
class GeneratorConfig:
    """Configurazione di una singola esecuzione"""

    script_folder: Path
    output_folder: Path
    exclude_folders: Tuple[str, ...] = ()
    keep_structure: bool = False
    include_wiki_toc: bool = False
    include_wiki_summary: bool = False
    wiki_summary_output_file_name: Optional[str] = None
    wiki_toc_style: TocStyle = TocStyle.AZURE_DEVOPS

    @property
    def toc_marker(self):
        """Marker TOC letterale, solo per lo stile AzureDevOps"""
        if self.include_wiki_toc and self.wiki_toc_style is TocStyle.AZURE_DEVOPS:
            return settings.AZURE_DEVOPS_TOC_MARKER
        return None

    @property
    def generate_github_toc(self):
        return self.include_wiki_toc and self.wiki_toc_style is TocStyle.GITHUB

    @property
    def summary_path(self):
        name = self.wiki_summary_output_file_name or settings.DEFAULT_SUMMARY_FILE_NAME
        return self.output_folder / name

    def target_folder(self, script):
        """Cartella di destinazione per lo script (piatta o con struttura)"""
        if self.keep_structure:
            return self.output_folder / script.directory
        return self.output_folder

    def page_path(self, script):
        return self.target_folder(script) / f"{script.stem}.md"


class ConfigManager:
    """Gestore della configurazione letta da config.ini"""

    BOOL_KEYS = ("keep_structure", "include_wiki_toc", "include_wiki_summary")

    def __init__(self, config_path=None):
        logger.debug("Inizializzazione ConfigManager...")
        self._config = configparser.ConfigParser()
        self._load_defaults()
        self._config_path = self._find_config_file(config_path)

        if self._config_path and self._config_path.exists():
            logger.debug(f"Config trovato: {self._config_path}")
            self._config.read(self._config_path, encoding="utf-8")
        elif config_path:
            raise ConfigError(f"Config file not found: {config_path}")
        else:
            logger.debug("config.ini non trovato, usando defaults")

    def _find_config_file(self, config_path):
        """Cerca il file config.ini in varie locazioni"""
        if config_path:
            return Path(config_path)

        # 1. Prova nella cartella config/
        config_file = Path("config") / settings.CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        # 2. Prova nella cartella corrente
        config_file = Path(settings.CONFIG_FILE_NAME)
        if config_file.exists():
            return config_file

        return None

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config["PATHS"] = {
            "logs_directory": "",
        }
        self._config["APP"] = {
            "debug": "false",
        }
        self._config[settings.CONFIG_SECTION] = {
            "script_folder": "",
            "output_folder": "",
            "exclude_folders": "",
            "keep_structure": "false",
            "include_wiki_toc": "false",
            "include_wiki_summary": "false",
            "wiki_summary_output_file_name": "",
            "wiki_toc_style": TocStyle.AZURE_DEVOPS.value,
        }

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key):
        """Ottiene un percorso assoluto; i relativi partono dalla cartella di lavoro"""
        path_str = self.get(section, key)
        if not path_str:
            logger.debug(f"get_path: '{section}.{key}' non trovato in config")
            return None

        path = Path(path_str)
        if path.is_absolute():
            return path
        return path.resolve()

    @property
    def logs_dir(self):
        """Directory dei log (None se non configurata)"""
        return self.get_path("PATHS", "logs_directory")

    @property
    def debug(self):
        """Modalità debug attiva"""
        return self.get_bool("APP", "debug", False)

    @property
    def config_file(self):
        """Percorso del file di configurazione"""
        return self._config_path

    def build_generator_config(self, overrides=None):
        """
        Costruisce la GeneratorConfig unendo config.ini e i flag da riga di comando.

        Args:
            overrides: dizionario chiave -> valore; i valori None non
                sovrascrivono quelli letti da config.ini

        Returns:
            GeneratorConfig immutabile
        """
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        section = settings.CONFIG_SECTION

        def pick(key):
            if key in overrides:
                return overrides[key]
            return self.get(section, key, "")

        script_folder = overrides.get("script_folder") or self.get_path(section, "script_folder")
        output_folder = overrides.get("output_folder") or self.get_path(section, "output_folder")
        if not script_folder:
            raise ConfigError("script folder is required (--script-folder or [DOCGEN] script_folder)")
        if not output_folder:
            raise ConfigError("output folder is required (--output-folder or [DOCGEN] output_folder)")

        flags = {}
        for key in self.BOOL_KEYS:
            if key in overrides:
                flags[key] = bool(overrides[key])
            else:
                flags[key] = self.get_bool(section, key, False)

        exclude = pick("exclude_folders")
        if isinstance(exclude, str):
            exclude = parse_exclude_list(exclude)

        config = GeneratorConfig(
            script_folder=Path(script_folder),
            output_folder=Path(output_folder),
            exclude_folders=tuple(exclude),
            wiki_summary_output_file_name=pick("wiki_summary_output_file_name") or None,
            wiki_toc_style=TocStyle.parse(pick("wiki_toc_style") or TocStyle.AZURE_DEVOPS),
            **flags,
        )
        logger.debug(f"Configurazione: {config}")
        return config
