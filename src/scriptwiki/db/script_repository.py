"""
============================================================
 File: script_repository.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Questo modulo gestisce la scansione degli script
     disponibili. Percorre ricorsivamente la cartella degli
     script e restituisce i file .ps1, escludendo quelli che
     si trovano direttamente in una cartella esclusa.
============================================================
"""

from pathlib import Path

from scriptwiki.config import settings
from scriptwiki.errors import ScriptFolderNotFound
from scriptwiki.models.script_model import ScriptFile
from scriptwiki.utils.logger import logger


def parse_exclude_list(value):
    """Divide la lista di cartelle escluse separata da virgole"""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


class ScriptRepository:
    def __init__(self, base_path, exclude=(), extension=settings.SCRIPT_EXTENSION):
        self.base_path = Path(base_path)
        self.exclude = frozenset(exclude)
        self.extension = extension

    def is_excluded(self, script):
        # Si confronta solo il nome della cartella padre, non il percorso completo
        return script.directory in self.exclude

    def discover(self):
        """Restituisce gli script trovati, ordinati per percorso relativo"""
        if not self.base_path.is_dir():
            raise ScriptFolderNotFound(self.base_path)

        candidates = sorted(
            (p for p in self.base_path.rglob(f"*{self.extension}") if p.is_file()),
            key=lambda p: p.relative_to(self.base_path).as_posix().lower(),
        )

        scripts = []
        for path in candidates:
            script = ScriptFile.from_path(path)
            if self.is_excluded(script):
                logger.debug(f"Escluso: {path}")
                continue
            scripts.append(script)

        logger.debug(f"Trovati {len(scripts)} script in {self.base_path}")
        return scripts
