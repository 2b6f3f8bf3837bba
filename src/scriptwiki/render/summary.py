"""
============================================================
 File: summary.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Pagina di riepilogo (summary) della wiki: un titolo per
     ogni script elaborato, seguito dalla sua synopsis.
============================================================
"""

from scriptwiki.utils.file_loader import append_file, reset_file
from scriptwiki.utils.logger import logger


class SummaryWriter:
    def __init__(self, config):
        self.config = config
        self.path = config.summary_path

    def start(self):
        """Crea (o tronca) il file di riepilogo"""
        marker = self.config.toc_marker
        reset_file(self.path, f"{marker}\n\n" if marker else "")
        logger.info(f"Summary: {self.path}")

    def add(self, script, help_metadata=None):
        entry = f"### {script.stem}\n\n"
        if help_metadata is not None and help_metadata.synopsis:
            entry += f"{help_metadata.synopsis}\n\n"
        append_file(self.path, entry)
