"""
============================================================
File: generator.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Orchestrazione dell'intero flusso: scansione degli script,
estrazione dell'help, scrittura delle pagine Markdown e
del riepilogo. Un errore su un singolo script non
interrompe l'elaborazione degli altri.
============================================================
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from scriptwiki.db.script_repository import ScriptRepository
from scriptwiki.errors import HelpNotFound, PageOverwritesSummary
from scriptwiki.help.extractor import HelpExtractor
from scriptwiki.render.markdown_writer import MarkdownWriter
from scriptwiki.render.summary import SummaryWriter
from scriptwiki.utils.logger import logger

EXIT_OK = 0
EXIT_PARTIAL = 1
EXIT_FAILURE = 3


@dataclass
class FileResult:
    script: object
    output: Optional[Path] = None
    missing: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


@dataclass
class RunReport:
    results: List[FileResult] = field(default_factory=list)
    summary_path: Optional[Path] = None

    @property
    def documented(self):
        return sum(1 for r in self.results if r.ok)

    @property
    def errors(self):
        return sum(1 for r in self.results if not r.ok)

    @property
    def warnings(self):
        return sum(len(r.missing) for r in self.results)

    @property
    def exit_code(self):
        return EXIT_PARTIAL if self.errors else EXIT_OK


class DocGenerator:
    def __init__(self, config, extractor=None, writer=None):
        self.config = config
        self.repository = ScriptRepository(config.script_folder, exclude=config.exclude_folders)
        self.extractor = extractor or HelpExtractor()
        self.writer = writer or MarkdownWriter(config)

    def run(self):
        """Esegue la generazione completa e restituisce il RunReport"""
        scripts = self.repository.discover()

        # La cartella di output deve esistere prima di qualsiasi scrittura
        self.config.output_folder.mkdir(parents=True, exist_ok=True)

        report = RunReport()
        summary = None
        if self.config.include_wiki_summary:
            summary = SummaryWriter(self.config)
            summary.start()
            report.summary_path = summary.path

        logger.info(f"Elaborazione di {len(scripts)} script da {self.config.script_folder}")
        for script in scripts:
            report.results.append(self._process(script, summary))

        logger.info(
            f"Completato: {report.documented} documenti, "
            f"{report.warnings} warning, {report.errors} errori"
        )
        return report

    def _process(self, script, summary):
        result = FileResult(script=script)
        help_metadata = None
        try:
            logger.info(f"Elaborazione {script.path}")
            help_metadata = self.extractor.require(script)
            if summary is not None and self.config.page_path(script) == summary.path:
                raise PageOverwritesSummary(script.path, summary.path)
            result.output, result.missing = self.writer.write(script, help_metadata)
        except (HelpNotFound, PageOverwritesSummary) as e:
            logger.error(str(e))
            result.error = str(e)
        except Exception as e:
            logger.exception(f"Errore durante l'elaborazione di {script.path}: {e}")
            result.error = str(e)

        if summary is not None:
            try:
                summary.add(script, help_metadata)
            except Exception as e:
                logger.exception(f"Errore durante l'aggiornamento del summary per {script.path}: {e}")
                result.error = result.error or str(e)
        return result
