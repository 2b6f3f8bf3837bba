"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Entry point principale del generatore di documentazione.
Legge i flag da riga di comando, carica config.ini,
configura il logger e avvia la generazione delle pagine
wiki per tutti gli script PowerShell trovati.

Codici di uscita:
    0  tutti i documenti generati
    1  completato con errori su alcuni script
    2  errore negli argomenti
    3  errore fatale (cartella script o output non valida)
============================================================
"""

import argparse

from rich.console import Console

from scriptwiki import __version__
from scriptwiki.config.config import ConfigManager, TocStyle
from scriptwiki.errors import ConfigError, ScriptFolderNotFound
from scriptwiki.generator import EXIT_FAILURE, DocGenerator
from scriptwiki.menu.report import print_report
from scriptwiki.utils.logger import logger, setup_logging


def build_parser():
    parser = argparse.ArgumentParser(
        prog="scriptwiki",
        description="Generate Markdown wiki pages from PowerShell comment-based help.",
    )
    parser.add_argument("--script-folder", help="root folder to scan for .ps1 scripts")
    parser.add_argument("--output-folder", help="root folder for the generated Markdown files")
    parser.add_argument(
        "--exclude-folders",
        help="comma-separated directory names whose scripts are skipped",
    )
    parser.add_argument(
        "--keep-structure", action="store_true", default=None,
        help="write each page under a folder named after the script's parent directory",
    )
    parser.add_argument(
        "--include-wiki-toc", action="store_true", default=None,
        help="add a table of contents to every page",
    )
    parser.add_argument(
        "--include-wiki-summary", action="store_true", default=None,
        help="also write a summary page with the synopsis of every script",
    )
    parser.add_argument("--wiki-summary-output-file-name", help="file name of the summary page")
    parser.add_argument(
        "--wiki-toc-style",
        choices=[style.value for style in TocStyle],
        help="AzureDevOps writes the [[_TOC_]] marker, Github generates the TOC",
    )
    parser.add_argument("--config", help="path of config.ini")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        manager = ConfigManager(args.config)
        setup_logging(debug=args.verbose or manager.debug, log_dir=manager.logs_dir)
        config = manager.build_generator_config({
            "script_folder": args.script_folder,
            "output_folder": args.output_folder,
            "exclude_folders": args.exclude_folders,
            "keep_structure": args.keep_structure,
            "include_wiki_toc": args.include_wiki_toc,
            "include_wiki_summary": args.include_wiki_summary,
            "wiki_summary_output_file_name": args.wiki_summary_output_file_name,
            "wiki_toc_style": args.wiki_toc_style,
        })
    except ConfigError as e:
        parser.error(str(e))

    try:
        report = DocGenerator(config).run()
    except ScriptFolderNotFound as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except OSError as e:
        logger.error(f"Impossibile scrivere in {config.output_folder}: {e}")
        return EXIT_FAILURE

    print_report(report, Console())
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
