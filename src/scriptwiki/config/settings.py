"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Impostazioni centralizzate del generatore. Costanti di
     formato (estensione script, marker TOC, nomi di default)
     condivise da tutti i moduli.
============================================================
"""

SCRIPT_EXTENSION = ".ps1"
CODE_LANGUAGE = "powershell"

DEFAULT_SUMMARY_FILE_NAME = "Summary.md"
AZURE_DEVOPS_TOC_MARKER = "[[_TOC_]]"

LOGGER_NAME = "scriptwiki"
LOG_FILE_NAME = "scriptwiki.log"

CONFIG_FILE_NAME = "config.ini"
CONFIG_SECTION = "DOCGEN"
