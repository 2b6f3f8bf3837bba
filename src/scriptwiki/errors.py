"""
============================================================
 File: errors.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Eccezioni del generatore di documentazione.
============================================================
"""


class ScriptWikiError(Exception):
    """Errore base del generatore"""


class ScriptFolderNotFound(ScriptWikiError):
    """La cartella degli script non esiste"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Script folder not found: {path}")


class HelpNotFound(ScriptWikiError):
    """Lo script non contiene help comment-based"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"No comment-based help found in {path}")


class ConfigError(ScriptWikiError):
    """Impostazione obbligatoria mancante o non valida"""


class PageOverwritesSummary(ScriptWikiError):
    """La pagina dello script coincide con la pagina di riepilogo"""

    def __init__(self, path, summary_path):
        self.path = path
        self.summary_path = summary_path
        super().__init__(f"Page for {path} would overwrite the summary page {summary_path}")
