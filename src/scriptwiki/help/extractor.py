"""
============================================================
 File: extractor.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Estrazione dei metadati di help per un singolo script.
     Un errore di lettura o di parsing non e' fatale: lo
     script viene trattato come privo di help.
============================================================
"""

from scriptwiki.errors import HelpNotFound
from scriptwiki.help.comment_help import CommentHelpParser
from scriptwiki.utils.file_loader import load_file
from scriptwiki.utils.logger import logger


class HelpExtractor:
    def __init__(self, parser=None):
        self.parser = parser or CommentHelpParser()

    def extract(self, script):
        """HelpMetadata dello script, oppure None"""
        try:
            text = load_file(script.path)
            if text is None:
                return None
            return self.parser.parse(text, script.path)
        except Exception as e:
            logger.debug(f"Estrazione help fallita per {script.path}: {e}", exc_info=True)
            return None

    def require(self, script):
        help_metadata = self.extract(script)
        if help_metadata is None:
            raise HelpNotFound(script.path)
        return help_metadata
