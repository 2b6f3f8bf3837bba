"""
============================================================
 File: parser.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Interfaccia dei parser di help: dal testo di uno script
     ai metadati strutturati (HelpMetadata), oppure None se
     lo script non ha alcun help.
============================================================
"""

from typing import Optional

from scriptwiki.models.help_model import HelpMetadata


class HelpParser:
    def parse(self, text: str, path) -> Optional[HelpMetadata]:
        """Estrae i metadati di help dal testo dello script"""
        raise NotImplementedError
