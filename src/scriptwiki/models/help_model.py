"""
============================================================
 File: help_model.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Metadati di help estratti dall'intestazione di uno script
     PowerShell (comment-based help). Ogni sezione e'
     opzionale: l'assenza di una sezione non blocca il
     rendering delle altre.
============================================================
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SECTIONS = ("synopsis", "syntax", "notes", "description", "examples", "parameters")


@dataclass(frozen=True)
class ExampleBlock:
    title: str
    code: str
    remarks: str = ""


@dataclass(frozen=True)
class ParameterHelp:
    """Un parametro dello script con gli attributi mostrati da Get-Help"""

    name: str
    description: str = ""
    type_name: str = "Object"
    default_value: str = ""
    parameter_value: str = ""
    pipeline_input: str = ""
    position: str = ""
    required: str = ""

    def attribute_rows(self) -> List[Tuple[str, str]]:
        """Righe della tabella attributi: Type sempre, il resto solo se valorizzato"""
        rows = [("Type", self.type_name)]
        optional = (
            ("DefaultValue", self.default_value),
            ("ParameterValue", self.parameter_value),
            ("PipelineInput", self.pipeline_input),
            ("Position", self.position),
            ("Required", self.required),
        )
        rows.extend((label, value) for label, value in optional if value)
        return rows


@dataclass(frozen=True)
class HelpMetadata:
    synopsis: Optional[str] = None
    syntax: Optional[str] = None
    notes: Optional[str] = None
    description: Optional[str] = None
    examples: Tuple[ExampleBlock, ...] = field(default_factory=tuple)
    parameters: Tuple[ParameterHelp, ...] = field(default_factory=tuple)

    def note_entries(self) -> List[Tuple[str, str]]:
        """
        Coppie chiave/valore del blocco .NOTES.

        Le voci sono separate da ';', chiave e valore dal primo ':'.
        Segmenti vuoti vengono ignorati; un segmento senza ':' diventa
        una chiave con valore vuoto.
        """
        if not self.notes:
            return []

        entries = []
        for segment in self.notes.split(";"):
            if not segment.strip():
                continue
            key, _, value = segment.partition(":")
            entries.append((key.strip(), value.strip()))
        return entries

    def has_section(self, section):
        return bool(getattr(self, section))

    def missing_sections(self) -> List[str]:
        return [section for section in SECTIONS if not self.has_section(section)]
