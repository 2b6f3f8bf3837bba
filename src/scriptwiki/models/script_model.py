"""
============================================================
 File: script_model.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Modello dati che rappresenta uno script trovato durante
     la scansione: percorso completo, nome file, nome base e
     cartella che lo contiene (la "categoria" dello script).
============================================================
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScriptFile:
    path: Path
    name: str
    stem: str
    directory: str

    @classmethod
    def from_path(cls, path):
        p = Path(path)
        return cls(path=p, name=p.name, stem=p.stem, directory=p.parent.name)
