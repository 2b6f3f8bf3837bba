"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Funzioni di utilità dedicate alla gestione di file.
     Lettura degli script PowerShell rispettando il BOM
     (UTF-8 / UTF-16, tipico degli script salvati da ISE)
     e scrittura incrementale dei documenti Markdown.
============================================================
"""

import codecs
from pathlib import Path

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def load_file(path):
    p = Path(path)
    if not p.exists():
        return None

    raw = p.read_bytes()
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return raw.decode(encoding)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # Script salvati in ANSI da Windows PowerShell 5.1
        return raw.decode("cp1252", errors="replace")


def reset_file(path, content=""):
    """Crea o tronca il file"""
    Path(path).write_text(content, encoding="utf-8", newline="\n")


def append_file(path, content):
    with Path(path).open("a", encoding="utf-8", newline="\n") as f:
        f.write(content)
