"""
============================================================
 File: toc.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Indice (TOC) in stile GitHub generato dai titoli di un
     documento Markdown gia' scritto. Il TOC viene anteposto
     al contenuto del file, che resta invariato.
============================================================
"""

import re

from scriptwiki.utils.file_loader import load_file, reset_file

_HEADING_RE = re.compile(r"^(#{2,6})\s+(.+?)\s*#*\s*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_PUNCTUATION_RE = re.compile(r"[^\w\- ]")


def github_anchor(title, seen):
    """Ancora generata da GitHub per un titolo; seen tiene conto dei duplicati"""
    slug = _PUNCTUATION_RE.sub("", title.strip().lower()).replace(" ", "-")
    count = seen.get(slug, 0)
    seen[slug] = count + 1
    if count:
        return f"{slug}-{count}"
    return slug


def headings(text):
    """Titoli (livello, testo) fuori dai blocchi di codice"""
    found = []
    in_fence = False
    for line in text.splitlines():
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        m = _HEADING_RE.match(line)
        if m:
            found.append((len(m.group(1)), m.group(2)))
    return found


def github_toc(path):
    text = load_file(path) or ""
    entries = headings(text)
    if not entries:
        return ""

    base = min(level for level, _ in entries)
    seen = {}
    lines = []
    for level, title in entries:
        indent = "  " * (level - base)
        lines.append(f"{indent}- [{title}](#{github_anchor(title, seen)})")
    return "\n".join(lines) + "\n"


def prepend_toc(path, generator=github_toc):
    """Antepone al file il TOC restituito da generator(path)"""
    toc = generator(path)
    if not toc:
        return False

    body = load_file(path) or ""
    reset_file(path, toc.rstrip("\n") + "\n\n" + body)
    return True
