"""
============================================================
 File: markdown_writer.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Generazione della pagina Markdown di uno script a partire
     dai suoi metadati di help. Le sezioni vengono scritte una
     alla volta, nell'ordine fisso:

         TOC, Synopsis, sintassi, Information, Description,
         Examples, Parameters

     Ogni sezione mancante produce un warning ma non blocca
     le altre. Il file viene riscritto a ogni esecuzione.
============================================================
"""

from scriptwiki.config import settings
from scriptwiki.models.help_model import SECTIONS
from scriptwiki.render.toc import github_toc, prepend_toc
from scriptwiki.utils.file_loader import append_file, reset_file
from scriptwiki.utils.logger import logger

TITLE_SEPARATOR = "--------------------------"


def code_block(code):
    return f"```{settings.CODE_LANGUAGE}\n{code}\n```\n\n"


def usage_string(script, syntax):
    """Parte della sintassi che segue il nome dello script"""
    _, found, usage = syntax.rpartition(script.name)
    if not found:
        return syntax.strip()
    return usage.strip()


def example_title(title):
    return title.replace(TITLE_SEPARATOR, "").replace("EXAMPLE", "Example").strip()


def _cell(value):
    return str(value).replace("|", "\\|").replace("\n", " ")


def render_synopsis(script, help_metadata):
    return f"## Synopsis\n\n{help_metadata.synopsis}\n\n"


def render_syntax(script, help_metadata):
    invocation = f".\\{script.name} {usage_string(script, help_metadata.syntax)}"
    return code_block(invocation.rstrip())


def render_notes(script, help_metadata):
    lines = [f"**{key}:** {value}".rstrip() for key, value in help_metadata.note_entries()]
    return "## Information\n\n" + "".join(f"{line}\n\n" for line in lines)


def render_description(script, help_metadata):
    return f"## Description\n\n{help_metadata.description}\n\n"


def render_examples(script, help_metadata):
    parts = ["## Examples\n\n"]
    for example in help_metadata.examples:
        parts.append(f"### {example_title(example.title)}\n\n")
        parts.append(code_block(example.code))
        if example.remarks:
            parts.append(f"{example.remarks}\n\n")
    return "".join(parts)


def render_parameters(script, help_metadata):
    parts = ["## Parameters\n\n"]
    for parameter in help_metadata.parameters:
        parts.append(f"### {parameter.name}\n\n")
        if parameter.description:
            parts.append(f"{parameter.description}\n\n")
        parts.append("| Attribute | Value |\n| --- | --- |\n")
        for label, value in parameter.attribute_rows():
            parts.append(f"| {label} | {_cell(value)} |\n")
        parts.append("\n")
    return "".join(parts)


RENDERERS = {
    "synopsis": render_synopsis,
    "syntax": render_syntax,
    "notes": render_notes,
    "description": render_description,
    "examples": render_examples,
    "parameters": render_parameters,
}


class MarkdownWriter:
    def __init__(self, config, toc_generator=github_toc):
        self.config = config
        self.toc_generator = toc_generator

    def output_path(self, script):
        path = self.config.page_path(script)
        if not path.parent.exists():
            path.parent.mkdir(parents=True)
        return path

    def write(self, script, help_metadata):
        """
        Scrive la pagina dello script.

        Returns:
            Tuple (percorso del documento, sezioni mancanti)
        """
        path = self.output_path(script)
        marker = self.config.toc_marker
        reset_file(path, f"{marker}\n\n" if marker else "")

        missing = []
        for section in SECTIONS:
            if help_metadata.has_section(section):
                append_file(path, RENDERERS[section](script, help_metadata))
            else:
                logger.warning(f"{script.path}: sezione '{section}' non trovata")
                missing.append(section)

        if self.config.generate_github_toc:
            prepend_toc(path, self.toc_generator)

        logger.debug(f"Scritto {path}")
        return path, missing
