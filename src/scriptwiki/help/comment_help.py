"""
============================================================
 File: comment_help.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Parser del comment-based help di PowerShell. Individua
     il blocco di help (<# ... #> oppure righe consecutive
     commentate con #), divide le sezioni per keyword
     (.SYNOPSIS, .DESCRIPTION, .PARAMETER, .EXAMPLE, .NOTES)
     e completa i parametri con le informazioni del blocco
     param(), producendo gli stessi campi che restituirebbe
     Get-Help -Full.
============================================================
"""

import re
import textwrap
from pathlib import Path

from scriptwiki.help.param_block import parse_param_block
from scriptwiki.help.parser import HelpParser
from scriptwiki.models.help_model import ExampleBlock, HelpMetadata, ParameterHelp
from scriptwiki.utils.logger import logger

HELP_KEYWORDS = frozenset({
    "SYNOPSIS",
    "DESCRIPTION",
    "PARAMETER",
    "EXAMPLE",
    "INPUTS",
    "OUTPUTS",
    "NOTES",
    "LINK",
    "COMPONENT",
    "ROLE",
    "FUNCTIONALITY",
    "FORWARDHELPTARGETNAME",
    "FORWARDHELPCATEGORY",
    "REMOTEHELPRUNSPACE",
    "EXTERNALHELP",
})

EXAMPLE_TITLE = "-------------------------- EXAMPLE {} --------------------------"
COMMON_PARAMETERS = "[<CommonParameters>]"

_BLOCK_COMMENT_RE = re.compile(r"<#(.*?)#>", re.DOTALL)
_KEYWORD_RE = re.compile(r"^\s*\.(?P<keyword>[A-Za-z]+)(?:\s+(?P<argument>.*?))?\s*$")


def comment_blocks(text):
    """Blocchi di commento dello script, in ordine di apparizione, come liste di righe"""
    blocks = []
    spans = []
    for m in _BLOCK_COMMENT_RE.finditer(text):
        blocks.append((m.start(), m.group(1).splitlines()))
        spans.append((m.start(), m.end()))

    run, run_start = [], None
    offset = 0
    for line in text.splitlines(keepends=True):
        position = offset
        offset += len(line)
        inside = any(start <= position < end for start, end in spans)
        stripped = line.strip()
        if not inside and stripped.startswith("#") and not stripped.lower().startswith("#requires"):
            if run_start is None:
                run_start = position
            run.append(stripped[1:])
            continue
        if run:
            blocks.append((run_start, run))
            run, run_start = [], None
    if run:
        blocks.append((run_start, run))

    return [lines for _, lines in sorted(blocks, key=lambda block: block[0])]


def split_sections(lines):
    """Sezioni (KEYWORD, argomento, righe) di un blocco di help"""
    sections = []
    current = None
    for line in lines:
        m = _KEYWORD_RE.match(line)
        if m and m.group("keyword").upper() in HELP_KEYWORDS:
            keyword = m.group("keyword").upper()
            argument = (m.group("argument") or "").strip()
            current = (keyword, argument, [])
            if argument and keyword != "PARAMETER":
                current[2].append(argument)
            sections.append(current)
        elif current is not None:
            current[2].append(line)
    return sections


def section_text(lines):
    return textwrap.dedent("\n".join(lines)).strip()


def find_help_sections(text):
    """Sezioni del primo blocco di commento che contiene almeno una keyword"""
    for lines in comment_blocks(text):
        sections = split_sections(lines)
        if sections:
            return sections
    return None


def _example(number, text):
    code, _, remarks = text.partition("\n\n")
    return ExampleBlock(
        title=EXAMPLE_TITLE.format(number),
        code=code.strip(),
        remarks=remarks.strip(),
    )


def _positions(block):
    """Posizione di ogni parametro come la calcola PowerShell"""
    explicit = any(p.position is not None for p in block.parameters)
    positions = {}
    index = 0
    for parameter in block.parameters:
        if parameter.position is not None:
            positions[parameter.name] = str(parameter.position)
        elif not explicit and block.positional_binding and not parameter.is_switch:
            positions[parameter.name] = str(index)
            index += 1
        else:
            positions[parameter.name] = "named"
    return positions


def _pipeline_input(parameter):
    kinds = []
    if parameter.from_pipeline:
        kinds.append("ByValue")
    if parameter.from_pipeline_by_property_name:
        kinds.append("ByPropertyName")
    if kinds:
        return f"true ({', '.join(kinds)})"
    return "false"


def usage_token(parameter):
    """Frammento di sintassi di un parametro, nel formato di Get-Help"""
    required = parameter.required == "true"
    if parameter.type_name == "SwitchParameter":
        token = f"-{parameter.name}"
        return token if required else f"[{token}]"

    value = f"<{parameter.type_name}>"
    if parameter.position.isdigit():
        token = f"[-{parameter.name}] {value}"
        return token if required else f"[{token}]"

    token = f"-{parameter.name} {value}"
    return token if required else f"[{token}]"


def build_syntax(path, parameters, advanced):
    if not parameters:
        return None

    positional = sorted(
        (p for p in parameters if p.position.isdigit()),
        key=lambda p: int(p.position),
    )
    named = [p for p in parameters if not p.position.isdigit()]

    tokens = [usage_token(p) for p in positional + named]
    if advanced:
        tokens.append(COMMON_PARAMETERS)
    return f"{path} {' '.join(tokens)}"


class CommentHelpParser(HelpParser):
    def parse(self, text, path):
        sections = find_help_sections(text)
        if sections is None:
            return None

        synopsis = description = notes = None
        examples = []
        documented = {}

        for keyword, argument, lines in sections:
            body = section_text(lines)
            if keyword == "SYNOPSIS" and synopsis is None:
                synopsis = body or None
            elif keyword == "DESCRIPTION" and description is None:
                description = body or None
            elif keyword == "NOTES" and notes is None:
                notes = body or None
            elif keyword == "EXAMPLE" and body:
                examples.append(_example(len(examples) + 1, body))
            elif keyword == "PARAMETER" and argument:
                documented.setdefault(argument.lower(), (argument, body))

        block = parse_param_block(text)
        parameters = self._parameters(block, documented)
        syntax = build_syntax(Path(path), parameters, bool(block and block.is_advanced))

        logger.debug(
            f"{path}: {len(sections)} sezioni di help, "
            f"{len(examples)} esempi, {len(parameters)} parametri"
        )
        return HelpMetadata(
            synopsis=synopsis,
            syntax=syntax,
            notes=notes,
            description=description,
            examples=tuple(examples),
            parameters=tuple(parameters),
        )

    def _parameters(self, block, documented):
        parameters = []
        seen = set()

        if block is not None:
            positions = _positions(block)
            for declared in block.parameters:
                _, description = documented.get(declared.name.lower(), (declared.name, ""))
                parameters.append(ParameterHelp(
                    name=declared.name,
                    description=description,
                    type_name=declared.type_name,
                    default_value=declared.default,
                    parameter_value="" if declared.is_switch else declared.type_name,
                    pipeline_input=_pipeline_input(declared),
                    position=positions[declared.name],
                    required="true" if declared.mandatory else "false",
                ))
                seen.add(declared.name.lower())

        # .PARAMETER documentati ma non dichiarati in param()
        for key, (name, description) in documented.items():
            if key in seen:
                continue
            parameters.append(ParameterHelp(
                name=name,
                description=description,
                type_name="Object",
                parameter_value="Object",
                pipeline_input="false",
                position="named",
                required="false",
            ))

        return parameters
