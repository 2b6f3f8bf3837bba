"""
============================================================
 File: param_block.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Lettura del blocco param(...) di primo livello di uno
     script PowerShell: nome, tipo, valore di default e
     argomenti di [Parameter(...)] per ogni parametro, piu'
     la presenza di [CmdletBinding()].

     Non e' un parser PowerShell completo: commenti e
     contenuto delle stringhe vengono mascherati per poter
     bilanciare parentesi e virgole in sicurezza.
============================================================
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

_PARAM_RE = re.compile(r"(?<![\w$-])param\s*\(", re.IGNORECASE)
_CMDLETBINDING_RE = re.compile(r"\[\s*CmdletBinding\s*(\(|\])", re.IGNORECASE)
_VARIABLE_RE = re.compile(r"\$(?:\{([^}]+)\}|([A-Za-z_][\w]*))")
_ATTRIBUTE_RE = re.compile(r"^([\w.]+)\s*\((.*)\)$", re.DOTALL)

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}

# Type accelerator -> nome .NET mostrato da Get-Help
TYPE_NAMES = {
    "string": "String",
    "char": "Char",
    "byte": "Byte",
    "sbyte": "SByte",
    "int": "Int32",
    "int16": "Int16",
    "int32": "Int32",
    "int64": "Int64",
    "long": "Int64",
    "uint16": "UInt16",
    "uint32": "UInt32",
    "uint64": "UInt64",
    "bigint": "BigInteger",
    "float": "Single",
    "single": "Single",
    "double": "Double",
    "decimal": "Decimal",
    "bool": "Boolean",
    "boolean": "Boolean",
    "switch": "SwitchParameter",
    "switchparameter": "SwitchParameter",
    "datetime": "DateTime",
    "timespan": "TimeSpan",
    "guid": "Guid",
    "uri": "Uri",
    "version": "Version",
    "regex": "Regex",
    "xml": "XmlDocument",
    "ipaddress": "IPAddress",
    "mailaddress": "MailAddress",
    "hashtable": "Hashtable",
    "array": "Object[]",
    "object": "Object",
    "psobject": "PSObject",
    "pscustomobject": "PSObject",
    "pscredential": "PSCredential",
    "securestring": "SecureString",
    "scriptblock": "ScriptBlock",
    "fileinfo": "FileInfo",
    "directoryinfo": "DirectoryInfo",
}


@dataclass
class DeclaredParameter:
    name: str
    type_name: str = "Object"
    default: str = ""
    mandatory: bool = False
    position: Optional[int] = None
    from_pipeline: bool = False
    from_pipeline_by_property_name: bool = False
    has_parameter_attribute: bool = False

    @property
    def is_switch(self):
        return self.type_name == "SwitchParameter"


@dataclass
class ParamBlock:
    parameters: List[DeclaredParameter] = field(default_factory=list)
    cmdlet_binding: bool = False
    positional_binding: bool = True

    @property
    def is_advanced(self):
        return self.cmdlet_binding or any(p.has_parameter_attribute for p in self.parameters)


def _blank(chars, start, end):
    for i in range(start, min(end, len(chars))):
        if chars[i] != "\n":
            chars[i] = " "


def mask(text):
    """
    Restituisce (code, skeleton), stessa lunghezza di text.

    code: commenti sostituiti da spazi.
    skeleton: commenti e contenuto delle stringhe sostituiti da spazi.
    """
    code = list(text)
    skeleton = list(text)
    i, n = 0, len(text)

    while i < n:
        c = text[i]
        if text.startswith("<#", i):
            end = text.find("#>", i + 2)
            end = n if end < 0 else end + 2
            _blank(code, i, end)
            _blank(skeleton, i, end)
            i = end
        elif c == "#":
            end = text.find("\n", i)
            end = n if end < 0 else end
            _blank(code, i, end)
            _blank(skeleton, i, end)
            i = end
        elif text.startswith("@'", i) or text.startswith('@"', i):
            # here-string: termina con la sequenza '@ / "@ a inizio riga
            closing = "\n" + text[i + 1] + "@"
            end = text.find(closing, i + 2)
            end = n if end < 0 else end + len(closing)
            _blank(skeleton, i + 2, end - 2)
            i = end
        elif c == "'":
            j = i + 1
            while j < n:
                if text[j] == "'":
                    if text.startswith("''", j):
                        j += 2
                        continue
                    break
                j += 1
            _blank(skeleton, i + 1, j)
            i = j + 1
        elif c == '"':
            j = i + 1
            while j < n:
                if text[j] == "`":
                    j += 2
                    continue
                if text[j] == '"':
                    break
                j += 1
            _blank(skeleton, i + 1, j)
            i = j + 1
        else:
            i += 1

    return "".join(code), "".join(skeleton)


def _matching(skeleton, start):
    """Indice della parentesi che chiude quella aperta in start"""
    stack = []
    for i in range(start, len(skeleton)):
        c = skeleton[i]
        if c in _OPENERS:
            stack.append(_OPENERS[c])
        elif c in _CLOSERS:
            if not stack or stack.pop() != c:
                return -1
            if not stack:
                return i
    return -1


def split_top_level(code, skeleton, separator=","):
    """Divide code sui separatori che non stanno dentro parentesi o stringhe"""
    parts = []
    depth = 0
    last = 0
    for i, c in enumerate(skeleton):
        if c in _OPENERS:
            depth += 1
        elif c in _CLOSERS:
            depth -= 1
        elif c == separator and depth == 0:
            parts.append((code[last:i], skeleton[last:i]))
            last = i + 1
    parts.append((code[last:], skeleton[last:]))
    return [(c, s) for c, s in parts if s.strip()]


def type_display_name(raw):
    """Converte un tipo PowerShell nel nome mostrato da Get-Help"""
    raw = raw.strip()
    suffix = ""
    while raw.endswith("[]"):
        raw = raw[:-2].rstrip()
        suffix += "[]"

    generic = ""
    if "[" in raw:
        raw, _, rest = raw.partition("[")
        generic = "[" + rest

    base = raw.split(".")[-1]
    name = TYPE_NAMES.get(base.lower())
    if name is None:
        name = base[:1].upper() + base[1:]
    if name.endswith("[]") and suffix:
        return name + suffix
    return name + generic + suffix


def _literal(value):
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _truthy(value):
    return value is None or value.strip().lower() in ("$true", "1", "true")


def _attribute_arguments(args):
    """Coppie (nome, valore) degli argomenti di un attributo; valore None se nudo"""
    code, skeleton = mask(args)
    arguments = []
    for part_code, part_skeleton in split_top_level(code, skeleton):
        eq = part_skeleton.find("=")
        if eq < 0:
            arguments.append((part_code.strip().lower(), None))
        else:
            arguments.append((part_code[:eq].strip().lower(), part_code[eq + 1:].strip()))
    return arguments


def _apply_parameter_attribute(parameter, args):
    parameter.has_parameter_attribute = True
    for key, value in _attribute_arguments(args):
        if key == "mandatory":
            parameter.mandatory = parameter.mandatory or _truthy(value)
        elif key == "position" and value is not None and parameter.position is None:
            try:
                parameter.position = int(value)
            except ValueError:
                pass
        elif key == "valuefrompipeline":
            parameter.from_pipeline = parameter.from_pipeline or _truthy(value)
        elif key == "valuefrompipelinebypropertyname":
            parameter.from_pipeline_by_property_name = (
                parameter.from_pipeline_by_property_name or _truthy(value)
            )


def _parse_declaration(code, skeleton):
    """Un singolo parametro: [attributi] [tipo] $Nome [= default]"""
    attributes = []
    j, n = 0, len(skeleton)
    name = None

    while j < n:
        c = skeleton[j]
        if c == "[":
            k = _matching(skeleton, j)
            if k < 0:
                return None
            attributes.append(code[j + 1:k].strip())
            j = k + 1
        elif c == "$":
            m = _VARIABLE_RE.match(skeleton, j)
            if not m:
                return None
            name = m.group(1) or m.group(2)
            j = m.end()
            break
        else:
            j += 1

    if not name:
        return None

    parameter = DeclaredParameter(name=name)
    rest = code[j:].strip()
    if rest.startswith("="):
        parameter.default = _literal(rest[1:])

    for attribute in attributes:
        m = _ATTRIBUTE_RE.match(attribute)
        if m:
            if m.group(1).lower() == "parameter":
                _apply_parameter_attribute(parameter, m.group(2))
        elif attribute:
            parameter.type_name = type_display_name(attribute)

    return parameter


def _cmdlet_binding(skeleton, code, limit):
    """(cmdlet_binding, positional_binding) dagli attributi prima di param()"""
    m = _CMDLETBINDING_RE.search(skeleton, 0, limit)
    if m is None:
        return False, True

    positional = True
    if m.group(1) == "(":
        close = _matching(skeleton, m.end() - 1)
        if close > 0:
            for key, value in _attribute_arguments(code[m.end():close]):
                if key == "positionalbinding" and value is not None:
                    positional = _truthy(value)
    return True, positional


def parse_param_block(text):
    """
    Legge il blocco param() di primo livello.

    Returns:
        ParamBlock, oppure None se lo script non dichiara parametri
    """
    code, skeleton = mask(text)

    start = None
    for m in _PARAM_RE.finditer(skeleton):
        before = skeleton[:m.start()]
        if before.count("{") - before.count("}") == 0:
            start = m
            break
    if start is None:
        return None

    open_index = start.end() - 1
    close_index = _matching(skeleton, open_index)
    if close_index < 0:
        return None

    cmdlet_binding, positional_binding = _cmdlet_binding(skeleton, code, start.start())
    block = ParamBlock(cmdlet_binding=cmdlet_binding, positional_binding=positional_binding)

    body_code = code[open_index + 1:close_index]
    body_skeleton = skeleton[open_index + 1:close_index]
    for part_code, part_skeleton in split_top_level(body_code, body_skeleton):
        parameter = _parse_declaration(part_code, part_skeleton)
        if parameter is not None:
            block.parameters.append(parameter)

    return block
