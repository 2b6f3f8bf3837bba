from pathlib import Path

import pytest

from scriptwiki.config.config import GeneratorConfig


# ---------------------------------------------------------------------------
# Sample scripts
# ---------------------------------------------------------------------------

BACKUP_LOGS = r"""<#
.SYNOPSIS
    Copies log files to an archive share.

.DESCRIPTION
    Collects the log files found under Path and copies them to the
    archive share, optionally compressing them.

.PARAMETER Path
    Folder containing the log files.

.PARAMETER Days
    Only archive files older than this many days.

.PARAMETER Compress
    Compress the archive.

.EXAMPLE
    .\Backup-Logs.ps1 -Path C:\Logs

    Archives every log file under C:\Logs.

.EXAMPLE
    .\Backup-Logs.ps1 -Path C:\Logs -Days 7 -Compress

.NOTES
    Author: Jane; Version: 1.0
#>
[CmdletBinding()]
param(
    [Parameter(Mandatory = $true, Position = 0, ValueFromPipeline = $true)]
    [string]$Path,

    [Parameter(Position = 1)]
    [int]$Days = 30,

    [switch]$Compress
)

Get-ChildItem -Path $Path -Filter *.log | Copy-Item -Destination '\\archive\logs'
"""

GET_GREETING = r"""#requires -Version 5.1
# .SYNOPSIS
#     Says hello.
# .PARAMETER Name
#     Who to greet.
param([string]$Name = 'World')

Write-Output "Hello, $Name"
"""

NO_HELP = r"""# Just a helper, no documentation
Write-Host 'hi'
"""


def write_script(root, relative, content):
    path = Path(root) / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def script_tree(tmp_path):
    """scripts/ con uno script completo, uno minimo, uno senza help e uno escluso"""
    root = tmp_path / "scripts"
    write_script(root, "Backup/Backup-Logs.ps1", BACKUP_LOGS)
    write_script(root, "Tools/Get-Greeting.ps1", GET_GREETING)
    write_script(root, "Tools/No-Help.ps1", NO_HELP)
    write_script(root, "Archive/Old-Script.ps1", BACKUP_LOGS)
    write_script(root, "Tools/notes.txt", "not a script")
    return root


@pytest.fixture
def make_config(tmp_path):
    def factory(**kwargs):
        kwargs.setdefault("script_folder", tmp_path / "scripts")
        kwargs.setdefault("output_folder", tmp_path / "out")
        return GeneratorConfig(**kwargs)

    return factory
