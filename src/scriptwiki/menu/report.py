"""
============================================================
File: report.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Riepilogo a console di un'esecuzione del generatore,
realizzato con la libreria Rich: una tabella con l'esito
di ogni script e una riga con i totali.
============================================================
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table


def build_table(report):
    table = Table(show_header=True, header_style="bold blue")
    table.add_column("No.", justify="right")
    table.add_column("Script")
    table.add_column("Result")
    table.add_column("Missing sections")

    for idx, result in enumerate(report.results, start=1):
        if result.ok:
            outcome = f"[green]{escape(str(result.output))}[/green]"
        else:
            outcome = f"[red]{escape(result.error)}[/red]"
        table.add_row(str(idx), escape(result.script.name), outcome, ", ".join(result.missing))

    return table


def print_report(report, console=None):
    console = console or Console()
    if not report.results:
        console.print("[yellow]No scripts found[/yellow]")
        return

    console.print(build_table(report))
    style = "bold red" if report.errors else "bold green"
    console.print(
        f"[{style}]{report.documented} documented, "
        f"{report.warnings} warnings, {report.errors} errors[/{style}]"
    )
    if report.summary_path is not None:
        console.print(f"Summary: {report.summary_path}")
