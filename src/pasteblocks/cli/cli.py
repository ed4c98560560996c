"""CLI entrypoint: Typer app definition and command registration"""

import typer

from pasteblocks.cli.commands import export_cmd, import_cmd, parse_cmd


app = typer.Typer(name="pasteblocks", no_args_is_help=True, help="Notion paste to article content blocks")

app.command(name="parse")(parse_cmd)
app.command(name="import")(import_cmd)
app.command(name="export")(export_cmd)
