"""CLI entrypoint: Typer app definition and command registration"""

import typer

from kbpub.cli.commands import extract_cmd, publish_cmd, run_cmd


app = typer.Typer(name="kbpub", no_args_is_help=True, help="Markdown glossary extract-and-publish pipeline")

app.command(name="run")(run_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="publish")(publish_cmd)
