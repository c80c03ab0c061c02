#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders a resume document (YAML or JSON) with one of the named templates.

Commands:
    render    - Render a resume file to HTML or JSON
    templates - List available templates and their preset accent colors

Examples:\n

    render_resume.py render data/resume.yaml                              # Classic, preset accent

    render_resume.py render data/resume.json --template modern            # Modern template

    render_resume.py render data/resume.yaml -t modern -a "#DC2626"       # Custom accent color

    render_resume.py render data/resume.yaml --format json -o tree.json   # Dump rendered tree

    render_resume.py templates                                            # List templates
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumate.contexts.rendering import export_resume
from resumate.contexts.templating import ResumeDocument, TemplateRegistry
from resumate.contexts.templating.config_resolver import load_template_presets
from resumate.contexts.templating.defaults import DEFAULT_TEMPLATE
from resumate.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render resume documents with named templates",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Resume document (YAML or JSON)"),
    ],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Template name (classic, modern)"),
    ] = DEFAULT_TEMPLATE,
    accent_color: Annotated[
        Optional[str],
        typer.Option("--accent", "-a", help="Accent color (default: template preset)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file (default: outs/results/resume_<template>.<format>)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: html or json"),
    ] = "html",
    no_overwrite: Annotated[
        bool,
        typer.Option("--no-overwrite", help="Prevent overwriting an existing output file"),
    ] = False,
):
    """
    Render a resume document to HTML or JSON.

    Examples:\n

        $ render_resume.py render resume.yaml                       # Classic template

        $ render_resume.py render resume.yaml -t modern -a teal     # Modern, teal accent
    """
    typer.secho(f"\nRendering: {resume_file}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Template: {template}")
    typer.echo("")

    try:
        document = ResumeDocument.from_file(resume_file)
        result = export_resume(
            document,
            output_path=output,
            template=template,
            accent_color=accent_color,
            output_format=output_format,
            overwrite_allowed=not no_overwrite,
            log_dir=LOGS_PATH / f"render_{now()}",
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Render succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Accent: {result.accent_color}")
        typer.echo(f"  Output: {display_path(result.output_path)}")
    else:
        typer.secho("✗ Render failed", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            if "already exists" in error:
                error += " Retry without --no-overwrite to replace it."
            typer.secho(f"  - {error}", fg=typer.colors.RED)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("templates")
def templates_command():
    """List available templates with their preset accent colors."""
    presets = load_template_presets()

    typer.secho("\nAvailable templates:", fg=typer.colors.BLUE, bold=True)
    for name in TemplateRegistry().available_templates():
        preset = presets.get(name, {})
        features = ", ".join(preset.get("features", []))
        typer.echo(f"  {name:<10} accent {preset.get('accent', '-'):<9} {features}")
    typer.echo("")


if __name__ == "__main__":
    app()
