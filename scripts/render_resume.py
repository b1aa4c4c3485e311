#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders plain-text resumes to PDF, inspects line classification, and validates
rendered PDFs using the rendering context.

Commands:
    render   - Render a resume text file to PDF
    classify - Show the role assigned to every line
    validate - Check a rendered PDF against its source text

Examples:\n

    render_resume.py render data/resume.txt                            # Default backend

    render_resume.py render data/resume.txt -b procedural              # Canvas backend

    render_resume.py render data/resume.txt -p page_letter -p spacing_compact

    render_resume.py classify data/resume.txt                          # Inspect roles

    render_resume.py validate data/resume.txt outs/results/resume.pdf  # Validate output
"""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quire.contexts.intake.classifier import classify_lines
from quire.contexts.intake.normalizer import to_raw_lines
from quire.contexts.intake.splitter import split_content
from quire.contexts.layout.stylesheet import build_stylesheet
from quire.contexts.rendering.renderer import (
    DEFAULT_BACKEND,
    Backend,
    prepare_blocks,
    render_resume,
)
from quire.contexts.rendering.validator import validate_document

load_dotenv()


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Render plain-text resumes to PDF and validate rendered PDFs",
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
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume text file (UTF-8)"),
    ],
    backend: Annotated[
        str,
        typer.Option(
            "--backend",
            "-b",
            help=f"Rendering backend: {', '.join(b.value for b in Backend)}",
        ),
    ] = DEFAULT_BACKEND,
    presets: Annotated[
        Optional[List[str]],
        typer.Option(
            "--preset",
            "-p",
            help="Style preset to apply (repeatable, applied in order)",
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the PDF (default: outs/results/YYYY-MM-DD)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug logging and every error",
        ),
    ] = False,
    no_overwrite: Annotated[
        bool,
        typer.Option(
            "--no-overwrite",
            help="Keep an existing PDF and write a timestamped filename instead",
        ),
    ] = False,
):
    """
    Render a resume text file to PDF.

    Examples:\n

        $ render_resume.py render resume.txt                       # Declarative backend

        $ render_resume.py render resume.txt -b procedural         # Canvas backend

        $ render_resume.py render resume.txt -p font_times -v      # Serif font, verbose
    """
    typer.secho(f"\nRendering: {input_file}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Backend: {backend}")
    if presets:
        typer.echo(f"Presets: {', '.join(presets)}")
    typer.echo("")

    try:
        result = render_resume(
            input_path=input_file,
            output_dir=output_dir,
            backend=backend,
            presets=presets or (),
            verbose=verbose,
            overwrite=not no_overwrite,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Rendering succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {result.page_count}")
        typer.echo(f"  PDF: {display_path(result.pdf_path)}")
        if result.validation is not None and not result.validation.is_valid:
            typer.secho("  Validation issues:", fg=typer.colors.YELLOW)
            for issue in result.validation.issues:
                typer.secho(f"    - {issue}", fg=typer.colors.YELLOW)
    else:
        typer.secho(
            f"✗ Rendering failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("classify")
def classify_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume text file (UTF-8)"),
    ],
):
    """
    Show the role assigned to every line, in render order.

    Examples:\n

        $ render_resume.py classify resume.txt
    """
    if not input_file.exists():
        typer.secho(f"Error: Input file not found: {input_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    text = input_file.read_text(encoding="utf-8")
    split = split_content(classify_lines(to_raw_lines(text)))

    for segment, line in split.ordered():
        typer.echo(f"{line.index:>4}  {segment.value:<8}  {line.kind.value:<18}  {line.text}")

    if split.trigger:
        typer.secho(
            f"\nJob description starts at trigger '{split.trigger}'", fg=typer.colors.YELLOW
        )
    raise typer.Exit(code=0)


@app.command("validate")
def validate_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume text file the PDF was rendered from"),
    ],
    pdf_file: Annotated[
        Path,
        typer.Argument(help="Rendered PDF"),
    ],
    presets: Annotated[
        Optional[List[str]],
        typer.Option(
            "--preset",
            "-p",
            help="Style presets used when rendering (repeatable)",
        ),
    ] = None,
):
    """
    Validate a rendered PDF against its source text.

    Checks that every line appears in reading order and that job description
    text comes after the resume.

    Examples:\n

        $ render_resume.py validate resume.txt outs/results/2025-01-01/resume.pdf
    """
    typer.secho(f"\nValidating: {pdf_file}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    for path in (input_file, pdf_file):
        if not path.exists():
            typer.secho(f"Error: File not found: {path}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    try:
        stylesheet = build_stylesheet(presets or ())
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    blocks = prepare_blocks(input_file.read_text(encoding="utf-8"), stylesheet)
    result = validate_document(pdf_file, blocks)

    if result.is_valid:
        typer.secho("✓ Validation passed", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Page count: {result.page_count}")
    else:
        typer.secho("✗ Validation failed", fg=typer.colors.RED, bold=True)
        typer.echo(f"  Page count: {result.page_count}")
        for issue in result.issues:
            typer.echo(f"  - {issue}")
        for text in result.missing[:10]:
            typer.echo(f"    missing: {text}")
    typer.echo("")

    raise typer.Exit(code=0 if result.is_valid else 1)


if __name__ == "__main__":
    app()
