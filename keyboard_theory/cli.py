"""Command-line interface for Keyboard Theory.

Provides commands for:
- detect: Identify the chord formed by held notes
- scale: Show the notes of a scale
- chord: Spell a chord from its root
- interval: Name an interval
- catalog: List recognized chord qualities
- suggest: Suggest next chords in a key
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import TheoryError, interval_name, note_name_to_pitch_class
from .inference import (
    ChordCategory,
    DetectionSettings,
    SCALES,
    all_definitions,
    chord_function,
    chord_notes,
    definitions_by_category,
    detect_chord,
    generate_scale,
    get_definition,
    get_scale,
    rank_candidates,
    scale_note_names,
    scale_notes,
    suggest_next_chords,
)

app = typer.Typer(
    name="keyboard-theory",
    help="Chord detection and music-theory tooling for a virtual piano",
    rich_markup_mode="markdown",
)
console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route package logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Keyboard Theory command line."""
    setup_logging(verbose)


@app.command()
def detect(
    notes: List[str] = typer.Argument(..., help="Held notes, e.g. C4 E4 G4"),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show every candidate, best first"
    ),
    limit: int = typer.Option(10, "--limit", "-n", help="Candidates shown with --all"),
    no_bass: bool = typer.Option(
        False, "--no-bass", help="Ignore which note is lowest"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Detect the chord formed by a set of held notes.

    Examples:
        keyboard-theory detect C4 E4 G4
        keyboard-theory detect E4 G4 C5 --all
    """
    settings = DetectionSettings(use_bass=not no_bass)
    try:
        if show_all:
            matches = rank_candidates(notes, settings)[:limit]
        else:
            best = detect_chord(notes, settings)
            matches = [best] if best is not None else []
    except TheoryError as e:
        _fail(str(e))

    if json_output:
        console.print_json(data=[m.to_dict() for m in matches])
        return

    if not matches:
        console.print("[yellow]No chord: hold at least two different notes.[/yellow]")
        return

    _show_matches_table(matches)
    best = matches[0]
    if best.is_unknown and best.analysis is not None:
        console.print(f"   Quality guess: {best.analysis.quality}")
        if best.analysis.extensions:
            console.print(f"   Extensions: {', '.join(best.analysis.extensions)}")


@app.command()
def scale(
    root: str = typer.Argument(..., help="Root note, e.g. C or F#"),
    scale_type: str = typer.Argument("major", help="Scale type"),
    octave: Optional[int] = typer.Option(
        None, "--octave", "-o", help="Spell one ascending octave from this octave"
    ),
):
    """Show the notes of a scale."""
    try:
        definition = get_scale(scale_type)
    except KeyError:
        _fail(f"Unknown scale '{scale_type}'. Valid: {', '.join(SCALES)}")

    try:
        if octave is None:
            names = scale_note_names(root, definition)
        else:
            names = scale_notes(root, octave, definition)
        pitch_classes = generate_scale(note_name_to_pitch_class(root), definition)
    except TheoryError as e:
        _fail(str(e))

    console.print(f"\n[bold blue]{root} {definition.name}[/bold blue]")
    console.print(f"   Notes: {' '.join(names)}")
    console.print(f"   Pitch classes: {pitch_classes}")
    console.print(f"   Formula: {definition.step_formula}")


@app.command()
def chord(
    root: str = typer.Argument(..., help="Root note, e.g. C or F#"),
    key: str = typer.Argument("", help="Catalog key, e.g. m7 (empty for major)"),
    octave: Optional[int] = typer.Option(
        None, "--octave", "-o", help="Spell with octave numbers from this octave"
    ),
):
    """Spell a chord from its root and catalog key."""
    try:
        definition = get_definition(key)
    except KeyError:
        _fail(f"Unknown chord '{key}'. Run 'keyboard-theory catalog' for valid keys.")

    try:
        names = chord_notes(root, definition, octave)
    except TheoryError as e:
        _fail(str(e))

    console.print(f"\n[bold blue]{root}{definition.display_symbol}[/bold blue] "
                  f"({root} {definition.quality_name})")
    console.print(f"   Notes: {' - '.join(names)}")
    console.print(
        f"   Intervals: {', '.join(interval_name(i) for i in definition.voicing)}"
    )


@app.command()
def interval(
    semitones: int = typer.Argument(..., help="Span in semitones"),
):
    """Name the interval spanning a number of semitones."""
    console.print(f"{semitones} semitones: [green]{interval_name(semitones)}[/green]")


@app.command()
def catalog(
    category: Optional[str] = typer.Option(
        None, "--category", "-c",
        help="Only one category (triad, seventh, suspended, extended)",
    ),
):
    """List the recognized chord qualities."""
    if category is None:
        definitions = all_definitions()
    else:
        try:
            definitions = definitions_by_category(ChordCategory(category.lower()))
        except ValueError:
            _fail(f"Unknown category '{category}'")

    table = Table(title="Chord Catalog")
    table.add_column("Key", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Symbol", style="yellow")
    table.add_column("Category", style="blue")
    table.add_column("Intervals", style="magenta")

    for definition in definitions:
        table.add_row(
            repr(definition.key),
            definition.quality_name,
            definition.display_symbol or "(none)",
            definition.category.value,
            " ".join(str(i) for i in definition.intervals),
        )

    console.print(table)


@app.command()
def suggest(
    notes: List[str] = typer.Argument(..., help="Held notes, e.g. G3 B3 D4"),
    key: str = typer.Option("C", "--key", "-k", help="Key root"),
    scale_type: str = typer.Option("major", "--scale", "-s", help="major or minor"),
):
    """Suggest chords that commonly follow the held chord in a key."""
    try:
        best = detect_chord(notes)
        get_scale(scale_type)
        note_name_to_pitch_class(key)
    except (TheoryError, KeyError) as e:
        _fail(str(e))

    if best is None:
        console.print("[yellow]No chord: hold at least two different notes.[/yellow]")
        return

    function = chord_function(best, key, scale_type)
    console.print(f"\n[bold blue]{best.name}[/bold blue] in {key} {scale_type}: "
                  f"{function or 'non-diatonic'}")

    suggestions = suggest_next_chords(best, key, scale_type)
    if not suggestions:
        console.print("   [dim]No suggestions[/dim]")
        return
    for suggestion in suggestions:
        console.print(f"   {suggestion.function:>5}  {suggestion.name}")


def _show_matches_table(matches):
    """Display chord matches in a table."""
    table = Table(title="Detected Chords")
    table.add_column("Chord", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Inversion", style="yellow")
    table.add_column("Confidence", style="magenta")
    table.add_column("Missing", style="red")
    table.add_column("Extra", style="blue")

    for match in matches:
        table.add_row(
            match.slash_name,
            match.full_name,
            str(match.inversion),
            f"{match.confidence:.2f}",
            " ".join(interval_name(i) for i in match.missing_intervals),
            " ".join(interval_name(i) for i in match.extra_intervals),
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
