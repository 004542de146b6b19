"""Command-line interface for pitchmap.

Provides commands for:
- note: Frequency of a note name
- match: Closest pitch to a frequency
- interval: Pitch a number of semitones away
- distance: Octaves and semitones between two frequencies
- table: List the pitch table
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .core import InvalidArgumentError, Note, OCTAVE_MAX, OCTAVE_MIN, parse_note_name
from .pitch import PitchCalculator

app = typer.Typer(
    name="pitchmap",
    help="Equal-tempered pitch and note calculator",
    rich_markup_mode="markdown",
)
console = Console()


def _calculator(reference: float) -> PitchCalculator:
    try:
        return PitchCalculator(reference_freq=reference)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def note(
    name: str = typer.Argument(..., help="Note name with octave, e.g. A4, C#3, Eb5"),
    reference: float = typer.Option(440.0, "--reference", "-r", help="Frequency of A4 in Hz"),
):
    """Show the frequency of a note.

    Examples:
        pitchmap note A4
        pitchmap note C#3 --reference 432
    """
    calc = _calculator(reference)
    try:
        pitch_note, octave = parse_note_name(name)
        freq = calc.note_to_pitch(pitch_note, octave)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if freq is None:
        console.print(f"[yellow]{name} is outside the pitch table[/yellow]")
        raise typer.Exit(1)
    console.print(f"{name}: [cyan]{freq:.4f} Hz[/cyan]")


@app.command()
def match(
    freq: float = typer.Argument(..., help="Frequency in Hz"),
    reference: float = typer.Option(440.0, "--reference", "-r", help="Frequency of A4 in Hz"),
):
    """Round a frequency to the closest pitch."""
    calc = _calculator(reference)
    try:
        pitch = calc.match_nearest(freq)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if pitch is None:
        console.print(f"[red]No pitch found for {freq} Hz[/red]")
        raise typer.Exit(1)

    cents = 1200 * calc.octaves_distance(freq, pitch) if freq > 0 else 0.0
    console.print(
        f"{freq} Hz -> [cyan]{calc.note_name(pitch)}[/cyan] "
        f"({pitch:.4f} Hz, {cents:+.1f} cents)"
    )


@app.command()
def interval(
    pitch: float = typer.Argument(..., help="Starting pitch in Hz (must be a table entry)"),
    semitones: int = typer.Argument(..., help="Signed number of semitones"),
    reference: float = typer.Option(440.0, "--reference", "-r", help="Frequency of A4 in Hz"),
):
    """Show the pitch a number of semitones away from another."""
    calc = _calculator(reference)
    if not calc.is_pitch(pitch):
        console.print(f"[red]Error: {pitch} Hz is not a pitch, try 'match' first[/red]")
        raise typer.Exit(1)

    result = calc.get_pitch_by_interval(pitch, semitones)
    if result is None:
        console.print(f"[yellow]{semitones:+d} semitones from {pitch} Hz is outside the pitch table[/yellow]")
        raise typer.Exit(1)
    console.print(
        f"{calc.note_name(pitch)} {semitones:+d} -> "
        f"[cyan]{calc.note_name(result)}[/cyan] ({result:.4f} Hz)"
    )


@app.command()
def distance(
    f1: float = typer.Argument(..., help="First frequency in Hz"),
    f2: float = typer.Argument(..., help="Second frequency in Hz"),
):
    """Show the distance from f2 up to f1."""
    calc = _calculator(440.0)
    try:
        octaves = calc.octaves_distance(f1, f2)
        semitones = calc.semitones_distance(f1, f2)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"  Octaves: {octaves:+.4f}")
    console.print(f"  Semitones: {semitones:+d}")


@app.command(name="table")
def show_table(
    octave: Optional[int] = typer.Option(None, "--octave", "-o", help="Only show one octave"),
    reference: float = typer.Option(440.0, "--reference", "-r", help="Frequency of A4 in Hz"),
):
    """List note frequencies for octaves 0-8."""
    calc = _calculator(reference)
    octaves = range(OCTAVE_MIN, OCTAVE_MAX + 1) if octave is None else [octave]

    table = Table(title=f"Pitches (A4 = {reference} Hz)")
    table.add_column("Note", style="cyan")
    table.add_column("Frequency (Hz)", style="green", justify="right")

    for oct_num in octaves:
        for pitch_note in Note.valid():
            try:
                freq = calc.note_to_pitch(pitch_note, oct_num)
            except InvalidArgumentError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(1)
            if freq is not None:
                table.add_row(f"{pitch_note.symbol}{oct_num}", f"{freq:.4f}")

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
