import logging
import sys
from dataclasses import fields
from pathlib import Path

import click

from .exceptions import UnsupportedFileError
from .models import Metadata
from .parser import parse_song
from .registry import FORMAT_NAMES, get_formatter
from .session import SessionState, SessionStore

SOURCE_EXTENSIONS = (".chordpro", ".chopro", ".cho", ".crd", ".pro", ".txt")

_METADATA_HELP = {
    "name": "Display name (default: title).",
    "number": "Song number.",
    "bpm": "Tempo in beats per minute.",
    "ccli": "CCLI song number.",
    "notes": "Presentation notes.",
}


def _check_source(path: Path) -> None:
    if path.suffix.lower() not in SOURCE_EXTENSIONS:
        raise UnsupportedFileError(str(path))


def _metadata_options(func):
    """Add one ``--<field>`` option per :class:`Metadata` field."""
    for f in reversed(fields(Metadata)):
        func = click.option(
            f"--{f.name}",
            default=None,
            metavar="TEXT",
            help=_METADATA_HELP.get(f.name, f"Song {f.name}."),
        )(func)
    return func


def _starting_metadata(base: Metadata, options: dict[str, str | None]) -> Metadata:
    metadata = base.copy()
    metadata.update({k: v for k, v in options.items() if v is not None})
    return metadata


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--format", "formats", multiple=True, type=click.Choice(FORMAT_NAMES),
              help="Output format; repeat for several (default: show).")
@click.option("-o", "--output-dir", default=".", show_default=True, metavar="DIR",
              type=click.Path(file_okay=False, path_type=Path),
              help="Directory to write output files to.")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing files.")
@click.option("--no-chords", is_flag=True, default=False,
              help="Leave chords out of the preview.")
@click.option("--session", "session_path", default=None, metavar="PATH",
              type=click.Path(dir_okay=False, path_type=Path),
              help="Session file to start from and save back to.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@_metadata_options
def main(source: Path, formats: tuple[str, ...], output_dir: Path, stdout: bool,
         no_chords: bool, session_path: Path | None, verbose: bool, **meta: str | None) -> None:
    """Convert a ChordPro song into presentation slides.

    \b
    Output formats:
      - show      presentation show document (JSON)
      - chordpro  ChordPro text with metadata directives
      - preview   plain-text slides with chords above the lyrics
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # --- Read ---
    try:
        _check_source(source)
    except UnsupportedFileError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo(f"Supported extensions: {', '.join(SOURCE_EXTENSIONS)}", err=True)
        sys.exit(1)

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: Could not read {source}: {exc}", err=True)
        sys.exit(1)

    store = SessionStore(session_path) if session_path else None
    state = store.load() if store else SessionState()

    # --- Parse ---
    song = parse_song(text, _starting_metadata(state.metadata, meta))

    # --- Render + output ---
    formatters = [get_formatter(name, show_chords=not no_chords) for name in formats or ("show",)]

    if not stdout:
        for formatter in formatters:
            dest = output_dir / formatter.filename(song.metadata)
            if dest.resolve() == source.resolve():
                click.echo(f"Error: Writing {dest} would overwrite the source file", err=True)
                sys.exit(1)

    for formatter in formatters:
        rendered = formatter.render(song)

        if stdout:
            click.echo(rendered, nl=not rendered.endswith("\n"))
            continue

        dest = output_dir / formatter.filename(song.metadata)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            click.echo(f"Error: Could not write {dest}: {exc}", err=True)
            sys.exit(1)
        click.echo(f"Written to {dest}")

    if store:
        try:
            store.save(SessionState(language=state.language, metadata=song.metadata, text=text))
        except OSError as exc:
            click.echo(f"Error: Could not save session to {store.path}: {exc}", err=True)
            sys.exit(1)
