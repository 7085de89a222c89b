import argparse
import logging
import sys
from pathlib import Path
from rich.console import Console
from rich.table import Table
from .utils.langcodes import ISO_639_PAIRS, translate
from .utils.languages import get_subtitle_language, language_to_tag
from .utils.mappings import get_iso_639_2_code
from .utils.vobsub import read_idx_tracks
from . import __version__

console = Console()

def build_parser():
    parser = argparse.ArgumentParser(prog="langtag", description="ISO 639-1 to ISO 639-2/B language tags for subtitles")
    parser.add_argument("--version", action="version", version=f"langtag {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging",
        default=False
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="Translate 2-letter codes exactly as given (case sensitive)")
    lookup.add_argument("codes", nargs="+")
    lookup.add_argument(
        "-s", "--strict",
        action="store_true",
        help="Exit with status 1 if any code is not found",
        default=False
    )

    sub.add_parser("table", help="Print the full code table")

    idx = sub.add_parser("idx", help="List the language tracks of a VobSub .idx/.sub file")
    idx.add_argument("file", type=Path)

    detect = sub.add_parser("detect", help="Detect the language of text subtitles")
    detect.add_argument("files", nargs="+", type=Path)
    detect.add_argument(
        "-f", "--fallback",
        type=str,
        help="Tag to use when the language is unknown (default from config)",
        default=None
    )
    return parser

def run_lookup(args) -> int:
    missing = 0
    for code in args.codes:
        tag = translate(code)
        if tag is None:
            missing += 1
            console.print(f"[bold cyan]{code}[/bold cyan] -> [yellow]not found[/yellow]")
        else:
            console.print(f"[bold cyan]{code}[/bold cyan] -> [bold green]{tag}[/bold green]")
    return 1 if (missing and args.strict) else 0

def run_table(args) -> int:
    table = Table(title="ISO 639-1 -> ISO 639-2/B", show_header=True, header_style="bold magenta", title_justify="left")
    table.add_column("639-1", style="cyan")
    table.add_column("639-2/B", style="green")
    for source, target in ISO_639_PAIRS:
        table.add_row(source, target)
    console.print(table)
    console.print(f"[dim]{len(ISO_639_PAIRS)} languages[/dim]")
    return 0

def run_idx(args) -> int:
    tracks = read_idx_tracks(args.file)
    if not tracks:
        console.print(f"[yellow]No subtitle tracks declared in {args.file.name}.[/yellow]")
        return 0

    table = Table(title=f"Tracks in {args.file.name}", show_header=True, header_style="bold magenta", title_justify="left")
    table.add_column("#", style="dim", width=4)
    table.add_column("Language", style="cyan")
    table.add_column("Tag")
    for track in tracks:
        tag = f"[green]{track.tag}[/green]" if track.tag else f"[yellow]{get_iso_639_2_code(track.language)}[/yellow]"
        table.add_row(str(track.index), track.language or "--", tag)
    console.print(table)
    return 0

def run_detect(args) -> int:
    failed = 0
    for path in args.files:
        try:
            lang = get_subtitle_language(path)
        except (FileNotFoundError, ValueError) as e:
            failed += 1
            console.print(f"[bold red]❌ {path.name}:[/bold red] {e}")
            continue
        tag = language_to_tag(lang, fallback=args.fallback)
        console.print(f"📄 {path.name}: [bold cyan]{lang}[/bold cyan] -> [bold green]{tag}[/bold green]")
    return 1 if failed else 0

COMMANDS = {
    "lookup": run_lookup,
    "table": run_table,
    "idx": run_idx,
    "detect": run_detect,
}

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger("langtag").setLevel(logging.DEBUG)

    try:
        sys.exit(COMMANDS[args.command](args))

    except KeyboardInterrupt:
        console.print("\n[bold red]✖  Aborted by user.[/bold red]")
        sys.exit(130)

    except FileNotFoundError as e:
        console.print(f"[bold red]❌ File not found:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        console.print(f"\n[bold red]💥 An unexpected error occurred:[/bold red] {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
