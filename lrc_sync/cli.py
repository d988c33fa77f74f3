from __future__ import annotations

from pathlib import Path

import typer

from lrc_sync.config import load_config
from lrc_sync.logging_setup import setup_logging
from lrc_sync.lrc.errors import LrcReadError
from lrc_sync.lrc.export import export_json, export_lrc
from lrc_sync.lrc.parse import parse_lrc, parse_lrc_with_stats, read_lrc_text
from lrc_sync.sync.locator import NO_LINE, find_line


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def _main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Inspect, convert and query timed lyrics (LRC) files."""
    setup_logging(debug)


def _read(lrc_path: Path) -> str:
    cfg = load_config()
    try:
        return read_lrc_text(lrc_path, encoding=cfg.encoding)
    except LrcReadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def parse(lrc_path: Path):
    """Parse LRC and print metadata and stats."""
    doc, stats = parse_lrc_with_stats(_read(lrc_path))
    typer.echo(f"title={doc.title or ''}")
    typer.echo(f"artist={doc.artist or ''}")
    typer.echo(f"album={doc.album or ''}")
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_metadata={stats.lines_metadata}")
    typer.echo(f"lines_with_timestamps={stats.lines_with_timestamps}")
    typer.echo(f"lines_ignored={stats.lines_ignored}")
    typer.echo(f"lines_emitted={stats.lines_emitted}")


@app.command()
def export(
    lrc_path: Path,
    fmt: str | None = typer.Option(None, "--format", case_sensitive=False, help="lrc|json (default from config)"),
    millis: bool | None = typer.Option(
        None, "--millis/--no-millis", help="Write [mm:ss.xxx] instead of [mm:ss.xx] (default from config)"
    ),
    out: Path | None = typer.Option(None, "--out", help="Output file (default: stdout)"),
):
    """Export LRC as normalized LRC or JSON."""
    cfg = load_config()
    fmt_l = (fmt or cfg.export_format).lower()
    if fmt_l not in ("lrc", "json"):
        raise typer.BadParameter("format must be one of: lrc, json")

    doc = parse_lrc(_read(lrc_path))
    if fmt_l == "json":
        data = export_json(doc) + "\n"
    else:
        data = export_lrc(doc, millis=cfg.export_millis if millis is None else millis)

    if out:
        out.write_text(data, encoding="utf-8")
    else:
        typer.echo(data, nl=False)


@app.command()
def locate(lrc_path: Path, position_ms: int):
    """Print the line active at POSITION_MS as "index<TAB>text", or -1."""
    doc = parse_lrc(_read(lrc_path))
    idx = find_line(doc.lines, position_ms)
    if idx == NO_LINE:
        typer.echo(str(NO_LINE))
        return
    typer.echo(f"{idx}\t{doc.lines[idx].text}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
