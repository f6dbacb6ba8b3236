import json
import logging
from typing import IO, Any

import click

from hlsparse import __version__
from hlsparse.errors import ParseError
from hlsparse.media import MediaPlaylist, parse


def _as_dict(playlist: MediaPlaylist) -> dict[str, Any]:
    return {
        "version": playlist.version,
        "target_duration": int(playlist.target_duration.total_seconds()),
        "ended": playlist.ended,
        "duration": playlist.duration.total_seconds(),
        "segments": [
            {"url": segment.url, "duration": segment.duration.total_seconds()}
            for segment in playlist.segments
        ],
    }


def _echo_text(playlist: MediaPlaylist) -> None:
    click.echo(f"Version: {playlist.version}")
    click.echo(f"Target duration: {playlist.target_duration.total_seconds():.0f}s")
    click.echo(f"Ended: {'yes' if playlist.ended else 'no'}")
    click.echo(f"Segments: {len(playlist.segments)}")
    click.echo(f"Duration: {playlist.duration.total_seconds():.3f}s")
    for segment in playlist.segments:
        click.echo(f"{segment.duration.total_seconds():.3f}\t{segment.url}")


@click.command("hlsparse")
@click.argument("playlist", type=click.File("r", encoding="utf-8"))
@click.option("--json", "as_json", is_flag=True, help="Print the playlist as JSON")
@click.option(
    "--strict/--no-strict",
    default=False,
    envvar="HLSPARSE_STRICT",
    show_default=True,
    help="Reject #EXTINF tags that are not followed by a URL",
)
@click.option("-v", "--verbose", is_flag=True, help="Log parsing details")
@click.version_option(__version__, prog_name="hlsparse")
def main(playlist: IO[str], as_json: bool, strict: bool, verbose: bool) -> None:
    """Parse an HLS media PLAYLIST ("-" for stdin) and print it."""

    if verbose:
        logging.getLogger("hlsparse").setLevel(logging.DEBUG)
    try:
        parsed = parse(playlist.read(), strict=strict)
    except ParseError as error:
        raise click.ClickException(str(error)) from error
    if as_json:
        click.echo(json.dumps(_as_dict(parsed), indent=2))
    else:
        _echo_text(parsed)
