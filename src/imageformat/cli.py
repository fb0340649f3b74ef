"""CLI commands for imageformat."""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console

from imageformat.api import DEFAULT_THUMBNAILS, format_file
from imageformat.config import ServiceConfig
from imageformat.models.options import Crop, Options, Resize, Thumb

console = Console()

_THUMB_RE = re.compile(r"^(?P<suffix>.*):(?P<width>\d+)x(?P<height>\d+)$")


def parse_thumb(value: str) -> Thumb:
    """Parse SUFFIX:WIDTHxHEIGHT, e.g. "-small:150x150"."""
    match = _THUMB_RE.match(value)
    if not match:
        raise click.BadParameter(f"expected SUFFIX:WIDTHxHEIGHT, got {value!r}")
    return Thumb(
        suffix=match.group("suffix"),
        width=int(match.group("width")),
        height=int(match.group("height")),
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every processing step")
def main(verbose: bool) -> None:
    """imageformat - rotate, crop and resize images and generate thumbnails."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("format")
@click.argument("src", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("dst", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--cropx", default=0, type=click.IntRange(min=0), help="X coordinate to start crop.")
@click.option("--cropy", default=0, type=click.IntRange(min=0), help="Y coordinate to start crop.")
@click.option("--cropw", default=0, type=click.IntRange(min=0), help="Width of crop.")
@click.option("--croph", default=0, type=click.IntRange(min=0), help="Height of crop.")
@click.option("--rotate", default=0.0, type=float, help="Degrees rotation, counter-clockwise.")
@click.option("--fill", default="black", help="Color to fill: black / b, white / w. Anything else: transparent.")
@click.option("--resizew", default=0, type=click.IntRange(min=0),
              help="Resize width. If 0, the height is used.")
@click.option("--resizeh", default=0, type=click.IntRange(min=0),
              help="Resize height. If 0, the width is used.")
@click.option("--thumb", "thumbs", multiple=True,
              help="Thumbnail as SUFFIX:WIDTHxHEIGHT (can repeat). Default: -small:150x150")
@click.option("--no-thumbs", is_flag=True, help="Do not generate thumbnails")
def format_command(
    src: Path,
    dst: Path,
    cropx: int,
    cropy: int,
    cropw: int,
    croph: int,
    rotate: float,
    fill: str,
    resizew: int,
    resizeh: int,
    thumbs: Tuple[str, ...],
    no_thumbs: bool,
) -> None:
    """Format SRC and write the result to DST plus thumbnails next to it."""
    if no_thumbs:
        thumbnails: Tuple[Thumb, ...] = ()
    elif thumbs:
        thumbnails = tuple(parse_thumb(t) for t in thumbs)
    else:
        thumbnails = DEFAULT_THUMBNAILS

    options = Options(
        crop=Crop(x=cropx, y=cropy, width=cropw, height=croph),
        rotate=rotate,
        fill=fill,
        resize=Resize(width=resizew, height=resizeh),
        thumbnails=thumbnails,
    )

    result = format_file(src, dst, options)

    if result.failed:
        console.print(f"[red]✗ Failed: {result.error}[/red]")
        raise SystemExit(1)

    for path in result.outputs:
        console.print(f"[green]✓[/green] {path}")


@main.command()
@click.option("--root", default=None, help="Root folder to store processed images. Default: .")
@click.option("--host", default=None, help="Interface to bind. Default: 0.0.0.0")
@click.option("--port", default=None, type=int, help="Port to listen on. Default: 8080")
def serve(root: Optional[str], host: Optional[str], port: Optional[int]) -> None:
    """Run the HTTP API."""
    import uvicorn

    from imageformat.service.main import create_app

    config = ServiceConfig.from_env()
    overrides = {k: v for k, v in (("root", root), ("host", host), ("port", port)) if v is not None}
    if overrides:
        config = ServiceConfig(**{**config.model_dump(), **overrides})

    app = create_app(config)
    console.print(f"[cyan]Listening on {config.host}:{config.port}[/cyan]")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
