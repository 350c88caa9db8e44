from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from xypher.classical import register_all
from xypher.classical.sequence import CipherSequence, sequence_name
from xypher.config import XypherConfig
from xypher.core.encoder import Encoder
from xypher.core.errors import XypherError
from xypher.core.registry import cipher_from_canonical_name, list_cipher_types
from xypher.logs import configure_logging
from xypher.persistence import FileHandler
from xypher.workspace import Workspace

log = logging.getLogger(__name__)

app = typer.Typer(help="Xypher: build, chain and save classical substitution ciphers.")


@app.callback()
def _init(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Where saved encoders live."),
    config: Optional[Path] = typer.Option(None, "--config", help="TOML file with an [xypher] table."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ..."),
):
    register_all()
    try:
        cfg = XypherConfig.load(config)
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    cfg = cfg.override(data_dir=data_dir, log_level=log_level.upper() if log_level else None)
    configure_logging(cfg.log_level, cfg.log_file)
    ctx.obj = Workspace(FileHandler(cfg.data_dir, indent=cfg.json_indent))


@contextmanager
def _user_errors() -> Iterator[None]:
    try:
        yield
    except XypherError as e:
        log.debug("Command failed", exc_info=True)
        raise typer.BadParameter(str(e))


def _lookup(ws: Workspace, name: str) -> Encoder:
    """Saved encoder by name, else an ad-hoc cipher from a canonical name."""
    if name not in ws.encoders and ws.files.exists(name):
        return ws.load_encoder(name)
    return ws.resolve(name)


@app.command()
def types():
    """List the cipher types that can be built."""
    for name in list_cipher_types():
        typer.echo(name)


@app.command("list")
def list_saved(ctx: typer.Context):
    """List saved encoders."""
    ws: Workspace = ctx.obj
    saved = ws.files.list_saved()
    if not saved:
        typer.echo(f"No saved encoders in {ws.files.data_dir}")
        return
    for name in saved:
        typer.echo(name)


@app.command()
def add(ctx: typer.Context, name: str = typer.Argument(..., help="Canonical name, e.g. AffineCipher-5-8.")):
    """Build a cipher and save it."""
    ws: Workspace = ctx.obj
    with _user_errors():
        cipher = ws.add_encoder(cipher_from_canonical_name(name))
        ws.save_encoder(cipher.name)
    typer.echo(cipher.name)


@app.command("new-sequence")
def new_sequence(ctx: typer.Context, base: str = typer.Argument(..., help="Name; 'Sequence' is appended.")):
    """Create and save an empty cipher sequence."""
    ws: Workspace = ctx.obj
    with _user_errors():
        seq = ws.add_encoder(CipherSequence(sequence_name(base)))
        ws.save_encoder(seq.name)
    typer.echo(seq.name)


@app.command()
def push(
    ctx: typer.Context,
    sequence: str = typer.Argument(...),
    cipher: str = typer.Argument(..., help="Saved cipher or canonical name."),
):
    """Append a cipher to a saved sequence."""
    ws: Workspace = ctx.obj
    with _user_errors():
        _lookup(ws, sequence)
        seq = ws.get_sequence(sequence)
        _lookup(ws, cipher)
        seq.push_cipher(ws.resolve_cipher(cipher))
        ws.save_encoder(seq.name)
    _show_sequence(seq)


@app.command()
def remove(ctx: typer.Context, sequence: str = typer.Argument(...), index: int = typer.Argument(...)):
    """Remove the cipher at INDEX (0-based) from a saved sequence."""
    ws: Workspace = ctx.obj
    with _user_errors():
        _lookup(ws, sequence)
        seq = ws.get_sequence(sequence)
        removed = seq.remove_cipher(index)
        ws.save_encoder(seq.name)
    typer.echo(f"Removed {removed.name}")
    _show_sequence(seq)


def _show_sequence(seq: CipherSequence) -> None:
    typer.echo(seq.name)
    for i, c in enumerate(seq.get_cipher_list()):
        typer.echo(f"  {i}: {c.name}")


@app.command()
def show(ctx: typer.Context, name: str):
    """Print an encoder; sequences list their members in order."""
    ws: Workspace = ctx.obj
    with _user_errors():
        encoder = _lookup(ws, name)
    if isinstance(encoder, CipherSequence):
        _show_sequence(encoder)
    else:
        typer.echo(encoder.name)


@app.command()
def delete(ctx: typer.Context, name: str):
    """Delete a saved encoder."""
    ws: Workspace = ctx.obj
    with _user_errors():
        ws.files.delete(name)
    typer.echo(f"Deleted {name}")


@app.command()
def encode(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Saved encoder or canonical cipher name."),
    text: str = typer.Argument(...),
):
    """Encode TEXT. Output is uppercase; non-letters pass through."""
    ws: Workspace = ctx.obj
    with _user_errors():
        out = _lookup(ws, name).encode(text)
    typer.echo(out)


@app.command()
def decode(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Saved encoder or canonical cipher name."),
    text: str = typer.Argument(...),
):
    """Decode TEXT previously produced by the same encoder."""
    ws: Workspace = ctx.obj
    with _user_errors():
        out = _lookup(ws, name).decode(text)
    typer.echo(out)


def main():
    app()


if __name__ == "__main__":
    main()
