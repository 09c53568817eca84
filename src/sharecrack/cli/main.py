"""Typer-based command line interface for sharecrack."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from ..challenges import BUILTIN
from ..config import AppConfig, ConsensusConfig, TieBreak, dump_default_config, load_config
from ..consensus import ConsensusCracker
from ..decoding import decode as decode_value
from ..exceptions import ConfigError, DecodeError, ShareLoadError
from ..loader import challenge_from_path, load_share_set
from ..logging import configure_logging
from ..paths import local_config_path
from ..report import render_text, result_to_dict

app = typer.Typer(help="Recover threshold secrets and flag corrupted shares")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _consensus_config(ctx: typer.Context, strict: bool, tie_break: Optional[TieBreak]) -> ConsensusConfig:
    config: AppConfig = ctx.obj
    updates = {}
    if strict:
        updates["strict_loading"] = True
    if tie_break is not None:
        updates["tie_break"] = tie_break
    return config.consensus.model_copy(update=updates)


@app.command()
def solve(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Fail on the first undecodable share"),
    tie_break: Optional[TieBreak] = typer.Option(None, "--tie-break", help="Tie-break policy"),
) -> None:
    """Solve a challenge document (JSON or YAML)."""
    consensus = _consensus_config(ctx, strict, tie_break)
    try:
        document = challenge_from_path(path)
        share_set = load_share_set(document, strict=consensus.strict_loading)
    except (ValidationError, ShareLoadError, ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Cannot load {path}: {exc}", err=True)
        raise typer.Exit(code=2)

    result = ConsensusCracker(consensus).crack(share_set)
    if as_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2))
    else:
        for line in render_text("", result):
            typer.echo(line)
    if not result.solved:
        raise typer.Exit(code=1)


@app.command()
def demo(ctx: typer.Context) -> None:
    """Solve the built-in demonstration challenges."""
    consensus = _consensus_config(ctx, False, None)
    cracker = ConsensusCracker(consensus)
    rendered = []
    for index, build in enumerate(BUILTIN.values(), start=1):
        share_set = load_share_set(build(), strict=consensus.strict_loading)
        rendered.append(render_text(f"TestCase-{index}", cracker.crack(share_set)))
    for secret_line, _ in rendered:
        typer.echo(secret_line)
    for _, faulty_line in rendered:
        typer.echo(faulty_line)


@app.command()
def decode(
    value: str = typer.Argument(..., help="Encoded value"),
    base: int = typer.Option(..., "--base", "-b", help="Radix between 2 and 36"),
) -> None:
    """Decode a single value written in the given base."""
    try:
        typer.echo(str(decode_value(value, base)))
    except DecodeError as exc:
        typer.echo(f"{exc.reason.value}: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command("init-config")
def init_config(
    target: Path = typer.Option(local_config_path(), "--path", help="Where to write the defaults"),
) -> None:
    """Write the default configuration file."""
    dump_default_config(target)
    typer.echo(f"Default configuration written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"sharecrack {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
