from __future__ import annotations
from pathlib import Path
import sys
import click
from .clack import ConfigurableCommand

if sys.version_info[:2] >= (3, 11):
    from tomllib import load as toml_load
else:
    from tomli import load as toml_load

DEFAULT_CFG = Path.home() / ".config" / "sparselife.toml"


def configure(
    ctx: click.Context, _param: click.Parameter, filename: str | Path
) -> None:
    try:
        with open(filename, "rb") as fp:
            cfg = toml_load(fp)
    except FileNotFoundError:
        cfg = {}
    opts = cfg.get("options")
    if isinstance(opts, dict):
        assert isinstance(ctx.command, ConfigurableCommand)
        ctx.default_map = ctx.command.process_config(opts)
    elif opts is not None:
        raise click.UsageError(
            f"{filename}: 'options' must be a table, not {type(opts).__name__}"
        )
