"""
Harvest Command-Line Interface.

Provides the ``harvest`` entry point, a thin wrapper over the bundled presets:

- ``harvest list``        — show the available presets
- ``harvest load NAME``   — download and parse a tabular preset
- ``harvest stage NAME``  — download and extract an archive preset

Usage:
    harvest list
    harvest load iris
    harvest stage mnist_testing --tmp-base ./data
    harvest --config harvest.yaml load sonar
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(
    name="harvest",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

_state: dict[str, Path | None] = {"config": None}


# ── App callback ────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from importlib.metadata import version as pkg_version

        typer.echo(f"harvest-datasets {pkg_version('harvest-datasets')}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML file with fetch/staging settings."),
    ] = None,
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Harvest: example dataset acquisition for learning pipelines."""
    _state["config"] = config


def _load_config():
    """Builds the HarvestConfig and configures logging from it."""
    from harvest.core import HarvestConfig, Logger
    from harvest.exceptions import HarvestConfigError

    path = _state["config"]
    try:
        cfg = HarvestConfig.from_yaml(path) if path is not None else HarvestConfig()
    except (FileNotFoundError, HarvestConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    Logger.setup(level=cfg.log_level)
    return cfg


# ── Commands ────────────────────────────────────────────────────────────────


@app.command("list")
def list_presets() -> None:
    """List the bundled dataset presets."""
    from harvest.core import PRESET_REGISTRY

    for name, preset in sorted(PRESET_REGISTRY.tabular.items()):
        typer.echo(
            f"{name:<24} tabular  {preset.input_count:>3} in / {preset.output_count} out  "
            f"{preset.display_name}"
        )
    for name, preset in sorted(PRESET_REGISTRY.archives.items()):
        typer.echo(f"{name:<24} archive  {preset.family}/{preset.split:<9} {preset.display_name}")


@app.command()
def load(
    name: Annotated[str, typer.Argument(help="Tabular preset name (see `harvest list`).")],
) -> None:
    """Download and parse a tabular preset, then print its summary."""
    from harvest.data_handler import load_preset
    from harvest.exceptions import HarvestError

    cfg = _load_config()
    try:
        dataset = load_preset(name, cfg.fetch)
    except (KeyError, HarvestError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(dataset.summary())


@app.command()
def stage(
    name: Annotated[str, typer.Argument(help="Archive preset name (see `harvest list`).")],
    tmp_base: Annotated[
        Path | None,
        typer.Option("--tmp-base", help="Base directory for staged archives."),
    ] = None,
) -> None:
    """Download and extract an archive preset, then print its directory."""
    from harvest.data_handler import stage_preset
    from harvest.exceptions import HarvestError

    cfg = _load_config()
    try:
        destination = stage_preset(
            name,
            tmp_base=tmp_base,
            staging_config=cfg.staging,
            fetch_config=cfg.fetch,
        )
    except (KeyError, HarvestError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(str(destination))


if __name__ == "__main__":  # pragma: no cover
    app()
