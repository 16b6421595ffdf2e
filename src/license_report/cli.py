from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from .config import DEFAULT_FILE_NAME, ConfigError, ReportConfig, load_config
from .reporting import JsonReportRenderer, render_json
from .snapshot import SnapshotError, load_cyclonedx, load_snapshot, merge_snapshots
from .types import ProjectData

logger = logging.getLogger(__name__)


def _collect_project_data(snapshots: tuple[str, ...], sboms: tuple[str, ...]) -> ProjectData:
    loaded = [load_snapshot(Path(snapshot)) for snapshot in snapshots]
    for sbom in sboms:
        loaded.append(ProjectData(all_dependencies=tuple(load_cyclonedx(Path(sbom)))))
    return merge_snapshots(*loaded)


def _resolve_config(
    config_path: Optional[str],
    output_dir: Optional[str],
    file_name: Optional[str],
    single_license: Optional[bool],
) -> ReportConfig:
    if config_path:
        return load_config(
            Path(config_path),
            output_dir=Path(output_dir) if output_dir else None,
            file_name=file_name,
            only_one_license_per_module=single_license,
        )
    return ReportConfig(
        output_dir=Path(output_dir or "."),
        file_name=file_name or DEFAULT_FILE_NAME,
        only_one_license_per_module=single_license if single_license is not None else True,
    )


@click.group()
@click.option("--verbose", is_flag=True, help="Log loading and rendering details to stderr.")
def main(verbose: bool) -> None:
    """Dependency license report CLI."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option(
    "--snapshot",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="JSON snapshot of dependencies and imported module bundles.",
)
@click.option(
    "--sbom",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="CycloneDX SBOM whose components are reported as dependencies.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="TOML file with a [tool.license-report] or [license-report] table.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=str),
    help="Directory the report is written to (defaults to the config value or the current directory).",
)
@click.option("--file-name", type=str, help=f"Report file name (default {DEFAULT_FILE_NAME}).")
@click.option(
    "--single-license/--all-licenses",
    "single_license",
    default=None,
    help="Report one license per module (default) or every distinct license.",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the report instead of writing a file.")
def render(
    snapshot: tuple[str, ...],
    sbom: tuple[str, ...],
    config_path: Optional[str],
    output_dir: Optional[str],
    file_name: Optional[str],
    single_license: Optional[bool],
    to_stdout: bool,
) -> None:
    """Render collected license data into a JSON report."""

    if not snapshot and not sbom:
        click.echo("No snapshot or SBOM supplied; nothing to render.", err=True)
        raise SystemExit(1)

    try:
        config = _resolve_config(config_path, output_dir, file_name, single_license)
        data = _collect_project_data(snapshot, sbom)
    except (ConfigError, SnapshotError) as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug("Resolved report configuration: %s", config.as_dict())

    if to_stdout:
        click.echo(render_json(data, config.mode))
        return

    destination = JsonReportRenderer.from_config(config).render(data, config)
    click.echo(f"License report written to {destination}", err=True)


if __name__ == "__main__":
    main()
