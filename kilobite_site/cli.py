"""Cyclopts CLI entrypoint for checking and exporting the Kilobite site config.

The ``site`` console script defined here validates a ``site.yaml`` file before
a build, prints the effective configuration as JSON, and exports it to the
YAML or JSON file read by the page rendering pipeline.

Examples
--------
Validate the checked-in configuration:

>>> from kilobite_site.cli import app
>>> app.run(["validate"])  # doctest: +SKIP

Export the shipped defaults for the Astro build:

>>> app.run(["export", "--output", "dist/site-config.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json as msgspec_json
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import (
    SITE_CONFIG,
    ConfigValidationError,
    dump_site_config,
    encode_site_config_json,
    load_site_config,
)

if typ.TYPE_CHECKING:
    from .config import SiteConfig

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None) -> SiteConfig:
    """Load ``config`` when given, otherwise return the shipped defaults."""
    if config is None:
        return SITE_CONFIG
    return load_site_config(config)


@app.command(help="Check that a site config file loads and validates.")
def validate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Validate the configuration file at ``config``.

    Prints ``ok <path>`` on success. When the file is missing, cannot be
    parsed, or fails validation the error is printed and the process exits
    with status 1.
    """
    try:
        load_site_config(config)
    except (ConfigValidationError, FileNotFoundError, YAMLError) as exc:
        print(f"invalid {_format_path(config)}: {exc}")
        raise SystemExit(1) from exc
    print(f"ok {_format_path(config)}")


@app.command(help="Print the effective site config as JSON.")
def show(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print the configuration as indented JSON.

    Without ``config`` the shipped default instance is printed.
    """
    site_config = _resolve_config(config)
    payload = msgspec_json.format(encode_site_config_json(site_config), indent=2)
    print(payload.decode("utf-8"))


@app.command(help="Write the site config as YAML or JSON for the page build.")
def export(
    *,
    output: typ.Annotated[
        Path, Parameter(help="Destination file (.yaml, .yml or .json)")
    ],
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Export the configuration to ``output``.

    Parameters
    ----------
    output : Path
        Destination file; the suffix selects the format.
    config : Path or None, optional
        Source configuration file. When ``None`` (default) the shipped
        default instance is exported.

    Raises
    ------
    ValueError
        If ``output`` has an unsupported suffix.
    """
    site_config = _resolve_config(config)
    written = dump_site_config(site_config, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
