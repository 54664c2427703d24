"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    ROOT_PATH,
    _build_links,
    _build_optional_image,
    _nest,
    _require_mapping,
    _required,
)
from .models import ConfigValidationError, Hero, SiteConfig, Subscribe

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing site metadata, navigation and hero copy.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Validated, immutable site configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigValidationError
        If the document is not a mapping, a required field is missing, or a
        constrained field (page sizes, subscribe form URL) is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from kilobite_site.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'Kilobite'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if loaded is None:
        loaded = {}
    return build_site_config(loaded)


def build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from a mapping that uses the literal source keys.

    Unknown keys are ignored. Errors raised from nested records carry the
    full path from the root, e.g. ``hero.actions[0].href``.
    """
    data = _require_mapping(ROOT_PATH, payload)
    return SiteConfig(
        logo=_build_optional_image("logo", data.get("logo")),
        title=_required(data, "title"),
        subtitle=data.get("subtitle"),
        description=_required(data, "description"),
        image=_build_optional_image("image", data.get("image")),
        header_nav_links=_build_links("headerNavLinks", data.get("headerNavLinks")),
        footer_nav_links=_build_links("footerNavLinks", data.get("footerNavLinks")),
        social_links=_build_links("socialLinks", data.get("socialLinks")),
        hero=_build_hero(data.get("hero")),
        subscribe=_build_subscribe(data.get("subscribe")),
        posts_per_page=data.get("postsPerPage"),
        projects_per_page=data.get("projectsPerPage"),
    )


def _build_hero(payload: object) -> Hero | None:
    """Build the hero section, or ``None`` when the site has no hero."""
    if payload is None:
        return None
    try:
        data = _require_mapping(ROOT_PATH, payload)
        return Hero(
            title=data.get("title"),
            text=data.get("text"),
            image=_build_optional_image("image", data.get("image")),
            actions=_build_links("actions", data.get("actions")),
        )
    except ConfigValidationError as exc:
        raise _nest(exc, "hero") from exc


def _build_subscribe(payload: object) -> Subscribe | None:
    """Build the newsletter block, or ``None`` when the site has none."""
    if payload is None:
        return None
    try:
        data = _require_mapping(ROOT_PATH, payload)
        return Subscribe(
            title=data.get("title"),
            text=data.get("text"),
            form_url=_required(data, "formUrl"),
        )
    except ConfigValidationError as exc:
        raise _nest(exc, "subscribe") from exc


__all__ = ["build_site_config", "load_site_config"]
