"""Serialize a SiteConfig back to its literal source shape.

The mapping produced here uses the camelCase keys read by the page rendering
pipeline, keeps the source field order, drops absent optional fields, and
keeps empty link lists as ``[]`` so that absence and emptiness survive a
round trip through :func:`~kilobite_site.config.loader.build_site_config`.

Examples
--------
>>> from kilobite_site.config import SITE_CONFIG, site_config_to_mapping
>>> list(site_config_to_mapping(SITE_CONFIG))[:3]
['title', 'subtitle', 'description']
"""

from __future__ import annotations

import typing as typ

import msgspec.json as msgspec_json
from ruamel.yaml import YAML

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import Hero, Image, Link, SiteConfig, Subscribe

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def site_config_to_mapping(config: SiteConfig) -> dict[str, typ.Any]:
    """Return ``config`` as a plain mapping using the literal source keys."""
    return _drop_absent(
        {
            "logo": _image_to_mapping(config.logo),
            "title": config.title,
            "subtitle": config.subtitle,
            "description": config.description,
            "image": _image_to_mapping(config.image),
            "headerNavLinks": _links_to_list(config.header_nav_links),
            "footerNavLinks": _links_to_list(config.footer_nav_links),
            "socialLinks": _links_to_list(config.social_links),
            "hero": _hero_to_mapping(config.hero),
            "subscribe": _subscribe_to_mapping(config.subscribe),
            "postsPerPage": config.posts_per_page,
            "projectsPerPage": config.projects_per_page,
        }
    )


def encode_site_config_json(config: SiteConfig) -> bytes:
    """Encode ``config`` as JSON bytes."""
    return msgspec_json.encode(site_config_to_mapping(config))


def dump_site_config(config: SiteConfig, path: Path) -> Path:
    """Write ``config`` to ``path`` as YAML or JSON depending on the suffix.

    Raises
    ------
    ValueError
        If the suffix of ``path`` is neither YAML nor JSON.
    """
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        msg = f"Unsupported output format '{path.suffix}'; use .yaml or .json."
        raise ValueError(msg)
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix in JSON_SUFFIXES:
        payload = msgspec_json.format(encode_site_config_json(config), indent=2)
        path.write_bytes(payload + b"\n")
        return path
    yaml = _build_yaml_dumper()
    with path.open("w", encoding="utf-8") as handle:
        yaml.dump(site_config_to_mapping(config), handle)
    return path


def _build_yaml_dumper() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _drop_absent(mapping: dict[str, typ.Any]) -> dict[str, typ.Any]:
    return {key: value for key, value in mapping.items() if value is not None}


def _image_to_mapping(image: Image | None) -> dict[str, typ.Any] | None:
    if image is None:
        return None
    return _drop_absent({"src": image.src, "alt": image.alt, "caption": image.caption})


def _links_to_list(links: tuple[Link, ...] | None) -> list[dict[str, str]] | None:
    if links is None:
        return None
    return [{"text": link.text, "href": link.href} for link in links]


def _hero_to_mapping(hero: Hero | None) -> dict[str, typ.Any] | None:
    if hero is None:
        return None
    return _drop_absent(
        {
            "title": hero.title,
            "text": hero.text,
            "image": _image_to_mapping(hero.image),
            "actions": _links_to_list(hero.actions),
        }
    )


def _subscribe_to_mapping(subscribe: Subscribe | None) -> dict[str, typ.Any] | None:
    if subscribe is None:
        return None
    return _drop_absent(
        {
            "title": subscribe.title,
            "text": subscribe.text,
            "formUrl": subscribe.form_url,
        }
    )


__all__ = [
    "JSON_SUFFIXES",
    "YAML_SUFFIXES",
    "dump_site_config",
    "encode_site_config_json",
    "site_config_to_mapping",
]
