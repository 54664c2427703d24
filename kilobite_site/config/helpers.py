"""Utility helpers shared by the Kilobite configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import ConfigValidationError, Image, Link

ROOT_PATH = "<root>"


def _require_mapping(
    field_path: str, payload: object
) -> typ.Mapping[str, typ.Any]:
    """Return ``payload`` when it is a mapping, raising otherwise."""
    match payload:
        case cabc.Mapping() as data:
            return data
        case _:
            msg = f"expected a mapping, got {type(payload).__name__}"
            raise ConfigValidationError(field_path, msg)


def _required(data: typ.Mapping[str, typ.Any], key: str) -> typ.Any:  # noqa: ANN401
    """Return ``data[key]``, raising when the key is missing or null."""
    value = data.get(key)
    if value is None:
        raise ConfigValidationError(key, "is required")
    return value


def _build_image(payload: object) -> Image:
    """Build an Image from its mapping form."""
    data = _require_mapping(ROOT_PATH, payload)
    return Image(
        src=_required(data, "src"),
        alt=data.get("alt"),
        caption=data.get("caption"),
    )


def _build_optional_image(key: str, payload: object) -> Image | None:
    """Build the image stored under ``key``, or ``None`` when absent."""
    if payload is None:
        return None
    try:
        return _build_image(payload)
    except ConfigValidationError as exc:
        raise _nest(exc, key) from exc


def _build_link(payload: object) -> Link:
    """Build a Link from its mapping form."""
    data = _require_mapping(ROOT_PATH, payload)
    return Link(text=_required(data, "text"), href=_required(data, "href"))


def _build_links(key: str, entries: object) -> list[Link] | None:
    """Build an ordered link list, keeping ``None`` for an absent key."""
    match entries:
        case None:
            return None
        case list() as items:
            pass
        case _:
            msg = f"expected a list, got {type(entries).__name__}"
            raise ConfigValidationError(key, msg)
    links: list[Link] = []
    for index, entry in enumerate(items):
        try:
            links.append(_build_link(entry))
        except ConfigValidationError as exc:
            raise _nest(exc, f"{key}[{index}]") from exc
    return links


def _nest(exc: ConfigValidationError, prefix: str) -> ConfigValidationError:
    """Nest ``exc`` under ``prefix``, replacing a bare root marker."""
    if exc.field_path == ROOT_PATH:
        return ConfigValidationError(prefix, exc.reason)
    return exc.within(prefix)


__all__ = [
    "ROOT_PATH",
    "_build_image",
    "_build_link",
    "_build_links",
    "_build_optional_image",
    "_nest",
    "_require_mapping",
    "_required",
]
