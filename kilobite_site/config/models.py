"""Typed dataclasses describing the Kilobite site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


class ConfigValidationError(ValueError):
    """Raised when the site configuration is invalid or incomplete.

    ``field_path`` names the offending field using the camelCase keys of the
    literal configuration source, for example ``subscribe.formUrl`` or
    ``hero.actions[0].href``.
    """

    def __init__(self, field_path: str, reason: str) -> None:
        super().__init__(f"{field_path}: {reason}")
        self.field_path = field_path
        self.reason = reason

    def within(self, prefix: str) -> ConfigValidationError:
        """Return a copy of this error nested under ``prefix``."""
        return ConfigValidationError(f"{prefix}.{self.field_path}", self.reason)


def _require_str(field_path: str, value: object) -> None:
    if not isinstance(value, str):
        msg = f"expected a string, got {type(value).__name__}"
        raise ConfigValidationError(field_path, msg)


def _optional_str(field_path: str, value: object) -> None:
    if value is not None:
        _require_str(field_path, value)


def _optional_record(field_path: str, value: object, kind: type) -> None:
    if value is not None and not isinstance(value, kind):
        msg = f"expected {kind.__name__}, got {type(value).__name__}"
        raise ConfigValidationError(field_path, msg)


def _freeze_links(field_path: str, value: object) -> tuple[Link, ...] | None:
    """Copy a link sequence into a tuple, keeping ``None`` as absent."""
    match value:
        case None:
            return None
        case list() | tuple():
            pass
        case _:
            msg = f"expected a sequence of links, got {type(value).__name__}"
            raise ConfigValidationError(field_path, msg)
    for index, entry in enumerate(value):
        if not isinstance(entry, Link):
            msg = f"expected Link, got {type(entry).__name__}"
            raise ConfigValidationError(f"{field_path}[{index}]", msg)
    return tuple(value)


def _page_size(field_path: str, value: object) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"expected a positive integer, got {type(value).__name__}"
        raise ConfigValidationError(field_path, msg)
    if value < 1:
        msg = f"must be a positive integer, got {value}"
        raise ConfigValidationError(field_path, msg)


@dc.dataclass(frozen=True, slots=True)
class Image:
    """Image reference used for logos, previews and the hero."""

    src: str
    alt: str | None = None
    caption: str | None = None

    def __post_init__(self) -> None:
        _require_str("src", self.src)
        _optional_str("alt", self.alt)
        _optional_str("caption", self.caption)


@dc.dataclass(frozen=True, slots=True)
class Link:
    """Navigation or call-to-action link."""

    text: str
    href: str

    def __post_init__(self) -> None:
        _require_str("text", self.text)
        _require_str("href", self.href)


@dc.dataclass(frozen=True, slots=True)
class Hero:
    """Landing page hero copy, artwork and call-to-action buttons."""

    title: str | None = None
    text: str | None = None
    image: Image | None = None
    actions: tuple[Link, ...] | None = None

    def __post_init__(self) -> None:
        _optional_str("title", self.title)
        _optional_str("text", self.text)
        _optional_record("image", self.image, Image)
        object.__setattr__(self, "actions", _freeze_links("actions", self.actions))

    @property
    def buttons(self) -> tuple[Link, ...]:
        """Return the actions in render order, empty when none are set."""
        return self.actions or ()


@dc.dataclass(frozen=True, slots=True, kw_only=True)
class Subscribe:
    """Newsletter sign-up block posting to ``form_url``."""

    title: str | None = None
    text: str | None = None
    form_url: str

    def __post_init__(self) -> None:
        _require_str("formUrl", self.form_url)
        if not self.form_url.strip():
            raise ConfigValidationError("formUrl", "must not be empty")
        _optional_str("title", self.title)
        _optional_str("text", self.text)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide settings consumed by the page rendering pipeline."""

    title: str
    description: str
    logo: Image | None = None
    subtitle: str | None = None
    image: Image | None = None
    header_nav_links: tuple[Link, ...] | None = None
    footer_nav_links: tuple[Link, ...] | None = None
    social_links: tuple[Link, ...] | None = None
    hero: Hero | None = None
    subscribe: Subscribe | None = None
    posts_per_page: int | None = None
    projects_per_page: int | None = None

    def __post_init__(self) -> None:
        _require_str("title", self.title)
        _require_str("description", self.description)
        _optional_record("logo", self.logo, Image)
        _optional_str("subtitle", self.subtitle)
        _optional_record("image", self.image, Image)
        for attr, key in _LINK_FIELDS:
            object.__setattr__(self, attr, _freeze_links(key, getattr(self, attr)))
        _optional_record("hero", self.hero, Hero)
        _optional_record("subscribe", self.subscribe, Subscribe)
        _page_size("postsPerPage", self.posts_per_page)
        _page_size("projectsPerPage", self.projects_per_page)

    @property
    def header_nav(self) -> tuple[Link, ...]:
        """Header navigation links, empty when none are configured."""
        return self.header_nav_links or ()

    @property
    def footer_nav(self) -> tuple[Link, ...]:
        """Footer navigation links, empty when none are configured."""
        return self.footer_nav_links or ()

    @property
    def social(self) -> tuple[Link, ...]:
        """Social profile links, empty when none are configured."""
        return self.social_links or ()


_LINK_FIELDS: typ.Final[tuple[tuple[str, str], ...]] = (
    ("header_nav_links", "headerNavLinks"),
    ("footer_nav_links", "footerNavLinks"),
    ("social_links", "socialLinks"),
)


__all__ = [
    "ConfigValidationError",
    "Hero",
    "Image",
    "Link",
    "SiteConfig",
    "Subscribe",
]
