"""Tests for loading site configuration mappings and YAML files.

The loader reads the camelCase keys of the literal configuration source and
must report every failure as a :class:`ConfigValidationError` whose
``field_path`` starts at the configuration root.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent
from types import MappingProxyType

import pytest

from kilobite_site.config import (
    SITE_CONFIG,
    ConfigValidationError,
    Image,
    Link,
    build_site_config,
    load_site_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


def _payload(**overrides: typ.Any) -> dict[str, typ.Any]:  # noqa: ANN401
    payload: dict[str, typ.Any] = {
        "title": "Kilobite",
        "description": "A blog",
    }
    payload.update(overrides)
    return payload


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_checked_in_config_matches_default_instance() -> None:
    """config/site.yaml should describe the same site as SITE_CONFIG."""
    loaded = load_site_config(REPO_ROOT / "config" / "site.yaml")
    assert loaded == SITE_CONFIG


def test_load_yaml_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        title: Kilobite
        description: A blog
        headerNavLinks:
          - text: Home
            href: /
          - text: Blog
            href: /blog
        hero:
          title: Hungry of learning?
          actions:
            - text: Get in Touch
              href: /contact
        subscribe:
          formUrl: '#'
        postsPerPage: 8
        """,
    )
    site = load_site_config(path)
    assert site.header_nav == (Link("Home", "/"), Link("Blog", "/blog"))
    assert site.hero is not None
    assert site.hero.title == "Hungry of learning?"
    assert site.hero.buttons == (Link("Get in Touch", "/contact"),)
    assert site.subscribe is not None
    assert site.subscribe.form_url == "#"
    assert site.posts_per_page == 8
    assert site.projects_per_page is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.yaml")


def test_non_mapping_document_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list")
    with pytest.raises(ConfigValidationError) as excinfo:
        load_site_config(path)
    assert excinfo.value.field_path == "<root>"


def test_empty_document_reports_missing_title(tmp_path: Path) -> None:
    path = _write(tmp_path, "# nothing configured yet")
    with pytest.raises(ConfigValidationError) as excinfo:
        load_site_config(path)
    assert excinfo.value.field_path == "title"


def test_missing_description_is_rejected() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config({"title": "Kilobite"})
    assert excinfo.value.field_path == "description"


def test_hero_absent_stays_none() -> None:
    site = build_site_config(_payload())
    assert site.hero is None


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_posts_per_page_names_the_field(size: int) -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(postsPerPage=size))
    assert excinfo.value.field_path == "postsPerPage"


def test_empty_form_url_reports_nested_path() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(subscribe={"title": "News", "formUrl": ""}))
    assert excinfo.value.field_path == "subscribe.formUrl"


def test_missing_form_url_reports_nested_path() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(subscribe={"title": "News"}))
    assert excinfo.value.field_path == "subscribe.formUrl"


def test_hero_action_errors_carry_index() -> None:
    payload = _payload(
        hero={"actions": [{"text": "Go", "href": "/"}, {"text": "Broken"}]}
    )
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(payload)
    assert excinfo.value.field_path == "hero.actions[1].href"


def test_hero_image_errors_carry_path() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(hero={"image": {"alt": "no source"}}))
    assert excinfo.value.field_path == "hero.image.src"


def test_non_mapping_records_are_rejected() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(subscribe="#"))
    assert excinfo.value.field_path == "subscribe"

    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(footerNavLinks=[["Contact", "/contact"]]))
    assert excinfo.value.field_path == "footerNavLinks[0]"


def test_link_list_must_be_a_list() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(socialLinks={"text": "GitHub"}))
    assert excinfo.value.field_path == "socialLinks"


def test_unknown_keys_are_ignored() -> None:
    site = build_site_config(_payload(theme="dark"))
    assert site.title == "Kilobite"


def test_read_only_mappings_are_accepted() -> None:
    payload = MappingProxyType(
        _payload(subscribe=MappingProxyType({"formUrl": "#"}))
    )
    site = build_site_config(payload)
    assert site.subscribe is not None
    assert site.subscribe.form_url == "#"


def test_logo_and_captions_are_loaded() -> None:
    site = build_site_config(
        _payload(
            logo={"src": "/logo.svg", "alt": "Kilobite", "caption": "Logo"},
            image={"src": "/preview.jpg", "caption": "Preview"},
        )
    )
    assert site.logo == Image(src="/logo.svg", alt="Kilobite", caption="Logo")
    assert site.image is not None
    assert site.image.caption == "Preview"
    assert site.image.alt is None


def test_logo_errors_carry_path() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(_payload(logo={"caption": "no source"}))
    assert excinfo.value.field_path == "logo.src"
