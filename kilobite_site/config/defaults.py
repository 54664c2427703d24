"""The shipped Kilobite site configuration.

``SITE_CONFIG`` is built once at import time and is never mutated afterwards,
so it can be shared by any number of readers. ``config/site.yaml`` mirrors the
same values for tooling that prefers a file on disk.
"""

from __future__ import annotations

from .models import Hero, Image, Link, SiteConfig, Subscribe


def build_default_site_config() -> SiteConfig:
    """Return a freshly constructed copy of the Kilobite site configuration."""
    return SiteConfig(
        title="Kilobite",
        subtitle="Satisfying your tech appetite, one bite at a time.",
        description=(
            "Astro.js and Tailwind CSS theme for blog and portfolio by justgoodui.com"
        ),
        image=Image(
            src="/dante-preview.jpg",
            alt="Dante - Astro.js and Tailwind CSS theme",
        ),
        header_nav_links=(
            Link(text="Home", href="/"),
            Link(text="Blog", href="/blog"),
            Link(text="Tags", href="/tags"),
        ),
        footer_nav_links=(
            Link(text="Contact", href="/contact"),
            Link(text="GitHub", href="https://github.com/jogjech"),
        ),
        social_links=(),
        hero=Hero(
            title="Hungry of learning?",
            text="I'm **Kevin Wang**, a Senior Software Developer at Amazon.",
            image=Image(
                src="/hero.jpeg",
                alt="A person sitting at a desk in front of a computer",
            ),
            actions=(Link(text="Get in Touch", href="/contact"),),
        ),
        subscribe=Subscribe(
            title="Subscribe to the Kilobite Newsletter",
            text="One update per week. All the latest posts directly in your inbox.",
            form_url="#",
        ),
        posts_per_page=8,
        projects_per_page=8,
    )


SITE_CONFIG = build_default_site_config()


__all__ = ["SITE_CONFIG", "build_default_site_config"]
