"""Typed site configuration for the Kilobite blog and portfolio.

This subpackage defines the immutable records (:class:`SiteConfig`,
:class:`Hero`, :class:`Subscribe`, :class:`Link`, :class:`Image`) read by the
page rendering pipeline, the shipped default instance :data:`SITE_CONFIG`,
a YAML loader that validates a configuration file into those records, and a
serializer that writes them back in the literal source shape.

Examples
--------
>>> from kilobite_site.config import SITE_CONFIG
>>> SITE_CONFIG.title
'Kilobite'
>>> [link.text for link in SITE_CONFIG.header_nav]
['Home', 'Blog', 'Tags']
"""

from .defaults import SITE_CONFIG, build_default_site_config
from .loader import build_site_config, load_site_config
from .models import (
    ConfigValidationError,
    Hero,
    Image,
    Link,
    SiteConfig,
    Subscribe,
)
from .serialize import (
    dump_site_config,
    encode_site_config_json,
    site_config_to_mapping,
)

__all__ = [
    "SITE_CONFIG",
    "ConfigValidationError",
    "Hero",
    "Image",
    "Link",
    "SiteConfig",
    "Subscribe",
    "build_default_site_config",
    "build_site_config",
    "dump_site_config",
    "encode_site_config_json",
    "load_site_config",
    "site_config_to_mapping",
]
