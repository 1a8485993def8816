"""``<script>`` and ``<link>`` tag rendering."""

from __future__ import annotations

from html import escape

from bundleforge.models.assets import BundleType


def js_include_html(path: str) -> str:
    return f'<script type="text/javascript" src="{escape(path)}"></script>\n'


def css_include_html(path: str) -> str:
    return f'<link type="text/css" rel="stylesheet" href="{escape(path)}">\n'


def include_html(path: str, bundle_type: BundleType) -> str:
    """Return the inclusion tag for *path* as the given bundle type."""
    if bundle_type is BundleType.CSS:
        return css_include_html(path)
    return js_include_html(path)
