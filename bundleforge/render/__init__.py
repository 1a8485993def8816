"""HTML inclusion tags for bundles and individually included assets."""

from bundleforge.render.tags import css_include_html, include_html, js_include_html

__all__ = ["css_include_html", "include_html", "js_include_html"]
