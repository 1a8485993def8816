"""Asset pipeline: turns a bundle request into HTML inclusion tags.

The AssetPipeline wires together the PathResolver, ManifestStore,
StalenessDetector and BundleBuilder behind the two calls page templates
need: ``render_js`` and ``render_css``.
"""

from __future__ import annotations

import logging

from bundleforge.config import BundlerSettings
from bundleforge.core.bundler import BundleBuilder
from bundleforge.core.request import BundleRequest
from bundleforge.models.assets import BundleResult, BundleType
from bundleforge.render.tags import include_html

logger = logging.getLogger(__name__)


class AssetPipeline:
    """Builds bundles for a request and renders the tags to include them.

    Parameters
    ----------
    settings:
        Bundler configuration. Uses defaults if not provided.
    builder:
        Pre-wired builder; constructed from ``settings`` if not provided.
    """

    def __init__(
        self,
        settings: BundlerSettings | None = None,
        *,
        builder: BundleBuilder | None = None,
    ) -> None:
        self.settings = settings or (builder.settings if builder else BundlerSettings())
        self.builder = builder or BundleBuilder(self.settings)

    @classmethod
    def from_settings(cls, settings: BundlerSettings) -> AssetPipeline:
        return cls(settings)

    def build(self, request: BundleRequest, bundle_type: BundleType) -> BundleResult | None:
        """Build (or reuse) the bundle for one type of the request."""
        return self.builder.build_result(
            request.bundleable(bundle_type), bundle_type, request=request
        )

    def render(self, request: BundleRequest, bundle_type: BundleType) -> str:
        """Return the inclusion tags for every asset of *bundle_type*.

        With ``optimize_assets`` enabled, external and skipped assets get
        their own tags, in sort order, followed by a single tag for the
        bundle of everything else. Otherwise every asset is included as-is.
        """
        assets = request.assets(bundle_type)
        if not self.settings.optimize_assets:
            return "".join(include_html(a.logical_path, bundle_type) for a in assets)

        html = "".join(
            include_html(a.logical_path, bundle_type) for a in request.inline(bundle_type)
        )
        result = self.build(request, bundle_type)
        if result is not None:
            html += include_html(result.public_path, bundle_type)
        else:
            logger.debug("No bundleable %s assets in request", bundle_type.value)
        return html

    def render_js(self, request: BundleRequest) -> str:
        return self.render(request, BundleType.JS)

    def render_css(self, request: BundleRequest) -> str:
        return self.render(request, BundleType.CSS)
