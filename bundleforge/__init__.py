"""Bundleforge: fingerprint-cached CSS and JavaScript bundling.

Combines the css and js files a page declares into one file per type,
named after a fingerprint of its inputs, and rebuilds it only when one of
those inputs changes:
  - Content fingerprints over logical -> resolved paths (SHA-256)
  - Change markers (mtime + size) recorded in a JSON manifest per bundle
  - Atomic writes for bundles and manifests (temp file + os.replace)
  - Minified-sibling preference, external and skipped assets included inline
  - Env-driven configuration (BUNDLEFORGE_*), Typer CLI
"""

__version__ = "0.1.0"
__description__ = "Fingerprint-cached CSS and JavaScript bundling"

from bundleforge.core.bundler import BundleBuilder
from bundleforge.core.pipeline import AssetPipeline
from bundleforge.core.request import BundleRequest
from bundleforge.cli.app import app as cli

__all__ = ["AssetPipeline", "BundleBuilder", "BundleRequest", "cli", "__version__"]
