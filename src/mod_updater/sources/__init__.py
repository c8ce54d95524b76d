"""Remote sources the updater reads from."""

from .manifest_client import Manifest, ManifestClient

__all__ = ["Manifest", "ManifestClient"]
