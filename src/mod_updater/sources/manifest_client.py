"""HTTP client for the mod server's manifest and file endpoints."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError, validator

from ..config.settings import UpdaterConfig
from ..exceptions import NetworkError, RemoteError
from ..utils.file_utils import FileHelper

logger = logging.getLogger(__name__)


class Manifest(BaseModel):
    """Payload served by the manifest endpoint."""
    mods: List[str]

    @validator('mods')
    def validate_mod_names(cls, v):
        for name in v:
            if not FileHelper.is_plain_filename(name):
                raise ValueError(f'not a plain file name: {name!r}')
        return v


class ManifestClient:
    """Fetch the authoritative mod list and individual mod files.

    Every request is made exactly once. Any failure raises immediately and
    is expected to abort the sync that issued it.
    """

    def __init__(self, config: UpdaterConfig):
        """Initialize with updater configuration.

        Args:
            config: Settings providing the base URL, endpoints and timeout
        """
        self.config = config
        self.headers = {'User-Agent': config.user_agent}

    def _get(self, url: str, accept: Optional[str] = None) -> requests.Response:
        """Issue a GET request and translate failures into sync errors.

        Args:
            url: Absolute URL to fetch
            accept: Optional Accept header value

        Returns:
            Response with a successful status code

        Raises:
            NetworkError: The server could not be reached
            RemoteError: The server answered with a non-success status
        """
        headers = dict(self.headers)
        if accept:
            headers['Accept'] = accept

        logger.debug(f"GET {url}")
        try:
            response = requests.get(url, headers=headers, timeout=self.config.request_timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Could not reach {url}: {e}", url=url) from e

        if not response.ok:
            raise RemoteError(response.status_code, response.reason or "", url=url)

        return response

    def fetch_manifest(self) -> List[str]:
        """Fetch the ordered list of mod file names that should exist locally.

        Returns:
            Mod file names in manifest order

        Raises:
            NetworkError: The server could not be reached
            RemoteError: Non-success status or a malformed manifest payload
        """
        url = self.config.manifest_url
        logger.info("Fetching mod list from server")
        response = self._get(url, accept='application/json')

        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as e:
            raise RemoteError(response.status_code, f"Manifest is not valid JSON: {e}", url=url) from e

        if not isinstance(payload, dict):
            raise RemoteError(response.status_code, "Manifest must be a JSON object", url=url)

        try:
            manifest = Manifest(**payload)
        except ValidationError as e:
            raise RemoteError(response.status_code, f"Malformed manifest: {e}", url=url) from e

        logger.debug(f"Server mods: {', '.join(manifest.mods)}")
        return manifest.mods

    def content_url(self, name: str) -> str:
        """Build the download URL for a mod file."""
        return f"{self.config.content_url}/{quote(name)}"

    def fetch_content(self, name: str) -> bytes:
        """Download the raw bytes of one mod file.

        Args:
            name: Mod file name as listed in the manifest

        Returns:
            File contents

        Raises:
            NetworkError: The server could not be reached
            RemoteError: The server answered with a non-success status
        """
        url = self.content_url(name)
        try:
            response = self._get(url)
        except RemoteError as e:
            raise RemoteError(e.status_code, f"Failed to download {name}: {e.reason}", url=url) from e

        return response.content
