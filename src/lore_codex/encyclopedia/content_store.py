"""
Content stores for encyclopedia resources.

A content store turns a logical address (``metadata``, ``characters``,
``characters/aldric``, ``skills``) into a JSON payload or a text blob, or
raises ``RetrievalError``. Two backends are provided:

    FileContentStore   reads ``<data_dir>/<address>.json|.txt`` from disk
    HttpContentStore   fetches ``<base_url>/<address>.json|.txt`` over HTTP
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any, Protocol

import httpx
from loguru import logger

from .errors import RetrievalError


def _sanitize_component(component: str, address: str) -> str:
    """
    Validate one path component of an address.

    Args:
        component: Single segment of the address (category or item id)
        address: Full address, used for error reporting

    Returns:
        The component, unchanged

    Raises:
        RetrievalError: If the component is empty or could escape the data root
    """
    if not component or not component.strip():
        raise RetrievalError(address, "empty address component")

    if re.search(r'[<>:"|?*\\]', component) or component.startswith("."):
        raise RetrievalError(address, f"invalid address component '{component}'")

    return component


def _split_address(address: str) -> list[str]:
    return [_sanitize_component(part, address) for part in address.split("/")]


class ContentStore(Protocol):
    """Anything that can fetch encyclopedia resources by logical address."""

    async def get_json(self, address: str) -> Any:
        """Fetch a structured resource. Raises RetrievalError on failure."""
        ...

    async def get_text(self, address: str) -> str:
        """Fetch a raw text resource. Raises RetrievalError on failure."""
        ...


class FileContentStore:
    """
    Reads encyclopedia resources from a local data directory.

    Directory structure:
        data/
            metadata.json     # summaries for every category
            characters.json   # standalone listing per category
            characters/       # one .txt per character
            locations/
            deities/
            skills.txt        # every skill in one flat blob
    """

    def __init__(self, data_dir: str | Path = "data"):
        """
        Initialize the file content store.

        Args:
            data_dir: Root directory of the encyclopedia data (default: "data")
        """
        self.data_dir = Path(data_dir).resolve()
        logger.info(f"📚 Encyclopedia content store at: {self.data_dir}")

    def resolve_path(self, address: str, suffix: str) -> Path:
        """Map a logical address to a file path inside the data directory."""
        parts = _split_address(address)
        path = self.data_dir.joinpath(*parts[:-1], f"{parts[-1]}{suffix}").resolve()

        if not path.is_relative_to(self.data_dir):
            raise RetrievalError(address, "address escapes the data directory")

        return path

    async def _read(self, address: str, suffix: str) -> str:
        path = self.resolve_path(address, suffix)

        if not path.is_file():
            raise RetrievalError(address, f"file not found: {path.name}")

        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"❌ Failed to read '{path}': {e}")
            raise RetrievalError(address, str(e)) from e

    async def get_json(self, address: str) -> Any:
        content = await self._read(address, ".json")
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise RetrievalError(address, f"invalid JSON: {e}") from e

    async def get_text(self, address: str) -> str:
        return await self._read(address, ".txt")


class HttpContentStore:
    """
    Fetches encyclopedia resources from a static HTTP host.

    Uses one shared ``httpx.AsyncClient``; call ``aclose()`` when done.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the HTTP content store.

        Args:
            base_url: URL of the directory holding ``metadata.json`` etc.
            timeout: Per-request timeout in seconds
            transport: Optional custom transport (used by tests)
        """
        self.base_url = base_url.rstrip("/") + "/"
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )
        logger.info(f"🌐 Encyclopedia content store at: {self.base_url}")

    async def _fetch(self, address: str, suffix: str) -> httpx.Response:
        parts = _split_address(address)
        url = "/".join(parts) + suffix

        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"❌ Request for '{url}' failed: {e}")
            raise RetrievalError(address, str(e)) from e

        if not response.is_success:
            raise RetrievalError(address, f"HTTP {response.status_code}")

        return response

    async def get_json(self, address: str) -> Any:
        response = await self._fetch(address, ".json")
        try:
            return response.json()
        except ValueError as e:
            raise RetrievalError(address, f"invalid JSON: {e}") from e

    async def get_text(self, address: str) -> str:
        response = await self._fetch(address, ".txt")
        return response.text

    async def aclose(self) -> None:
        await self._client.aclose()
