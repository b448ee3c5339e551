"""Napiprojekt.pl subtitles API client."""

import base64
import binascii
import logging
import platform
import xml.etree.ElementTree as ET

import httpx

from napisy.domain.exceptions import InvalidResponse, SubtitlesNotFound
from napisy.domain.value_objects import Digest

logger = logging.getLogger(__name__)

# Search endpoint body meaning "no subtitles for this file and language".
NOT_FOUND_MARKER = "NPc0"


def decode_subtitles(data: bytes) -> str:
    """Decode subtitle bytes: UTF-8, then cp1250 (common for Polish), then replace."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return data.decode("cp1250")
        except UnicodeDecodeError:
            return data.decode("utf-8", errors="replace")


def parse_download_response(body: bytes) -> str:
    """Extract subtitles text from the XML download response.

    Raises SubtitlesNotFound when status is not "success" and InvalidResponse
    when the XML or the base64 payload cannot be decoded.
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise InvalidResponse(f"Malformed XML in download response: {e}") from e
    status = (root.findtext("status") or "").strip()
    if status != "success":
        raise SubtitlesNotFound("subtitles not found")
    content = root.findtext("subtitles/content") or ""
    try:
        data = base64.b64decode(content.strip(), validate=True)
    except binascii.Error as e:
        raise InvalidResponse(f"Malformed base64 subtitles content: {e}") from e
    return decode_subtitles(data)


class NapiprojektClient:
    """Subtitles lookup using Napiprojekt HTTP API."""

    def __init__(
        self,
        search_url: str,
        download_url: str,
        client_name: str = "NapiProjektPython",
        client_version: str = "0.1",
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._search_url = search_url
        self._download_url = download_url
        self._client_name = client_name
        self._client_version = client_version
        self._http = http_client or httpx.AsyncClient()

    async def search(self, digest: Digest, fingerprint: str, lang: str) -> bool:
        """Return whether subtitles exist for the digest in given language."""
        params = {
            "f": digest.hex,
            "t": fingerprint,
            "v": "other",
            "kolejka": "false",
            "nick": "",
            "pass": "",
            "napios": platform.system().lower(),
            "l": lang,
        }
        logger.debug("Searching subtitles f=%s t=%s l=%s", digest.hex, fingerprint, lang)
        response = await self._http.get(self._search_url, params=params)
        response.raise_for_status()
        return response.text.strip() != NOT_FOUND_MARKER

    async def download(self, digest: Digest, lang: str) -> str:
        """Download subtitles text for the digest.

        The service returns Polish subtitles when the language is missing.
        """
        form = {
            "downloaded_subtitles_lang": lang,
            "downloaded_subtitles_txt": "1",
            "client_ver": self._client_version,
            "downloaded_subtitles_id": digest.hex,
            "client": self._client_name,
            "mode": "1",
        }
        logger.debug("Downloading subtitles id=%s lang=%s", digest.hex, lang)
        response = await self._http.post(self._download_url, data=form)
        response.raise_for_status()
        return parse_download_response(response.content)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "NapiprojektClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_http_client(
    connect_timeout: float,
    request_timeout: float,
    max_connections: int,
    keepalive_expiry: float,
) -> httpx.AsyncClient:
    """Build pooled async HTTP client with connect and overall timeouts."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(request_timeout, connect=connect_timeout),
        limits=httpx.Limits(
            max_connections=max_connections,
            keepalive_expiry=keepalive_expiry,
        ),
    )
