"""Application entry point and composition root."""

import asyncio
import logging
from collections.abc import Sequence

from napisy import __version__
from napisy.application.use_cases.download_subtitles import DownloadSubtitlesUseCase
from napisy.application.use_cases.search_subtitles import SearchSubtitlesUseCase
from napisy.config import Settings, get_settings
from napisy.infrastructure.digest import extract_digest
from napisy.infrastructure.napiprojekt import NapiprojektClient, create_http_client
from napisy.interfaces.cli import build_parser, run


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_napiprojekt_client(settings: Settings) -> NapiprojektClient:
    """Composition root - build API client from settings."""
    return NapiprojektClient(
        search_url=settings.search_url,
        download_url=settings.download_url,
        client_name=settings.client_name,
        client_version=settings.client_version,
        http_client=create_http_client(
            connect_timeout=settings.connect_timeout,
            request_timeout=settings.request_timeout,
            max_connections=settings.max_connections,
            keepalive_expiry=settings.keepalive_expiry,
        ),
    )


async def _run_with_client(settings: Settings, files: Sequence[str], langs: Sequence[str], search: bool) -> int:
    async with create_napiprojekt_client(settings) as client:
        return await run(
            files,
            langs,
            download_use_case=DownloadSubtitlesUseCase(client, extract_digest),
            search_use_case=SearchSubtitlesUseCase(client, extract_digest),
            search=search,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    parser = build_parser(settings.default_language)
    parser.add_argument("--version", action="version", version=f"napisy v{__version__}")
    args = parser.parse_args(argv)
    configure_logging(args.log_level or settings.log_level)
    if not args.files:
        print("file name missing")
        parser.print_usage()
        return 1
    langs = args.languages or [settings.default_language]
    return asyncio.run(_run_with_client(settings, args.files, langs, args.search))


if __name__ == "__main__":
    raise SystemExit(main())
