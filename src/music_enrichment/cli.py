# ============================================================================
# src/music_enrichment/cli.py
# ============================================================================
"""
Command line entry point.

    music-enrichment fetch --composer "Johann Sebastian Bach" --limit 5
    music-enrichment index --input data/music_metadata.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    AlgoliaSettings,
    GeminiSettings,
    MusicBrainzSettings,
    PipelineSettings,
    algolia_settings,
    gemini_settings,
    logging_settings,
    musicbrainz_settings,
    pipeline_settings,
)
from .core.orchestrator import BatchOrchestrator
from .core.pacing import FixedDelayPacer
from .core.pipeline import check_credentials, run_pipeline
from .enrichers.music_enricher import MusicEnricher
from .gemini.client import create_client
from .indexing.algolia_client import AlgoliaIndexBackend
from .indexing.publisher import IndexPublisher
from .indexing.task import TaskPollingPolicy
from .sources.musicbrainz import MusicBrainzClient
from .utils.exceptions import ConfigurationError, IndexingError, IndexWriteError
from .utils.file_utils import write_json
from .utils.logging import setup_logging


logger = logging.getLogger("music_enrichment")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-enrichment",
        description="Enrich classical music works with Gemini and index them in Algolia",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")

    sub = parser.add_subparsers(dest="command", required=True)

    fetch = sub.add_parser("fetch", help="Fetch raw works from MusicBrainz")
    fetch.add_argument("--composer", help="Composer name (exact MusicBrainz name)")
    fetch.add_argument("--limit", type=int, help="Number of works to keep (0 = all)")
    fetch.add_argument("--output", type=Path, help="Output JSON file")

    index = sub.add_parser("index", help="Enrich a raw batch and publish it")
    index.add_argument("--input", type=Path, help="Raw works JSON file")
    index.add_argument("--index-name", help="Destination index")

    return parser


async def fetch_command(args: argparse.Namespace, settings: MusicBrainzSettings) -> int:
    if not settings.has_valid_user_agent():
        logger.error(
            "Please set MUSICBRAINZ_USER_AGENT in your .env file "
            "with your application name and email."
        )
        return 1

    composer = args.composer or settings.MUSICBRAINZ_COMPOSER
    limit = args.limit if args.limit is not None else settings.MUSICBRAINZ_LIMIT
    output = args.output or settings.MUSICBRAINZ_OUTPUT_FILE

    client = MusicBrainzClient.from_settings(settings)
    try:
        works = await client.fetch_composer_works(composer, limit)
    finally:
        await client.close()

    if not works:
        logger.info("No data fetched to save.")
        return 0

    write_json(works, output)
    logger.info(f"Successfully saved {len(works)} works to {output}")
    logger.info(f"Sample Data: {json.dumps(works[0], ensure_ascii=False)}")
    return 0


async def index_command(
    args: argparse.Namespace,
    gemini_settings: GeminiSettings,
    algolia_settings: AlgoliaSettings,
    pipeline_settings: PipelineSettings,
) -> int:
    try:
        check_credentials(gemini_settings, algolia_settings)
    except ConfigurationError as e:
        logger.error(f"ERROR: {e}")
        return 1

    index_name = args.index_name or algolia_settings.ALGOLIA_INDEX_NAME
    input_path = args.input or pipeline_settings.INPUT_FILE

    client = create_client(settings=gemini_settings)
    backend = AlgoliaIndexBackend.from_settings(algolia_settings)
    orchestrator = BatchOrchestrator(
        MusicEnricher(client, {"repair_json": pipeline_settings.ENRICHMENT_REPAIR_JSON}),
        pacer=FixedDelayPacer(pipeline_settings.ENRICHMENT_DELAY_SECONDS),
    )
    publisher = IndexPublisher(backend, TaskPollingPolicy.from_settings(algolia_settings))

    try:
        await run_pipeline(
            input_path,
            index_name,
            pipeline_settings.SEARCHABLE_ATTRIBUTES,
            orchestrator,
            publisher,
        )
    except IndexingError as e:
        logger.error(f"Error during indexing: {e}", extra={"index_name": e.index_name})
        if isinstance(e, IndexWriteError) and e.raw_response is not None:
            logger.error(f"Raw backend response: {json.dumps(e.raw_response, indent=2, default=str)}")
        return 1
    finally:
        await client.close()
        await backend.close()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=args.log_level or logging_settings.LOG_LEVEL,
        log_file=logging_settings.LOG_FILE,
        format_json=args.json_logs or logging_settings.LOG_FORMAT_JSON,
    )

    if args.command == "fetch":
        return asyncio.run(fetch_command(args, musicbrainz_settings))
    return asyncio.run(
        index_command(args, gemini_settings, algolia_settings, pipeline_settings)
    )


if __name__ == "__main__":
    sys.exit(main())
