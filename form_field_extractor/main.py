"""
Form Field Extractor - Main Entry Point
Runs the acquire-extract-release cycle with a bounded retry policy.
"""

import asyncio
import argparse
import sys
import time
from typing import Optional

from form_field_extractor.analyzer.dispatcher import ExtractorDispatcher
from form_field_extractor.config.settings import Settings
from form_field_extractor.errors import ExtractionError
from form_field_extractor.models.result import ExtractionResult
from form_field_extractor.utils.logger import logger


async def extract_with_retries(
    reference: str,
    timeout: Optional[int] = None,
    max_attempts: Optional[int] = None,
    headless: Optional[bool] = None,
    dispatcher: Optional[ExtractorDispatcher] = None,
) -> ExtractionResult:
    """
    Extract fields from a reference, retrying acquisition failures.

    Only retryable errors (acquisition) are retried; a document that fails
    to parse fails the same way every time.

    Args:
        reference: URL or path of a PDF or HTML form
        timeout: Acquisition timeout in ms
        max_attempts: Attempt ceiling (at least 1)
        headless: Override headless setting
        dispatcher: Dispatcher to use (built from the arguments if None)

    Returns:
        ExtractionResult with fields and run metadata

    Raises:
        ExtractionError: last failure once attempts are exhausted
    """
    start_time = time.time()
    if max_attempts is None:
        max_attempts = Settings.MAX_ATTEMPTS
    max_attempts = max(1, max_attempts)
    dispatcher = dispatcher or ExtractorDispatcher(timeout=timeout, headless=headless)

    notes = []
    attempt = 0

    while True:
        attempt += 1
        logger.info(f"Attempt {attempt}/{max_attempts}")

        try:
            fields = await dispatcher.dispatch(reference)
            break
        except ExtractionError as e:
            notes.append(f"Attempt {attempt} failed: {e}")
            if not e.retryable or attempt >= max_attempts:
                raise
            logger.warning(f"Attempt {attempt} failed ({e.phase}), retrying: {e.message}")
            await asyncio.sleep(Settings.RETRY_DELAY / 1000)

    result = ExtractionResult(
        reference=reference,
        source='pdf' if dispatcher.is_pdf_reference(reference) else 'html',
        fields=fields,
        attempts=attempt,
        duration_ms=(time.time() - start_time) * 1000,
        notes=notes,
    )

    for field in result.anomalies():
        result.notes.append(f"Empty name or label: {field!r}")

    return result


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Form Field Extractor - canonical form fields from a PDF or HTML form"
    )

    parser.add_argument(
        '--url',
        type=str,
        required=True,
        help='URL or path of the form (e.g., https://example.com/form.pdf)'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=Settings.DEFAULT_TIMEOUT / 1000,
        help='Timeout in seconds for download, navigation and page load (default: 30)'
    )

    parser.add_argument(
        '--max-attempts',
        type=int,
        default=Settings.MAX_ATTEMPTS,
        help='Maximum number of attempts for acquisition failures (default: 3)'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Output JSON file path (optional)'
    )

    parser.add_argument(
        '--no-headless',
        action='store_true',
        help='Run browser in visible mode'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        Settings.update(log_level="DEBUG", debug_mode=True)
        logger.set_level(Settings.LOG_LEVEL)
        logger.debug(f"Settings: {Settings.to_dict()}")

    # Timeouts are passed on in whole milliseconds
    if args.timeout < 0.001:
        logger.error("--timeout must be at least 0.001 seconds")
        sys.exit(2)

    try:
        result = asyncio.run(extract_with_retries(
            reference=args.url,
            timeout=int(args.timeout * 1000),
            max_attempts=args.max_attempts,
            headless=not args.no_headless,
        ))
    except KeyboardInterrupt:
        logger.warning("Extraction interrupted by user")
        sys.exit(1)
    except ExtractionError as e:
        logger.error(f"Failed to extract fields: {e}")
        sys.exit(1)

    logger.info("\n" + result.summary())

    if args.output:
        result.save_to_file(args.output)
        logger.success(f"Fields saved to: {args.output}")

    print(result.to_json())


if __name__ == '__main__':
    main()
