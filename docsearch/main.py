"""
Console entry point.

Reads the corpus and one query from stdin and prints the ranked results:

    stdin:
        a the on
        3
        white cat and fashionable collar
        fluffy cat fluffy tail
        groomed dog expressive eyes
        fluffy groomed cat

    stdout:
        { document_id = 1, relevance = 0.650672 }
        { document_id = 2, relevance = 0.274653 }
        { document_id = 0, relevance = 0.081093 }

Relevance is printed with 6 significant digits.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import SearchError
from .logging_config import setup_logging
from .server import create_search_server
from .tfidf import ScoredDocument

logger = logging.getLogger(__name__)


def format_result(document: ScoredDocument) -> str:
    return f"{{ document_id = {document.document_id}, relevance = {document.relevance:g} }}"


def run(stdin: TextIO, stdout: TextIO, top_k: Optional[int] = None) -> List[ScoredDocument]:
    """
    Build a server from stdin, answer the query line and print results.

    A missing query line is treated as an empty query.
    """
    lines = iter(stdin)
    server = create_search_server(lines, max_results=top_k)

    query = next(lines, "").rstrip("\r\n")
    results = server.find_top_documents(query)
    for document in results:
        print(format_result(document), file=stdout)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank documents read from stdin against a query using TF-IDF"
    )
    parser.add_argument('--top-k', type=int, default=None,
                        help='Maximum number of results (default: DOCSEARCH_MAX_RESULTS or 5)')
    parser.add_argument('--log-level', default=None,
                        help='Console log level (default: LOG_LEVEL or INFO)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        overrides = {}
        if args.log_level:
            overrides["log_level"] = args.log_level
        if args.top_k is not None:
            overrides["max_result_document_count"] = args.top_k
        if overrides:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_file=settings.log_file,
        console_level=settings.log_level_number,
    )

    try:
        run(sys.stdin, sys.stdout, top_k=settings.max_result_document_count)
    except SearchError as e:
        logger.error(f"Search failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
