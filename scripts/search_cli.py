"""
Search a JSON-lines document collection from the command line.

Usage (example):
    uv run python scripts/search_cli.py documents.jsonl --stop-words "и в на" --query "пушистый -пёс"
    uv run python scripts/search_cli.py documents.jsonl --query "пушистый кот" --match 4

Each line of the documents file is an object such as
    {"id": 1, "text": "пушистый кот пушистый хвост", "status": "ACTIVE", "ratings": [7, 2, 7]}
"status" defaults to ACTIVE and "ratings" to an empty list.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from search_server.document import DocumentStatus, format_match_result
from search_server.errors import SearchServerError
from search_server.server import SearchServer

logger = logging.getLogger("search_cli")


def load_documents(server: SearchServer, path: Path) -> None:
    with path.open(encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            record = json.loads(line)
            server.add_document(
                int(record["id"]),
                record["text"],
                DocumentStatus[record.get("status", "ACTIVE")],
                [int(rating) for rating in record.get("ratings", [])],
            )
            logger.debug("Loaded line %d", line_number)
    logger.info("Loaded %d documents from %s", server.get_document_count(), path)


def main() -> int:
    parser = argparse.ArgumentParser(description="TF-IDF search over a JSON-lines document file.")
    parser.add_argument("documents", type=Path, help="Path to the JSON-lines documents file.")
    parser.add_argument("--stop-words", default="", help="Space-separated stop words (default: none).")
    parser.add_argument("--query", required=True, help="Query text; prefix a word with '-' to exclude it.")
    parser.add_argument(
        "--status",
        choices=[status.name for status in DocumentStatus],
        default=None,
        help="Only return documents with this status (default: ACTIVE).",
    )
    parser.add_argument("--match", type=int, default=None, metavar="ID", help="Match the query against one document.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        server = SearchServer(args.stop_words)
        load_documents(server, args.documents)
        if args.match is not None:
            words, status = server.match_document(args.query, args.match)
            print(format_match_result(args.match, words, status))
        else:
            status = DocumentStatus[args.status] if args.status else None
            for document in server.find_top_documents(args.query, status):
                print(document)
    except SearchServerError as e:
        print(f"Search error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
