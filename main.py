#!/usr/bin/env python3
"""
Main entry point for the Search Server.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from search_server import (
    DocumentReader,
    DocumentStatus,
    ResultFormatter,
    SearchServer,
    SearchServerError,
)
import config


def build_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="In-memory TF-IDF search server with stop words and minus words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format (file or stdin):
  <stop words>
  <document count N>
  <document text>          } repeated N times,
  <k> <r1> ... <rk>        } ids are 0..N-1

Examples:
  python main.py --input docs.txt                      # Start interactive search
  python main.py --input docs.txt --query "cat -dog"   # Single query mode
  python main.py --input docs.txt --query=-dog         # A query starting with "-" needs "="
  python main.py --input docs.txt --match 3 --query "cat dog"
  python main.py < docs_and_queries.txt                # Remaining lines are queries
        """
    )

    parser.add_argument(
        "--input",
        type=str,
        default="-",
        help="File with stop words and documents (default: stdin)"
    )

    parser.add_argument(
        "--stop-words",
        type=str,
        default=None,
        help="Space-separated stop words, overriding the input's first line"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--status",
        type=str,
        default=config.DEFAULT_STATUS,
        choices=[status.name for status in DocumentStatus],
        help="Only return documents with this status (default: ACTUAL)"
    )

    parser.add_argument(
        "--match",
        type=int,
        default=None,
        metavar="ID",
        help="Report matched query words for this document instead of ranking"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after loading"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def load_server(stream, stop_words=None):
    """Build a SearchServer from the line-oriented input format."""
    file_stop_words, documents = DocumentReader(stream).read()
    if stop_words is None:
        stop_words = file_stop_words or config.DEFAULT_STOP_WORDS
    server = SearchServer(stop_words)
    for document_id, text, status, ratings in documents:
        server.add_document(document_id, text, status, ratings)
    return server


def process_query(server, formatter, query, status, match_id=None):
    """Run one query and print its results."""
    if match_id is not None:
        words, document_status = server.match_document(query, match_id)
        formatter.print_match_document_result(match_id, words, document_status)
        return

    formatter.print_results(server.find_top_documents(query, status))
    suggestions = formatter.format_suggestions(server.suggest_corrections(query))
    if suggestions:
        print(f"Did you mean: {suggestions}")


def interactive_search(server, formatter, status, match_id=None):
    """
    Start an interactive search session.

    Type 'exit' or 'quit' to end the session.
    """
    print("\n=== Interactive Search ===")
    print("Type 'exit' or 'quit' to quit.")

    while True:
        try:
            query = input("Enter search query: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not query:
            continue
        if query.lower() in ('exit', 'quit'):
            print("Goodbye!")
            break

        try:
            process_query(server, formatter, query, status, match_id)
        except SearchServerError as e:
            print(f"Error processing query: {e}")


def main(argv=None):
    """Main entry point for the search server."""
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose or config.VERBOSE else config.LOG_LEVEL
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

    status = DocumentStatus.from_name(args.status)
    formatter = ResultFormatter(config)

    # Load documents
    try:
        if args.input == "-":
            stream = sys.stdin
            server = load_server(stream, args.stop_words)
        else:
            stream = None
            with open(args.input, "r", encoding="utf-8") as f:
                server = load_server(f, args.stop_words)
    except (OSError, SearchServerError) as e:
        print(f"Error loading documents: {e}")
        sys.exit(1)

    # Show statistics if requested
    if args.stats:
        print("\n=== Index Statistics ===")
        for key, value in server.get_stats().items():
            print(f"{key}: {value}")

    if args.query:
        # Single query mode
        try:
            process_query(server, formatter, args.query, status, args.match)
        except SearchServerError as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
    elif stream is not None:
        # Remaining stdin lines are queries
        for line in stream:
            query = line.rstrip("\r\n")
            if not query:
                continue
            try:
                process_query(server, formatter, query, status, args.match)
            except SearchServerError as e:
                print(f"Error processing query: {e}")
    else:
        interactive_search(server, formatter, status, args.match)


if __name__ == "__main__":
    main()
