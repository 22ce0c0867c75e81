#!/usr/bin/env python3
"""
Example usage of the Search Server.

This script demonstrates how to use the search engine programmatically
for various search tasks.
"""

import sys
from pathlib import Path

# Add parent directory to path to import search_server
sys.path.append(str(Path(__file__).parent.parent))

from search_server import BadArgument, DocumentStatus, OutOfRange, ResultFormatter, SearchServer
import config


def build_server():
    """Create a small server with three documents."""
    server = SearchServer("и в на")
    server.add_document(12, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [1])
    server.add_document(4, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [12, 1, 5])
    server.add_document(42, "ухоженный пёс выразительные глаза", DocumentStatus.BANNED, [-2, 5, 3])
    return server


def basic_search_example():
    """Demonstrate ranking with the default status, a status and a predicate."""
    print("=== Basic Search Example ===")

    server = build_server()
    formatter = ResultFormatter(config)
    query = "пушистый ухоженный кот"

    print("ACTUAL:")
    formatter.print_results(server.find_top_documents(query))
    print("BANNED:")
    formatter.print_results(server.find_top_documents(query, DocumentStatus.BANNED))
    print("Even ids:")
    formatter.print_results(server.find_top_documents(
        query, lambda document_id, status, rating: document_id % 2 == 0))


def match_example():
    """Demonstrate matching queries against single documents."""
    print("\n=== Match Example ===")

    server = build_server()
    formatter = ResultFormatter(config)
    for index in range(server.get_document_count()):
        document_id = server.get_document_id(index)
        words, status = server.match_document("пушистый кот -ошейник", document_id)
        formatter.print_match_document_result(document_id, words, status)


def suggestion_example():
    """Demonstrate suggestions for unknown query words."""
    print("\n=== Suggestion Example ===")

    server = build_server()
    print(server.suggest_corrections("пушистй хвсот"))


def error_example():
    """Demonstrate the errors raised for bad input."""
    print("\n=== Error Example ===")

    server = build_server()
    for query in ["--кот", "кот -", "кот \x02"]:
        try:
            server.find_top_documents(query)
        except BadArgument as e:
            print(f"{query!r}: {e}")
    try:
        server.get_document_id(server.get_document_count())
    except OutOfRange as e:
        print(f"get_document_id: {e}")


def main():
    """Run all examples."""
    print("Search Server - Example Usage")
    print("=" * 50)

    basic_search_example()
    match_example()
    suggestion_example()
    error_example()

    print("\n" + "=" * 50)
    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
