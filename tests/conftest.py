"""Shared fixtures for search server tests."""

import pytest

from search_server import DocumentStatus, SearchServer


@pytest.fixture
def pet_server():
    """Three Russian documents with stop words и, в, на."""
    server = SearchServer("и в на")
    server.add_document(12, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [1])
    server.add_document(4, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [12, 1, 5])
    server.add_document(42, "ухоженный пёс выразительные глаза", DocumentStatus.BANNED, [-2, 5, 3])
    return server


@pytest.fixture
def song_server():
    """English documents without stop words."""
    server = SearchServer()
    server.add_document(12, "sweet home alabama in", DocumentStatus.ACTUAL, [1])
    server.add_document(4, "love me tender love me too", DocumentStatus.ACTUAL, [12, 1, 5])
    server.add_document(42, "I sit and wait any angels", DocumentStatus.BANNED, [-2, 3])
    return server
