"""
Configuration settings for the Search Server.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system, or pass a
``config_dict`` to ``SearchServer`` to override them per instance.
"""

# Ranking settings
MAX_RESULT_DOCUMENT_COUNT = 5  # Number of results returned by find_top_documents
EPSILON = 1e-6  # Relevances closer than this are treated as equal

# Text processing settings
WORD_SEPARATOR = " "  # Only the ASCII space separates words
DEFAULT_STOP_WORDS = ""  # Stop words used by the CLI when the input's stop-word line is empty

# Document settings
DEFAULT_STATUS = "ACTUAL"  # Status filter used when none is supplied

# Auto-correction settings
AUTO_CORRECT_ENABLED = True  # Enable/disable suggestions for unknown query words
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for suggestions
MAX_SUGGESTIONS = 3  # Maximum suggestions per unknown word

# Output settings
VERBOSE = False  # Enable verbose output in the CLI
RELEVANCE_PRECISION = 6  # Digits after the decimal point for printed relevance

# Debug settings
LOG_LEVEL = "WARNING"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
