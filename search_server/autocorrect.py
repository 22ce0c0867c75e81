"""
Spelling suggestions for query words.

This module suggests indexed words close to query words the index does
not know, using Levenshtein distance and document frequency. Queries are
never rewritten; suggestions are advisory.
"""

from collections import defaultdict
from typing import Dict, List, Tuple

from rapidfuzz.distance import Levenshtein


class AutoCorrect:
    """Suggests corrections using edit distance and frequency."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def build_len_index(self, vocabulary: Dict[str, int]) -> Dict[int, List[str]]:
        """
        Build a length-based index for efficient candidate lookup.

        Args:
            vocabulary: Indexed words mapped to document frequency.

        Returns:
            Dictionary mapping word length to list of words of that length.
        """
        index = defaultdict(list)
        for w in vocabulary:
            index[len(w)].append(w)
        return index

    def _candidate_words(self, word: str, by_len_index: Dict[int, List[str]],
                         max_len_diff: int) -> List[str]:
        """Collect vocabulary words whose length is within max_len_diff of word."""
        L = len(word)
        candidates = []
        for dL in range(-max_len_diff, max_len_diff + 1):
            bucket = by_len_index.get(L + dL)
            if bucket:
                candidates.extend(bucket)
        return candidates

    def get_similar_words(self, word: str, vocabulary: Dict[str, int],
                          by_len_index: Dict[int, List[str]] = None, max_dist: int = None,
                          top_k: int = None) -> List[Tuple[str, int, int]]:
        """
        Get indexed words similar to a given word.

        Args:
            word: Input word.
            vocabulary: Indexed words mapped to document frequency.
            by_len_index: Length-based index of vocabulary; built if omitted.
            max_dist: Maximum edit distance to consider.
            top_k: Number of similar words to return.

        Returns:
            List of (word, distance, frequency) tuples sorted by distance,
            then frequency descending, then word.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE
        if top_k is None:
            top_k = self.config.MAX_SUGGESTIONS
        if by_len_index is None:
            by_len_index = self.build_len_index(vocabulary)

        similar_words = []
        for cand in self._candidate_words(word, by_len_index, max_dist):
            if cand == word:
                continue
            dist = Levenshtein.distance(word, cand, score_cutoff=max_dist)
            if dist <= max_dist:
                similar_words.append((cand, dist, vocabulary.get(cand, 0)))

        similar_words.sort(key=lambda x: (x[1], -x[2], x[0]))
        return similar_words[:top_k]

    def suggest_corrections(self, words: List[str], vocabulary: Dict[str, int]) -> Dict[str, List[str]]:
        """
        Suggest replacements for words missing from the vocabulary.

        Args:
            words: Query words.
            vocabulary: Indexed words mapped to document frequency.

        Returns:
            Mapping of unknown word to suggested words; words without
            suggestions are left out.
        """
        if not self.config.AUTO_CORRECT_ENABLED:
            return {}

        by_len_index = self.build_len_index(vocabulary)
        suggestions = {}
        for w in sorted(words):
            if w in vocabulary:
                continue
            similar = self.get_similar_words(w, vocabulary, by_len_index)
            if similar:
                suggestions[w] = [cand for cand, _dist, _freq in similar]
        return suggestions
