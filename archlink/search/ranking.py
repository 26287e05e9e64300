"""
Search result ranking.

This module scores merged candidates against the query and orders them.
"""

import logging
from typing import List, Sequence

from archlink.core.interfaces import Candidate
from archlink.search.fuzzy import description_hits, edit_distance, query_words


logger = logging.getLogger(__name__)


BASE_SCORE = 1000
DESCRIPTION_WORD_BONUS = 50


class SearchRanker:
    """
    Ranks candidates by name closeness and description relevance.

    ``score = 1000 - edit_distance(name, query)`` plus 50 for every query
    word found (case-insensitively) in the description. Near-exact names
    dominate; description hits are a secondary boost.

    Candidates with equal scores keep their input order.
    """

    def __init__(self, base_score: int = BASE_SCORE, word_bonus: int = DESCRIPTION_WORD_BONUS):
        self.base_score = base_score
        self.word_bonus = word_bonus

    def calculate_score(self, candidate: Candidate, query: str) -> int:
        """
        Calculate the relevance score of a candidate.

        Args:
            candidate: Candidate to score.
            query: Full search query.

        Returns:
            Integer score; higher is more relevant.
        """
        return self._score(candidate, query, query_words(query))

    def _score(self, candidate: Candidate, query: str, words: List[str]) -> int:
        score = self.base_score - edit_distance(candidate.name, query)
        score += self.word_bonus * description_hits(words, candidate.description)
        return score

    def rank_results(self, candidates: Sequence[Candidate], query: str, limit: int) -> List[Candidate]:
        """
        Rank candidates and keep the best ``limit`` of them.

        The input is never modified; a new list is returned. Truncation
        happens after the full sort.

        Args:
            candidates: Merged candidates from all sources.
            query: Full search query.
            limit: Maximum number of candidates to return.

        Returns:
            Candidates ordered by descending score, at most ``limit`` long.

        Raises:
            ValueError: If limit is not positive.
        """
        if limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit}")

        words = query_words(query)
        scored = [(self._score(candidate, query, words), candidate) for candidate in candidates]
        # sorted() is stable, so equal scores keep insertion order
        scored = sorted(scored, key=lambda pair: pair[0], reverse=True)

        logger.debug(f"Ranked {len(scored)} candidates for '{query}', keeping {min(limit, len(scored))}")
        return [candidate for _, candidate in scored[:limit]]

