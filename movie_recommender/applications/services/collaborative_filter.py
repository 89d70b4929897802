from typing import List

from movie_recommender.domain.exceptions import ConfigurationError, NotFoundError, ValidationError
from movie_recommender.domain.ports.repositories.ranking_provider import RankingProvider
from movie_recommender.domain.ports.services.filter import Filter
from movie_recommender.domain.ports.services.logger import LoggerPort


class CollaborativeFilter(Filter):
    """Recommends titles ranked by what other users watched alongside the seed"""

    name = "collaborative"

    def __init__(self, ranking_provider: RankingProvider, logger: LoggerPort, top_k: int = 3):
        if not isinstance(top_k, int) or isinstance(top_k, bool) or top_k < 1:
            raise ConfigurationError(f"top_k must be a positive integer, got {top_k!r}")
        self.ranking_provider = ranking_provider
        self.logger = logger
        self.top_k = top_k

    def get_recommendations(self, title: str) -> List[str]:
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Seed title must be a non-empty string")

        try:
            ranked = self.ranking_provider.rank_by_title(title)
        except NotFoundError:
            self.logger.warning(f"No ranking data for '{title}'")
            raise

        # the provider may include the seed itself
        return [candidate for candidate in ranked if candidate != title][: self.top_k]
