from typing import List

from movie_recommender.domain.exceptions import DomainError, ValidationError
from movie_recommender.domain.ports.services.filter import Filter
from movie_recommender.domain.ports.services.logger import LoggerPort


class RecommendationEngine:
    """Single entry point for recommendations, delegating to the filter it was built with"""

    def __init__(self, filter: Filter, logger: LoggerPort):
        self._filter = filter
        self.logger = logger

    @property
    def filter_name(self) -> str:
        return getattr(self._filter, "name", type(self._filter).__name__)

    def recommend(self, title: str) -> List[str]:
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Seed title must be a non-empty string")

        self.logger.debug(f"Recommending for '{title}' with filter: {self.filter_name}")
        recommendations = self._filter.get_recommendations(title)
        if recommendations is None:
            raise DomainError(f"Filter {self.filter_name} returned no result for '{title}'")

        self.logger.info(f"Filter {self.filter_name} returned recommendations for '{title}'")
        return recommendations
