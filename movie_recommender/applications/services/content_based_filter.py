from typing import List

from movie_recommender.domain.exceptions import ConfigurationError, NotFoundError, ValidationError
from movie_recommender.domain.models.recommendation import Recommendation
from movie_recommender.domain.ports.repositories.movie_catalog import MovieCatalog
from movie_recommender.domain.ports.services.filter import Filter
from movie_recommender.domain.ports.services.logger import LoggerPort
from movie_recommender.domain.services.similarity_scorer import SimilarityScorer


class ContentBasedFilter(Filter):
    """Recommends the catalog movies whose attributes are closest to the seed movie"""

    name = "content"

    def __init__(self, catalog: MovieCatalog, scorer: SimilarityScorer, logger: LoggerPort, top_k: int = 3):
        if not isinstance(top_k, int) or isinstance(top_k, bool) or top_k < 1:
            raise ConfigurationError(f"top_k must be a positive integer, got {top_k!r}")
        self.catalog = catalog
        self.scorer = scorer
        self.logger = logger
        self.top_k = top_k

    def rank(self, title: str) -> List[Recommendation]:
        """Score every other catalog movie against the seed and keep the best ``top_k``.

        Sorting is stable, so movies with equal scores stay in catalog order.
        """
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Seed title must be a non-empty string")

        try:
            seed = self.catalog.find_movie(title)
        except NotFoundError:
            self.logger.warning(f"Seed movie '{title}' not found in catalog")
            raise

        scored = [
            Recommendation(title=candidate.title, score=self.scorer.similarity(seed, candidate))
            for candidate in self.catalog.list_candidates()
            if candidate.id != seed.id
        ]
        ranked = sorted(scored, key=lambda rec: rec.score, reverse=True)
        self.logger.debug(f"Scored {len(scored)} candidates for '{seed.title}'")
        return ranked[: self.top_k]

    def get_recommendations(self, title: str) -> List[str]:
        return [rec.title for rec in self.rank(title)]
