from typing import Optional

from movie_recommender.domain.exceptions import ValidationError
from movie_recommender.domain.models.movie import Movie
from movie_recommender.domain.models.similarity_weights import SimilarityWeights


class SimilarityScorer:
    """Domain service scoring how alike two movies are from their categorical attributes.

    Each matching attribute adds its weight to a base score of 0.0, so with the
    default weights the result is one of 0.0, 0.3, 0.5 or 0.8. A movie compared
    with itself always gets ``max_score``.
    """

    def __init__(self, weights: Optional[SimilarityWeights] = None):
        self.weights = weights or SimilarityWeights()

    @property
    def max_score(self) -> float:
        return self.weights.max_score

    def similarity(self, a: Movie, b: Movie) -> float:
        if a is None or b is None:
            raise ValidationError("Both movies are required to compute similarity")

        score = 0.0
        if a.genre == b.genre:
            score += self.weights.genre
        if a.producer == b.producer:
            score += self.weights.producer
        return score
