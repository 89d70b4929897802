from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from movie_recommender.infrastructure.config.settings import RecommenderSettings


class SimilarityWeights(BaseModel):
    """Additive weights applied for each matching movie attribute"""

    model_config = ConfigDict(frozen=True)

    genre: float = Field(default=0.3, ge=0.0)
    producer: float = Field(default=0.5, ge=0.0)

    @property
    def max_score(self) -> float:
        return self.genre + self.producer

    @classmethod
    def from_settings(cls, settings: "RecommenderSettings") -> "SimilarityWeights":
        return cls(genre=settings.genre_weight, producer=settings.producer_weight)
