from typing import Dict, List, Optional

from movie_recommender.applications.services.collaborative_filter import CollaborativeFilter
from movie_recommender.applications.services.content_based_filter import ContentBasedFilter
from movie_recommender.domain.exceptions import ConfigurationError
from movie_recommender.domain.models.similarity_weights import SimilarityWeights
from movie_recommender.domain.ports.repositories.movie_catalog import MovieCatalog
from movie_recommender.domain.ports.repositories.ranking_provider import RankingProvider
from movie_recommender.domain.ports.services.filter import Filter
from movie_recommender.domain.ports.services.logger import LoggerPort
from movie_recommender.domain.services.recommendation_engine import RecommendationEngine
from movie_recommender.domain.services.similarity_scorer import SimilarityScorer
from movie_recommender.infrastructure.adapters.repositories.co_occurrence_ranking_provider import (
    CoOccurrenceRankingProvider,
)
from movie_recommender.infrastructure.adapters.repositories.in_memory_movie_catalog import InMemoryMovieCatalog
from movie_recommender.infrastructure.config.settings import RecommenderSettings
from movie_recommender.infrastructure.data.sample_catalog import SAMPLE_MOVIES, SAMPLE_WATCH_HISTORIES
from movie_recommender.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

CONTENT = "content"
COLLABORATIVE = "collaborative"

# qualifier names accepted for each strategy
STRATEGY_ALIASES: Dict[str, str] = {
    "content": CONTENT,
    "content-based": CONTENT,
    "content_based": CONTENT,
    "contentbasedfilter": CONTENT,
    "collaborative": COLLABORATIVE,
    "collaborative-filter": COLLABORATIVE,
    "collaborative_filter": COLLABORATIVE,
    "collaborativefilter": COLLABORATIVE,
}


def available_strategies() -> List[str]:
    return [CONTENT, COLLABORATIVE]


def resolve_strategy(name: str) -> str:
    try:
        return STRATEGY_ALIASES[name.strip().lower()]
    except (KeyError, AttributeError) as e:
        raise ConfigurationError(
            f"Unknown strategy: {name!r}. Available: {', '.join(available_strategies())}"
        ) from e


def get_logger(name: str = __name__) -> LoggerPort:
    return StdLoggerAdapter(name)


def get_settings() -> RecommenderSettings:
    try:
        return RecommenderSettings()
    except ValueError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


def get_similarity_weights(settings: Optional[RecommenderSettings] = None) -> SimilarityWeights:
    settings = settings or get_settings()
    try:
        return SimilarityWeights.from_settings(settings)
    except ValueError as e:
        raise ConfigurationError(f"Invalid similarity weights: {e}") from e


def get_similarity_scorer(settings: Optional[RecommenderSettings] = None) -> SimilarityScorer:
    return SimilarityScorer(get_similarity_weights(settings))


def get_movie_catalog() -> MovieCatalog:
    return InMemoryMovieCatalog(SAMPLE_MOVIES)


def get_ranking_provider() -> RankingProvider:
    return CoOccurrenceRankingProvider(SAMPLE_WATCH_HISTORIES)


def get_filter(
    strategy: str,
    settings: Optional[RecommenderSettings] = None,
    catalog: Optional[MovieCatalog] = None,
    ranking_provider: Optional[RankingProvider] = None,
    scorer: Optional[SimilarityScorer] = None,
    logger: Optional[LoggerPort] = None,
    top_k: Optional[int] = None,
) -> Filter:
    """Build a fresh filter for the named strategy"""
    settings = settings or get_settings()
    top_k = settings.top_k if top_k is None else top_k
    strategy = resolve_strategy(strategy)

    if strategy == CONTENT:
        return ContentBasedFilter(
            catalog=catalog or get_movie_catalog(),
            scorer=scorer or get_similarity_scorer(settings),
            logger=logger or get_logger(ContentBasedFilter.__module__),
            top_k=top_k,
        )
    return CollaborativeFilter(
        ranking_provider=ranking_provider or get_ranking_provider(),
        logger=logger or get_logger(CollaborativeFilter.__module__),
        top_k=top_k,
    )


def get_recommendation_engine(
    strategy: Optional[str] = None,
    settings: Optional[RecommenderSettings] = None,
    filter: Optional[Filter] = None,
    logger: Optional[LoggerPort] = None,
    top_k: Optional[int] = None,
) -> RecommendationEngine:
    """Compose an engine around ``filter`` or, when absent, the named (or configured) strategy"""
    settings = settings or get_settings()
    if filter is None:
        filter = get_filter(strategy or settings.strategy, settings=settings, top_k=top_k)
    return RecommendationEngine(filter=filter, logger=logger or get_logger(RecommendationEngine.__module__))
