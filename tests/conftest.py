from unittest.mock import Mock

import pytest

from movie_recommender.domain.models.movie import Movie
from movie_recommender.domain.ports.repositories.movie_catalog import MovieCatalog
from movie_recommender.domain.ports.repositories.ranking_provider import RankingProvider
from movie_recommender.domain.ports.services.filter import Filter
from movie_recommender.domain.ports.services.logger import LoggerPort
from movie_recommender.domain.services.similarity_scorer import SimilarityScorer
from movie_recommender.infrastructure.adapters.repositories.in_memory_movie_catalog import InMemoryMovieCatalog


@pytest.fixture
def finding_dory():
    return Movie(id=1, title="Finding Dory", genre="Animation", producer="Pixar")


@pytest.fixture
def animation_movies(finding_dory):
    """Seed movie followed by three animation candidates from other studios"""
    return [
        finding_dory,
        Movie(id=2, title="Happy Feet", genre="Animation", producer="Warner Bros"),
        Movie(id=3, title="Ice Age", genre="Animation", producer="Blue Sky"),
        Movie(id=4, title="Shark Tale", genre="Animation", producer="DreamWorks"),
    ]


@pytest.fixture
def mixed_movies(animation_movies):
    return animation_movies + [
        Movie(id=5, title="The Dark Knight", genre="Action", producer="Warner Bros"),
        Movie(id=6, title="Up", genre="Animation", producer="Pixar"),
        Movie(id=7, title="Brave", genre="Fantasy", producer="Pixar"),
    ]


@pytest.fixture
def animation_catalog(animation_movies):
    return InMemoryMovieCatalog(animation_movies)


@pytest.fixture
def mixed_catalog(mixed_movies):
    return InMemoryMovieCatalog(mixed_movies)


@pytest.fixture
def scorer():
    return SimilarityScorer()


@pytest.fixture
def mock_logger():
    """Mock logger for testing"""
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_catalog():
    return Mock(spec=MovieCatalog)


@pytest.fixture
def mock_ranking_provider():
    return Mock(spec=RankingProvider)


@pytest.fixture
def mock_filter():
    """Mock filter strategy returning a fixed recommendation list"""
    filter = Mock(spec=Filter)
    filter.name = "mock"
    filter.get_recommendations = Mock(return_value=["Happy Feet", "Ice Age", "Shark Tale"])
    return filter
