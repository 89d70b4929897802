from unittest.mock import Mock

import pytest

from movie_recommender.applications.services.content_based_filter import ContentBasedFilter
from movie_recommender.domain.exceptions import ConfigurationError, NotFoundError, ValidationError
from movie_recommender.domain.models.movie import Movie
from movie_recommender.domain.models.recommendation import Recommendation
from movie_recommender.domain.services.similarity_scorer import SimilarityScorer


class TestContentBasedFilter:
    @pytest.fixture
    def content_filter(self, mixed_catalog, scorer, mock_logger):
        return ContentBasedFilter(catalog=mixed_catalog, scorer=scorer, logger=mock_logger)

    def test_default_top_k_is_three(self, content_filter):
        assert content_filter.top_k == 3
        assert content_filter.name == "content"

    def test_animation_scenario_returns_candidates_in_catalog_order(self, animation_catalog, scorer, mock_logger):
        content_filter = ContentBasedFilter(catalog=animation_catalog, scorer=scorer, logger=mock_logger)

        result = content_filter.get_recommendations("Finding Dory")

        assert result == ["Happy Feet", "Ice Age", "Shark Tale"]

    def test_rank_sorted_by_non_increasing_score(self, mixed_catalog, scorer, mock_logger):
        content_filter = ContentBasedFilter(catalog=mixed_catalog, scorer=scorer, logger=mock_logger, top_k=10)

        ranked = content_filter.rank("Finding Dory")

        assert all(isinstance(rec, Recommendation) for rec in ranked)
        scores = [rec.score for rec in ranked]
        assert scores == sorted(scores, reverse=True)
        assert [rec.title for rec in ranked] == [
            "Up",
            "Brave",
            "Happy Feet",
            "Ice Age",
            "Shark Tale",
            "The Dark Knight",
        ]
        assert ranked[0].score == pytest.approx(0.8)
        assert ranked[-1].score == pytest.approx(0.0)

    def test_seed_movie_is_not_recommended(self, content_filter):
        ranked = content_filter.rank("Finding Dory")
        assert "Finding Dory" not in [rec.title for rec in ranked]

    def test_top_k_limits_results(self, mixed_catalog, scorer, mock_logger):
        content_filter = ContentBasedFilter(catalog=mixed_catalog, scorer=scorer, logger=mock_logger, top_k=1)
        assert content_filter.get_recommendations("Finding Dory") == ["Up"]

    def test_top_k_larger_than_catalog(self, animation_catalog, scorer, mock_logger):
        content_filter = ContentBasedFilter(catalog=animation_catalog, scorer=scorer, logger=mock_logger, top_k=50)
        assert len(content_filter.get_recommendations("Finding Dory")) == 3

    def test_single_movie_catalog_returns_empty_list(self, scorer, mock_logger, finding_dory, mock_catalog):
        mock_catalog.find_movie.return_value = finding_dory
        mock_catalog.list_candidates.return_value = [finding_dory]
        content_filter = ContentBasedFilter(catalog=mock_catalog, scorer=scorer, logger=mock_logger)

        assert content_filter.get_recommendations("Finding Dory") == []

    def test_ties_keep_catalog_order(self, scorer, mock_logger, mock_catalog):
        seed = Movie(id=0, title="Seed", genre="Drama", producer="A24")
        candidates = [Movie(id=i, title=f"Movie {i}", genre="Drama", producer=f"Studio {i}") for i in range(1, 6)]
        mock_catalog.find_movie.return_value = seed
        mock_catalog.list_candidates.return_value = [seed] + candidates
        content_filter = ContentBasedFilter(catalog=mock_catalog, scorer=scorer, logger=mock_logger, top_k=5)

        assert content_filter.get_recommendations("Seed") == [f"Movie {i}" for i in range(1, 6)]

    def test_unknown_seed_raises_not_found(self, content_filter, mock_logger):
        with pytest.raises(NotFoundError):
            content_filter.get_recommendations("Nonexistent Title")
        mock_logger.warning.assert_called_once()

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_invalid_seed_raises_validation_error(self, content_filter, title):
        with pytest.raises(ValidationError):
            content_filter.get_recommendations(title)

    def test_scorer_failure_propagates(self, mixed_catalog, mock_logger):
        failing_scorer = Mock(spec=SimilarityScorer)
        failing_scorer.similarity.side_effect = ValidationError("bad movie")
        content_filter = ContentBasedFilter(catalog=mixed_catalog, scorer=failing_scorer, logger=mock_logger)

        with pytest.raises(ValidationError, match="bad movie"):
            content_filter.get_recommendations("Finding Dory")

    @pytest.mark.parametrize("top_k", [0, -1, 2.5, True])
    def test_invalid_top_k_rejected(self, mixed_catalog, scorer, mock_logger, top_k):
        with pytest.raises(ConfigurationError):
            ContentBasedFilter(catalog=mixed_catalog, scorer=scorer, logger=mock_logger, top_k=top_k)
