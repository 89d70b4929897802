from abc import ABC, abstractmethod
from typing import List

from movie_recommender.domain.models.movie import Movie


class MovieCatalog(ABC):
    """Read-only access to the movies a content-based filter ranks.

    Implementations must be safe for concurrent reads.
    """

    @abstractmethod
    def find_movie(self, title: str) -> Movie:
        """Raises NotFoundError when no movie has the given title"""
        pass

    @abstractmethod
    def list_candidates(self) -> List[Movie]:
        """All movies in catalog order. May be called any number of times."""
        pass
