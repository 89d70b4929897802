from typing import Dict, Iterable, List

from movie_recommender.domain.exceptions import NotFoundError, ValidationError
from movie_recommender.domain.models.movie import Movie
from movie_recommender.domain.ports.repositories.movie_catalog import MovieCatalog


class InMemoryMovieCatalog(MovieCatalog):
    def __init__(self, movies: Iterable[Movie]):
        self._movies: List[Movie] = []
        self._by_title: Dict[str, Movie] = {}

        ids = set()
        for movie in movies:
            if movie.id in ids:
                raise ValidationError(f"Duplicate movie id in catalog: {movie.id!r}")
            ids.add(movie.id)
            self._movies.append(movie)
            self._by_title.setdefault(movie.title, movie)

    def __len__(self) -> int:
        return len(self._movies)

    def find_movie(self, title: str) -> Movie:
        movie = self._by_title.get(title)
        if movie is None:
            raise NotFoundError(f"Movie not found for title={title!r}")
        return movie

    def list_candidates(self) -> List[Movie]:
        return list(self._movies)
