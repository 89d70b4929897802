from typing import Dict, List

from movie_recommender.domain.models.movie import Movie

SAMPLE_MOVIES: List[Movie] = [
    Movie(id=1, title="Finding Dory", genre="Animation", producer="Pixar"),
    Movie(id=2, title="Happy Feet", genre="Animation", producer="Warner Bros"),
    Movie(id=3, title="Ice Age", genre="Animation", producer="Blue Sky"),
    Movie(id=4, title="Shark Tale", genre="Animation", producer="DreamWorks"),
    Movie(id=5, title="Finding Nemo", genre="Animation", producer="Pixar"),
    Movie(id=6, title="Cars", genre="Animation", producer="Pixar"),
    Movie(id=7, title="Madagascar", genre="Animation", producer="DreamWorks"),
    Movie(id=8, title="The Dark Knight", genre="Action", producer="Warner Bros"),
    Movie(id=9, title="Inception", genre="Sci-Fi", producer="Warner Bros"),
    Movie(id=10, title="Interstellar", genre="Sci-Fi", producer="Paramount"),
]

SAMPLE_WATCH_HISTORIES: Dict[str, List[str]] = {
    "user-1": ["Finding Dory", "Happy Feet", "Ice Age", "Shark Tale"],
    "user-2": ["Finding Dory", "Happy Feet", "Ice Age"],
    "user-3": ["Finding Dory", "Happy Feet", "Cars"],
    "user-4": ["Finding Nemo", "Finding Dory", "Madagascar"],
    "user-5": ["Inception", "Interstellar", "The Dark Knight"],
    "user-6": ["Inception", "Interstellar"],
}
