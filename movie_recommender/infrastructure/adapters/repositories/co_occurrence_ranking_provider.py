from collections import defaultdict
from typing import Dict, List, Mapping, Sequence

from movie_recommender.domain.exceptions import NotFoundError
from movie_recommender.domain.ports.repositories.ranking_provider import RankingProvider


class CoOccurrenceRankingProvider(RankingProvider):
    """Ranks titles by how many users watched them together with the seed.

    ``watch_histories`` maps a user id to the titles that user watched. Titles
    with the same count keep the order in which they were first encountered.
    """

    def __init__(self, watch_histories: Mapping[str, Sequence[str]]):
        # repeated views inside one history count once
        self.watch_histories: Dict[str, List[str]] = {
            user_id: list(dict.fromkeys(titles)) for user_id, titles in watch_histories.items()
        }

    def rank_by_title(self, title: str) -> List[str]:
        co_occurrences = defaultdict(int)
        watched_by_anyone = False

        for titles in self.watch_histories.values():
            if title not in titles:
                continue
            watched_by_anyone = True
            for other in titles:
                if other != title:
                    co_occurrences[other] += 1

        if not watched_by_anyone:
            raise NotFoundError(f"No watch history contains title={title!r}")

        sorted_candidates = sorted(co_occurrences.items(), key=lambda x: x[1], reverse=True)
        return [candidate for candidate, _ in sorted_candidates]
