from abc import ABC, abstractmethod
from typing import List


class RankingProvider(ABC):
    @abstractmethod
    def rank_by_title(self, title: str) -> List[str]:
        """Titles ordered by behavioural signal relative to the seed title.

        Raises NotFoundError when the seed title has no ranking data.
        """
        pass
