from abc import ABC, abstractmethod
from typing import List


class Filter(ABC):
    """Port for an interchangeable recommendation strategy"""

    name: str = "filter"

    @abstractmethod
    def get_recommendations(self, title: str) -> List[str]:
        """Return recommended titles for a seed title.

        Raises NotFoundError when the seed is unknown and ValidationError when
        the title is malformed.
        """
        pass
