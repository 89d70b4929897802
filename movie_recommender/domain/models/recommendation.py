from pydantic import BaseModel


class Recommendation(BaseModel):
    """A recommended title together with the score it was ranked by"""

    title: str
    score: float
