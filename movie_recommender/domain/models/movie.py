from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    title: str = Field(min_length=1)
    genre: str
    producer: str
