#!filepath: collectkit/config/collections_config.py
from typing import Literal

from pydantic import BaseModel, Field


class CollectionsConfig(BaseModel):
    chunk_size: int = Field(default=4096, gt=0)
    map_ordering: Literal["insertion", "comparator"] = "insertion"
