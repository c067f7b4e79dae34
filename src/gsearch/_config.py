from typing import Optional

from pydantic import BaseModel, PositiveInt


class Config(BaseModel):
    key: Optional[str] = None
    referer: Optional[str] = None
    timeout: Optional[PositiveInt] = None
