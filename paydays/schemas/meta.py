"""Schemas for the service's informational endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from paydays.core.frequency import PayFrequency


class PingResponse(BaseModel):
    message: str


class FrequenciesResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    frequencies: List[PayFrequency]
    default_key: str = "biweekly"
