from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Form fields arrive as whatever the user typed ("$1,200", "7.5", 30, "").
FormValue = Optional[Union[str, float]]


class PlanForm(BaseModel):
    """Calculator inputs exactly as entered; numbers are parsed leniently later."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    current_age: FormValue = "35"
    # None/blank means "use the default target age"
    retirement_age: FormValue = None
    starting_amount: FormValue = "0"
    contribution_per_payday: FormValue = "50"
    annual_rate_pct: FormValue = "7"
    frequency_key: str = "biweekly"

    windfall_amount: FormValue = "0"
    windfall_when: str = Field("none", description="none | now | year | age | payday")
    windfall_at_year: FormValue = "1"
    windfall_at_age: FormValue = "45"
    windfall_at_payday: FormValue = "1"
