"""
Recommendation output model.

A ``Recommendation`` is a single actionable tip produced by one rule firing.
``id`` is the rule id (``"line-dry"``, ``"grid-clean-now"``...) and is unique
within one engine result.

The model is frozen. ``time_status`` is assigned after selection via
``model_copy(update=...)``, never by mutation.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

Priority = Literal["high", "medium", "low"]
Impact = Literal["high", "medium", "low"]
Category = Literal["heating", "laundry", "mobility", "cooking", "insulation", "appliances"]
TimeStatus = Literal["active", "passed"]

# Lower rank sorts first.
PRIORITY_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
IMPACT_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}
DEFAULT_IMPACT: Impact = "medium"


class Recommendation(BaseModel):
    """An energy-saving suggestion for one day.

    Attributes:
        id: Stable rule identifier.
        title: Short headline.
        description: Fully interpolated body text.
        reasoning: One-line justification.
        priority: ``"high"``, ``"medium"`` or ``"low"``.
        savings_estimate: Free-text money range, e.g. ``"Save £0.20-£0.40 per day"``.
        category: Theme used for diversity selection.
        impact: Expected size of the saving; ``None`` is treated as medium.
        time_status: ``"active"`` / ``"passed"``; set after selection.
        is_personalised: ``True`` when the rule depends on a household setup flag.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    reasoning: str
    priority: Priority
    savings_estimate: Optional[str] = None
    category: Category
    impact: Optional[Impact] = None
    time_status: Optional[TimeStatus] = None
    is_personalised: bool = False

    @field_validator("id", "title", "description", "reasoning")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Recommendation text fields must not be empty.")
        return v.strip()

    @property
    def effective_impact(self) -> Impact:
        return self.impact or DEFAULT_IMPACT
