"""
Rule building blocks: evaluation context, draft text, and the ``Rule`` record.

A rule is data, not a branch in a long function:

    Rule(
        rule_id="curtains-cold",
        category="insulation",
        personalised=True,
        applies=lambda ctx: ctx.weather.avg_temp < 10 and ctx.weather.temp_low < 5,
        build=_curtains_cold,
    )

``applies`` is a pure predicate over ``RuleContext``; ``build`` renders the
text and picks priority/impact for a context the predicate accepted. Every
rule in the catalog is evaluated independently, so mutually exclusive rules
carry their exclusion in their own predicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from ecotuned.models.grid import GridSnapshot
from ecotuned.models.preferences import UserPreferences
from ecotuned.models.recommendation import Category, Impact, Priority, Recommendation
from ecotuned.models.weather import WeatherSnapshot
from ecotuned.utils.time_utils import is_weekend

DayLabel = Literal["today", "tomorrow"]


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at for one day.

    Attributes:
        weather:     Derived weather features for the day.
        preferences: Validated household profile.
        is_today:    ``True`` when the day is the current calendar day.
        day:         Label used in text (``"today"`` / ``"tomorrow"``).
        grid:        Live generation mix; only meaningful for today.
        is_weekend:  Derived from ``weather.date``.
    """

    weather: WeatherSnapshot
    preferences: UserPreferences
    is_today: bool = False
    day: DayLabel = "tomorrow"
    grid: Optional[GridSnapshot] = None
    is_weekend: bool = False

    @classmethod
    def build(
        cls,
        weather: WeatherSnapshot,
        preferences: UserPreferences,
        is_today: bool = False,
        day: DayLabel = "tomorrow",
        grid: Optional[GridSnapshot] = None,
    ) -> "RuleContext":
        return cls(
            weather=weather,
            preferences=preferences,
            is_today=is_today,
            day=day,
            grid=grid,
            is_weekend=is_weekend(weather.date),
        )

    @property
    def day_title(self) -> str:
        return "Today" if self.day == "today" else "Tomorrow"

    @property
    def has_live_grid(self) -> bool:
        return self.is_today and self.day == "today" and self.grid is not None


@dataclass(frozen=True)
class RuleDraft:
    """Context-dependent parts of a recommendation, produced by ``Rule.build``."""

    title: str
    description: str
    reasoning: str
    priority: Priority
    impact: Optional[Impact] = None
    savings_estimate: Optional[str] = None


@dataclass(frozen=True)
class Rule:
    """One entry of the recommendation catalog."""

    rule_id: str
    category: Category
    personalised: bool
    applies: Callable[[RuleContext], bool]
    build: Callable[[RuleContext], RuleDraft]

    def evaluate(self, ctx: RuleContext) -> Optional[Recommendation]:
        """Return the recommendation if the rule fires for ``ctx``, else ``None``."""
        if not self.applies(ctx):
            return None
        draft = self.build(ctx)
        return Recommendation(
            id=self.rule_id,
            title=draft.title,
            description=draft.description,
            reasoning=draft.reasoning,
            priority=draft.priority,
            savings_estimate=draft.savings_estimate,
            category=self.category,
            impact=draft.impact,
            is_personalised=self.personalised,
        )
