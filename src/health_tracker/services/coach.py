"""Health coach chat replies."""

import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol
from uuid import UUID

from health_tracker.domain.models import UserProfile
from health_tracker.domain.stats import DailyStats
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import StatsService

_logger = logging.getLogger(__name__)

SUGGESTIONS = ("Tell me more", "Show me data", "Create a plan", "Set reminders")

COACH_INSTRUCTIONS = (
    "You are a supportive health coach inside a nutrition and fitness tracker. "
    "Answer in two to four sentences, refer to the user's numbers when they are "
    "relevant, and never give a medical diagnosis."
)


class CoachClient(Protocol):
    """Interface for an LLM that writes coach replies."""

    async def reply(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        message: str,
    ) -> str:
        """Return the assistant's reply text."""


@dataclass(frozen=True)
class CoachReply:
    """A chat reply with quick follow-up suggestions."""

    message: str
    source: Literal["openai", "rules"]
    suggestions: tuple[str, ...] = field(default=SUGGESTIONS)


@dataclass
class CoachService:
    """Answers chat messages with an LLM when configured, otherwise by keyword."""

    stats: StatsService
    profiles: ProfileService
    client: CoachClient | None = None
    model: str = "gpt-5.2"
    reasoning_effort: str | None = None
    store: bool = False

    async def chat(
        self, user_id: UUID, message: str, timezone_name: str = "UTC"
    ) -> CoachReply:
        profile = self.profiles.get_profile(user_id)
        today = self.stats.get_today(user_id, timezone_name)
        if self.client is not None:
            try:
                text = await self.client.reply(
                    model=self.model,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                    instructions=COACH_INSTRUCTIONS,
                    message=_with_context(message, profile, today),
                )
            except Exception:
                _logger.exception(
                    "Coach reply failed, using keyword reply",
                    extra={"user_id": str(user_id)},
                )
            else:
                if text.strip():
                    return CoachReply(message=text.strip(), source="openai")
        return CoachReply(message=keyword_reply(message, profile, today), source="rules")


def keyword_reply(message: str, profile: UserProfile, today: DailyStats) -> str:
    """Pick a canned reply from keywords in the message."""
    text = message.lower()
    goals = profile.goals
    if any(word in text for word in ("nutrition", "food", "diet")):
        return (
            "Based on your recent nutrition data, you're averaging "
            f"{round(today.protein)}g of protein today. Try adding more vegetables "
            "to your meals, especially leafy greens and legumes, to raise your "
            "fiber intake."
        )
    if any(word in text for word in ("workout", "exercise", "fitness")):
        return (
            f"You've logged {round(today.exercise_minutes)} minutes of exercise today. "
            "For optimal results, alternate between cardio and strength training. "
            "Would you like me to suggest a specific workout for today?"
        )
    if "weight" in text or "progress" in text:
        if profile.weight is None or goals.weight is None:
            return (
                "Add your current and target weight to your profile and I can "
                "track your progress toward it."
            )
        difference = profile.weight - goals.weight
        direction = "above" if difference > 0 else "below"
        return (
            f"You're currently {abs(difference):.1f}kg {direction} your target "
            "weight. Keep logging meals and workouts so your forecast stays accurate."
        )
    if "meal plan" in text or "planning" in text:
        return (
            "I'd be happy to help with meal planning! Based on your goal of "
            f"{goals.calories:g} calories daily, focus on lean proteins, complex "
            "carbs, and healthy fats. Would you like specific meal suggestions for "
            "tomorrow?"
        )
    if "water" in text or "hydration" in text:
        return (
            f"Your hydration goal is {goals.water} glasses daily and you're at "
            f"{today.glasses} glasses today. Try setting reminders every 2 hours, "
            "and remember that your needs increase with exercise and warm weather."
        )
    return (
        f'I understand you\'re asking about "{message}". I can help you with '
        "nutrition analysis, workout planning, progress tracking, and health "
        "insights. What specific aspect of your health journey would you like to "
        "focus on?"
    )


def _with_context(message: str, profile: UserProfile, today: DailyStats) -> str:
    goals = profile.goals
    return (
        f"Today's totals: {round(today.calories)} kcal eaten, "
        f"{round(today.protein)}g protein, {today.glasses} glasses of water, "
        f"{round(today.exercise_minutes)} exercise minutes.\n"
        f"Goals: {goals.calories:g} kcal, {goals.water} glasses, "
        f"{goals.exercise:g} exercise minutes.\n\n"
        f"User message: {message}"
    )
