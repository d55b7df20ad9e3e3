"""Pydantic models for health tips and the users they are matched to."""

from typing import NamedTuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from models.types import FitnessGoal, PushToken, TipID, UserID


class GroupKey(NamedTuple):
    """Bucket key for users sharing the same goal and age within a page."""

    fitness_goal: FitnessGoal
    age: int


class Tip(BaseModel):
    """A health tip targeted at one fitness goal and an inclusive age range."""

    model_config = ConfigDict(
        str_strip_whitespace=True, frozen=True, coerce_numbers_to_str=True
    )

    id: TipID
    target_goal: FitnessGoal = Field(..., min_length=1)
    min_age: int = Field(..., ge=0)
    max_age: int = Field(..., ge=0)
    # Older rows store the text in a "tip" column
    body: str = Field(..., min_length=1, validation_alias=AliasChoices("body", "tip"))

    @model_validator(mode="after")
    def _check_age_range(self) -> "Tip":
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            )
        return self

    def covers_age(self, age: int) -> bool:
        """True if age falls within [min_age, max_age]."""
        return self.min_age <= age <= self.max_age


class User(BaseModel):
    """User record as read from the users table.

    Profile fields are nullable; incomplete users are simply not eligible.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True, frozen=True, coerce_numbers_to_str=True
    )

    id: UserID
    fitness_goal: FitnessGoal | None = None
    age: int | None = None
    fcm_token: PushToken | None = None

    @property
    def is_eligible(self) -> bool:
        return bool(self.fitness_goal) and self.age is not None and bool(self.fcm_token)

    @property
    def group_key(self) -> GroupKey:
        if not self.is_eligible:
            raise ValueError(f"User {self.id} is missing goal, age or push token")
        return GroupKey(self.fitness_goal, self.age)
