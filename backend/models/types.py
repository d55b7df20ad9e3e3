"""Shared type definitions for type checking.

Uses NewType for IDs to provide compile-time type safety - prevents mixing
different ID types (e.g., passing TipID where UserID expected).

Uses TypeAlias for simple structural types.
"""

from typing import NewType, TypeAlias

# ID types using NewType for type safety
# Integer primary keys are coerced to str by the models
TipID = NewType("TipID", str)
UserID = NewType("UserID", str)

# Structural aliases using TypeAlias
FitnessGoal: TypeAlias = str  # e.g. "weight_loss", "muscle_gain"
PushToken: TypeAlias = str  # FCM registration token
Cursor: TypeAlias = str | int  # raw last user ID of the previous page
