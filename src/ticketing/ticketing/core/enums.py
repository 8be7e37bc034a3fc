from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Gender stored on the user profile."""

    MALE = "MALE"
    FEMALE = "FEMALE"
