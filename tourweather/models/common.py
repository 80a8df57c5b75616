"""Common types shared across models."""

from enum import StrEnum
from typing import TypeAlias

CityKey: TypeAlias = str


class Language(StrEnum):
    VIETNAMESE = "vi"
    ENGLISH = "en"
    KOREAN = "ko"
