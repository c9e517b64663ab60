from enum import Enum
from typing import List


class Category(str, Enum):
    """Closed category vocabulary. The system prompt and the response filter both use it."""
    TECH = "Tech"
    AI = "AI"
    CLOUD = "Cloud"
    DOTNET = ".NET"
    ARCHITECTURE = "Architecture"
    TUTORIALS = "Tutorials"
    OTHER = "Other"

    @classmethod
    def fallback(cls) -> "Category":
        return cls.OTHER

    @classmethod
    def names(cls) -> List[str]:
        return [c.value for c in cls]
