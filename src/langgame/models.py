"""
JSON payloads returned by the game endpoints.
"""

from pydantic import BaseModel, Field

from .catalog import LanguageEntry


class GamePayload(BaseModel):
    """A new round: the sampled words and everything needed to check a guess."""
    words: list[str]
    answer: str = Field(description="Display name of the language")
    valid_answers: list[str] = Field(description="Lowercase guesses accepted as correct")
    language_code: str = Field(description="Code to echo back on hint requests")

    @classmethod
    def for_entry(cls, entry: LanguageEntry, words: list[str]) -> "GamePayload":
        return cls(
            words=words,
            answer=entry.display_name,
            valid_answers=sorted(entry.valid_answers),
            language_code=entry.code,
        )


class ServerStatus(BaseModel):
    """Health information for the status endpoint."""
    status: str = "running"
    uptime_seconds: float
    languages: int


__all__ = ["GamePayload", "ServerStatus"]
