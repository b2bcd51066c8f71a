# src/checkcommit/models/config.py
from enum import Enum
from pydantic import BaseModel, Field


class ProjectType(str, Enum):
    DOTNET = "dotnet"
    WEB = "web"

    @classmethod
    def from_arg(cls, value: str) -> "ProjectType":
        """Anything that is not dotnet gets the web comment syntax."""
        return cls.DOTNET if value.lower() == cls.DOTNET.value else cls.WEB


class AbsentVerdictPolicy(str, Enum):
    PASS = "pass"
    FAIL = "fail"


class RepoConfig(BaseModel):
    language: str = "Spanish"
    marker: str = Field(default="✖", min_length=1)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    absent_verdict: AbsentVerdictPolicy = AbsentVerdictPolicy.PASS
    exclude: list[str] = Field(default_factory=list)
