# hvswitch_core/models/guidance.py

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SUGGESTION = "Custom (just keep total ≈ 100)"


class WeightRule(BaseModel):
    """One row of the bandwidth weight table."""

    model_config = ConfigDict(extra="ignore")
    patterns: list[str] = Field(min_length=1)
    suggestion: str
    traffic: str | None = None

    def matches(self, name: str) -> bool:
        upper = name.upper()
        return any(p.upper() in upper for p in self.patterns)


class WeightGuidance(BaseModel):
    """Ordered pattern table; the first matching rule wins."""

    model_config = ConfigDict(extra="ignore")
    rules: list[WeightRule] = Field(default_factory=list)
    default: str = DEFAULT_SUGGESTION

    def lookup(self, name: str) -> str:
        for rule in self.rules:
            if rule.matches(name):
                return rule.suggestion
        return self.default
