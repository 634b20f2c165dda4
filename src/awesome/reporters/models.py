"""Cucumber JSON report models and per-scenario counts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StepStatus(str, Enum):
    """Step outcomes that are counted."""

    PASSED = "passed"
    PENDING = "pending"
    FAILED = "failed"
    SKIPPED = "skipped"

    @classmethod
    def normalize(cls, raw: str | None) -> "StepStatus | None":
        """Map a raw status string to a StepStatus.

        Matching ignores case and surrounding whitespace. Anything else
        (``undefined``, ``ambiguous``, empty) returns None.
        """
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class StepResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: str = ""
    error_message: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value):
        return "" if value is None else value


class Step(BaseModel):
    model_config = ConfigDict(extra="ignore")

    result: StepResult = Field(default_factory=StepResult)

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, value):
        return {} if value is None else value


class Scenario(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    steps: list[Step] = Field(default_factory=list)

    @field_validator("name", "steps", mode="before")
    @classmethod
    def _null_to_empty(cls, value, info):
        if value is None:
            return "" if info.field_name == "name" else []
        return value


class Feature(BaseModel):
    """A feature record from a Cucumber JSON report."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    elements: list[Scenario] = Field(default_factory=list)

    @field_validator("name", "elements", mode="before")
    @classmethod
    def _null_to_empty(cls, value, info):
        if value is None:
            return "" if info.field_name == "name" else []
        return value


class ScenarioCounts(BaseModel):
    """Aggregated step outcomes for one scenario name."""

    passed: int = 0
    pending: int = 0
    failed: int = 0
    skipped: int = 0
    messages: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.passed + self.pending + self.failed + self.skipped

    def record(self, status: StepStatus, error_message: str | None = None) -> None:
        """Count one step outcome."""
        setattr(self, status.value, getattr(self, status.value) + 1)
        if status is StepStatus.FAILED and error_message:
            self.messages.append(error_message)
