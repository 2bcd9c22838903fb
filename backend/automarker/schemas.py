# backend/automarker/schemas.py
from enum import IntEnum
from typing import Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Status(IntEnum):
    """Ordered status shared by tags and grid slots."""

    MISSING = 0
    DEVELOPING = 1
    SECURE = 2

    @classmethod
    def from_level(cls, level: int) -> "Status":
        if level >= 2:
            return cls.SECURE
        if level == 1:
            return cls.DEVELOPING
        return cls.MISSING

    @property
    def tag(self) -> str:
        return ("bad", "mid", "ok")[self]

    @property
    def label(self) -> str:
        return ("Missing", "Developing", "Secure")[self]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ----------------- scoring results -----------------
class Tag(_Frozen):
    name: str
    status: Literal["ok", "mid", "bad"]


GridLabel = Literal["Secure", "Developing", "Missing"]


class Grid(_Frozen):
    # slot ids are fixed element ids in the front-end
    ethical: GridLabel
    impact: GridLabel
    legal: GridLabel
    recs: GridLabel
    structure: GridLabel


class FrameworkTip(_Frozen):
    expectation: str
    case: str


class Framework(_Frozen):
    gdpr: FrameworkTip
    unesco: FrameworkTip
    ofsted: FrameworkTip
    jisc: FrameworkTip


class GatedResult(_Frozen):
    gated: Literal[True] = True
    word_count: int = Field(alias="wordCount", ge=0)
    message: str


class ScoredResult(_Frozen):
    gated: Literal[False] = False
    word_count: int = Field(alias="wordCount", ge=0)
    score: int = Field(ge=0, le=10)
    band: Literal["Excellent", "Good", "Fair", "Vague"]
    strengths: Tuple[str, ...] = Field(max_length=3)
    tags: Tuple[Tag, ...] = Field(min_length=5, max_length=5)
    grid: Grid
    framework: Framework
    feedback: str
    model_answer: str = Field(alias="modelAnswer")


ScoringResult = Union[GatedResult, ScoredResult]


# ----------------- API bodies -----------------
class UnlockIn(BaseModel):
    code: Optional[Any] = None


class MarkIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer_text: Optional[Any] = Field(default=None, alias="answerText")


class OkOut(BaseModel):
    ok: bool = True


class MarkOut(BaseModel):
    ok: bool = True
    result: ScoringResult


class ConfigOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    course_back_url: str = Field(alias="courseBackUrl")
    next_lesson_url: str = Field(alias="nextLessonUrl")
    question_text: str = Field(alias="questionText")
    template_text: str = Field(alias="templateText")
    target_words: str = Field(alias="targetWords")
    min_words_gate: int = Field(alias="minWordsGate")
