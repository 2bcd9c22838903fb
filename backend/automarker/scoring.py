# backend/automarker/scoring.py
# Deterministic rubric marker for the prioritisation prompt task (no LLM calls).
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .schemas import (
    Framework, GatedResult, Grid, ScoredResult, ScoringResult, Status, Tag,
)
from .task_content import FRAMEWORK, MODEL_ANSWER

logger = logging.getLogger(__name__)

MIN_GATE = 20
MAX_SCORE = 10

GATE_MESSAGE = (
    "Please add to your answer.\n"
    "This response is too short to demonstrate a complete FEthink prompt.\n"
    "Aim for 20+ words and include Role, Task, Context, and Format."
)

# ----------------- rubric targets -----------------
STRUCTURE_HITS = [["role:"], ["task:"], ["context"], ["format"]]

URGENCY_HITS = ["urgency", "urgent"]
IMPORTANCE_HITS = ["importance", "important"]
RISK_HITS = ["risk", "reputational", "reputation"]
DEPENDENCY_HITS = ["dependency", "dependencies", "blocked", "unblock"]

CRITERIA_HITS = [
    "urgency", "urgent",
    "importance", "important",
    "risk", "reputational", "reputation",
    "dependency", "dependencies", "blocked", "unblock",
    "trade-off", "tradeoffs", "constraint", "constraints",
]

OUTPUT_REQ_HITS = {
    "prioritised": ["prioritis", "priority", "rank", "order"],
    "timeblock": ["time-block", "time block", "schedule", "09:", "morning", "afternoon", "time blocked", "time-blocked"],
    "decision_rule": ["decision rule", "rule", "if", "then", "when new tasks", "new tasks"],
    "reusable_prompts": ["reusable", "weekly prompt", "monday prompt", "prompts"],
    "reflective": ["reflect", "reflection", "reflective question", "next time", "what did i learn"],
}
THREE_HITS = ["3", "three"]

CONSTRAINT_HITS = [
    "one page", "one-page", "max 400", "400 words",
    "bullet", "bullets", "supportive", "professional", "practical",
]

SCENARIO_HITS = [
    "line manager", "operations",
    "finance", "spreadsheet", "external partner",
    "client", "delay", "tone",
    "new starter", "mentor", "blocked",
    "weekly report", "5pm",
    "2pm", "leadership", "slide",
]

# ----------------- feedback text -----------------
NOTES = {
    "structure_partial": "FEthink structure: Include all four labels (Role, Task, Context, Format) so the AI output is reliable.",
    "structure_missing": "FEthink structure: Use Role, Task, Context, Format (with labels) instead of a single paragraph prompt.",
    "criteria_partial": "Prioritisation criteria: Explicitly instruct the AI to weigh urgency, importance, reputational risk, and dependencies (what blocks others).",
    "criteria_missing": "Prioritisation criteria: Don’t just ask to ‘prioritise’ — name the criteria (urgency, importance, risk, dependencies) and ask for brief justifications.",
    "output_partial": "Output spec: Require ALL components (prioritised list, time blocks, decision rule, 3 reusable prompts, reflective question).",
    "output_missing": "Output spec: Specify the exact outputs you want the AI to produce (not generic ‘tips’).",
    "context_partial": "Context/constraints: Anchor the AI in the Monday scenario (5 requests, deadlines, audiences) and constrain output (one page, max 400 words, bullets, tone).",
    "context_missing": "Context/constraints: Add the scenario details and output constraints so the AI produces a realistic, usable plan (not generic advice).",
}

STRENGTHS = {
    "structure": "You used the FEthink structure (Role, Task, Context, Format), which improves output reliability.",
    "criteria": "You named prioritisation criteria (e.g., urgency and risk), pushing the AI beyond generic advice.",
    "output": "You specified practical outputs (e.g., time-block plan and decision rule), making the result actionable.",
    "context": "You anchored the scenario and constraints, which helps the AI produce a realistic one-page plan.",
}
MAX_STRENGTHS = 3

TAG_NAMES = [
    "Clear role definition",
    "Specific task instructions",
    "Context-rich prompting",
    "Realistic constraints",
    "Actionable outputs",
]

STATIC_FRAMEWORK = Framework.model_validate(FRAMEWORK)


@dataclass(frozen=True)
class CategoryLevel:
    level: int
    points: int
    note: Optional[str] = None


# ----------------- helpers -----------------
def word_count(text: str) -> int:
    t = (text or "").strip()
    if not t:
        return 0
    return len(t.split())


def has_any(text: str, needles: Iterable[str]) -> bool:
    t = (text or "").lower()
    return any(n in t for n in needles)


def count_any(text: str, needles: Iterable[str]) -> int:
    t = (text or "").lower()
    return sum(1 for n in needles if n in t)


def band_for(score: int) -> str:
    if score >= 8:
        return "Excellent"
    if score >= 6:
        return "Good"
    if score >= 3:
        return "Fair"
    return "Vague"


# ----------------- category evaluators -----------------
def evaluate_structure(t: str) -> CategoryLevel:
    """Role/Task/Context/Format labels, 0-3 points (floor of 1)."""
    hits = sum(1 for needles in STRUCTURE_HITS if has_any(t, needles))
    if hits >= 4:
        return CategoryLevel(2, 3)
    if hits >= 2:
        return CategoryLevel(1, 2, NOTES["structure_partial"])
    return CategoryLevel(0, 1, NOTES["structure_missing"])


def evaluate_criteria(t: str) -> CategoryLevel:
    """Urgency/importance/risk/dependency families, 0-3 points (floor of 1).

    Three families are enough for the top level when the answer also uses
    at least five distinct criteria terms.
    """
    hit_count = count_any(t, CRITERIA_HITS)
    families = sum(
        1 for needles in (URGENCY_HITS, IMPORTANCE_HITS, RISK_HITS, DEPENDENCY_HITS)
        if has_any(t, needles)
    )
    if families >= 4 or (families >= 3 and hit_count >= 5):
        return CategoryLevel(2, 3)
    if families >= 2:
        return CategoryLevel(1, 2, NOTES["criteria_partial"])
    return CategoryLevel(0, 1, NOTES["criteria_missing"])


def output_checks(t: str) -> List[bool]:
    return [
        has_any(t, OUTPUT_REQ_HITS["prioritised"]),
        has_any(t, OUTPUT_REQ_HITS["timeblock"]),
        has_any(t, OUTPUT_REQ_HITS["decision_rule"]),
        # reusable prompts only count alongside a "3"/"three"
        has_any(t, OUTPUT_REQ_HITS["reusable_prompts"]) and has_any(t, THREE_HITS),
        has_any(t, OUTPUT_REQ_HITS["reflective"]),
    ]


def evaluate_output(t: str) -> CategoryLevel:
    checks = sum(output_checks(t))
    if checks >= 5:
        return CategoryLevel(2, 2)
    if checks >= 3:
        return CategoryLevel(1, 1, NOTES["output_partial"])
    return CategoryLevel(0, 0, NOTES["output_missing"])


def has_constraints(t: str) -> bool:
    return has_any(t, CONSTRAINT_HITS)


def evaluate_context(t: str) -> CategoryLevel:
    scenario_hits = count_any(t, SCENARIO_HITS)
    constrained = has_constraints(t)
    if scenario_hits >= 5 and constrained:
        return CategoryLevel(2, 2)
    if scenario_hits >= 2 or constrained:
        return CategoryLevel(1, 1, NOTES["context_partial"])
    return CategoryLevel(0, 0, NOTES["context_missing"])


# ----------------- marker -----------------
def score_answer(answer_text: str) -> ScoringResult:
    """Mark a learner prompt against the fixed rubric.

    Answers under MIN_GATE words return a GatedResult and are not scanned.
    Everything else returns a ScoredResult with score, band, strengths,
    tags, grid, feedback and the static framework/model answer.
    """
    wc = word_count(answer_text)
    if wc < MIN_GATE:
        logger.debug("answer gated at %d words", wc)
        return GatedResult(word_count=wc, message=GATE_MESSAGE)

    t = (answer_text or "").lower()

    structure = evaluate_structure(t)
    criteria = evaluate_criteria(t)
    output = evaluate_output(t)
    context = evaluate_context(t)
    constrained = has_constraints(t)

    categories = [structure, criteria, output, context]
    score = sum(c.points for c in categories)
    score = max(0, min(MAX_SCORE, score))
    band = band_for(score)

    strengths = [
        sentence for passed, sentence in (
            (structure.level >= 2, STRENGTHS["structure"]),
            (criteria.level >= 1, STRENGTHS["criteria"]),
            (output.level >= 1, STRENGTHS["output"]),
            (context.level >= 1, STRENGTHS["context"]),
        ) if passed
    ]

    tag_levels = [structure.level, criteria.level, context.level, 2 if constrained else 0, output.level]
    tags = tuple(
        Tag(name=name, status=Status.from_level(level).tag)
        for name, level in zip(TAG_NAMES, tag_levels)
    )

    grid = Grid(
        ethical=Status.from_level(criteria.level).label,
        impact=Status.from_level(output.level).label,
        legal=Status.from_level(context.level).label,
        recs=Status.from_level(2 if constrained else 1).label,
        structure=Status.from_level(structure.level).label,
    )

    notes = [c.note for c in categories if c.note]
    if not notes:
        feedback = f"Strong prompt — it should produce a realistic prioritisation plan. Band: {band} ({score}/10)."
    else:
        feedback = f"To improve (Band: {band} • {score}/10):\n- " + "\n- ".join(notes)

    logger.debug(
        "scored %d words: structure=%d criteria=%d output=%d context=%d total=%d",
        wc, structure.points, criteria.points, output.points, context.points, score,
    )

    return ScoredResult(
        word_count=wc,
        score=score,
        band=band,
        strengths=tuple(strengths[:MAX_STRENGTHS]),
        tags=tags,
        grid=grid,
        framework=STATIC_FRAMEWORK,
        feedback=feedback,
        model_answer=MODEL_ANSWER,
    )
