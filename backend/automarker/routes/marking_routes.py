# backend/automarker/routes/marking_routes.py
import logging

from fastapi import APIRouter, Depends

from .. import config, schemas, scoring, task_content
from ..utils import clamp_text
from .auth_routes import require_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["marking"])


@router.get("/config", response_model=schemas.ConfigOut)
def get_config():
    return schemas.ConfigOut(
        course_back_url=config.COURSE_BACK_URL,
        next_lesson_url=config.NEXT_LESSON_URL,
        question_text=task_content.QUESTION_TEXT,
        template_text=task_content.TEMPLATE_TEXT,
        target_words=task_content.TARGET_WORDS,
        min_words_gate=scoring.MIN_GATE,
    )


@router.post("/mark", response_model=schemas.MarkOut, dependencies=[Depends(require_session)])
def mark(payload: schemas.MarkIn):
    answer_text = clamp_text(payload.answer_text, config.MAX_ANSWER_CHARS)
    result = scoring.score_answer(answer_text)
    if result.gated:
        logger.info("marked answer: gated at %d words", result.word_count)
    else:
        logger.info("marked answer: %d words, score %d (%s)", result.word_count, result.score, result.band)
    return schemas.MarkOut(result=result)
