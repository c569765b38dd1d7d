"""AI evaluation endpoints for learner sentences and answers."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.deps import get_sentence_evaluator
from app.schemas import (
    Evaluation,
    EvaluationRequest,
    LegacyEvaluation,
    LegacyEvaluationResponse,
    PracticeRequest,
    PracticeResponse,
    SimpleEvaluationResponse,
)
from app.services.evaluation import SentenceEvaluator
from app.utils.exceptions import LLMServiceError

router = APIRouter(tags=["evaluation"])

EVALUATION_FAILED = "Có lỗi xảy ra khi đánh giá. Vui lòng thử lại!"
PRACTICE_FAILED = "Có lỗi xảy ra khi phân tích. Vui lòng thử lại!"


@router.post("/ai-evaluate-simple", response_model=SimpleEvaluationResponse)
def evaluate_sentence(
    payload: EvaluationRequest,
    evaluator: SentenceEvaluator = Depends(get_sentence_evaluator),
):
    """Grade a sentence written with the target word."""

    if not payload.word or not payload.user_input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: word, userInput",
        )

    try:
        result = evaluator.evaluate_sentence(
            word=payload.word, meaning=payload.meaning, user_input=payload.user_input
        )
    except LLMServiceError as exc:
        logger.error("Sentence evaluation failed", word=payload.word, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": EVALUATION_FAILED, "details": exc.message},
        )

    return SimpleEvaluationResponse(
        evaluation=Evaluation(
            passed=result.passed, feedback=result.feedback, confidence=result.confidence
        ),
        source=result.source,
    )


@router.post("/ai-evaluate", response_model=LegacyEvaluationResponse)
def evaluate_meaning(
    payload: EvaluationRequest,
    evaluator: SentenceEvaluator = Depends(get_sentence_evaluator),
) -> LegacyEvaluationResponse:
    """Grade whether an answer conveys the meaning of the target word."""

    if not payload.word or not payload.meaning or not payload.user_input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: word, meaning, userInput",
        )

    result = evaluator.evaluate_meaning(
        word=payload.word, meaning=payload.meaning, user_input=payload.user_input
    )
    return LegacyEvaluationResponse(
        evaluation=LegacyEvaluation(
            passed=result.passed,
            feedback=result.feedback,
            confidence=result.confidence,
            word=payload.word,
            user_input=payload.user_input,
        )
    )


@router.post("/gemini-practice", response_model=PracticeResponse)
def practice_feedback(
    payload: PracticeRequest,
    evaluator: SentenceEvaluator = Depends(get_sentence_evaluator),
):
    """Short tutor-style feedback on a practice sentence."""

    try:
        feedback = evaluator.practice_feedback(
            word=payload.word,
            meaning=payload.meaning,
            example=payload.example,
            user_input=payload.user_input,
        )
    except LLMServiceError as exc:
        logger.error("Practice feedback failed", word=payload.word, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": PRACTICE_FAILED},
        )
    return PracticeResponse(feedback=feedback)
