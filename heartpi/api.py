# -*- coding: utf-8 -*-
"""
HeartPi API

Survey assessment, reading history, live heart-rate feed, health tips and
caregiver alerts.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .alerts.models import AlertRequest, AlertResponse
from .alerts.notifier import AlertSender, RecordingAlertSender, SmtpAlertSender, compose_alert
from .config import settings
from .errors import AlertDeliveryError, StorageError, configure_logging, log_exception
from .readings.models import HeartRateHistoryResponse, LiveFeedResponse, LivePoint
from .readings.storage import HeartRateHistory, ReadingLog
from .realtime.simulator import LiveHeartRateFeed
from .risk.advice import parse_tier, tips_for
from .risk.engine import RiskEngine, score_breakdown
from .simulation.sampler import UniformSampler
from .survey.models import SurveyAnswers

logger = logging.getLogger(__name__)

configure_logging(settings.error_log_path, settings.log_level)

app = FastAPI(
    title="HeartPi",
    description="Questionnaire-driven heart risk scoring with simulated vital signs",
    version="1.0.0",
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Shared services
engine = RiskEngine()
reading_log = ReadingLog(settings.readings_csv)
history = HeartRateHistory(settings.history_csv)


class TipModel(BaseModel):
    category: Optional[str] = None
    title: str
    description: str
    urgent: bool = False


class AssessmentRequest(BaseModel):
    user: Optional[str] = Field(None, description="Store the readings under this user when given")
    answers: SurveyAnswers


class AssessmentResponse(BaseModel):
    heart_rate: float
    systolic_bp: float
    diastolic_bp: float
    cholesterol: float
    ecg: float
    risk_score: int
    risk_tier: str = Field(..., description="low | moderate | high")
    risk_message: str
    breakdown: Dict[str, int]
    alert_recommended: bool
    tips: List[TipModel]
    logged_at: Optional[str] = None
    history_samples: int = 0


def get_alert_sender() -> AlertSender:
    return SmtpAlertSender()


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


@app.post("/api/assessments", response_model=AssessmentResponse)
def create_assessment(request: AssessmentRequest) -> AssessmentResponse:
    profile = request.answers.to_profile()
    # One sampler per request; samplers are never shared across threads.
    sampler = UniformSampler()
    reading = engine.assess(profile, sampler)
    logger.info("Assessment: score=%s tier=%s", reading.risk_score, reading.risk_tier.value)

    logged_at: Optional[str] = None
    stored = 0
    if request.user:
        # The two CSV appends are not atomic. A failed history write keeps the
        # sensor-log row and the request still fails with 500.
        try:
            logged_at = reading_log.append(reading)
            stored = len(
                history.append_simulated(
                    request.user,
                    reading.heart_rate,
                    sampler,
                    count=settings.history_samples,
                )
            )
        except StorageError as exc:
            log_exception(exc)
            raise HTTPException(status_code=500, detail=str(exc))

    return AssessmentResponse(
        heart_rate=reading.heart_rate,
        systolic_bp=reading.systolic_bp,
        diastolic_bp=reading.diastolic_bp,
        cholesterol=reading.cholesterol,
        ecg=reading.ecg,
        risk_score=reading.risk_score,
        risk_tier=reading.risk_tier.value,
        risk_message=reading.risk_message,
        breakdown=score_breakdown(profile),
        alert_recommended=engine.should_alert(reading),
        tips=[TipModel(**asdict(tip)) for tip in tips_for(reading.risk_tier)],
        logged_at=logged_at,
        history_samples=stored,
    )


@app.get("/api/readings/{user}/history", response_model=HeartRateHistoryResponse)
def reading_history(user: str) -> HeartRateHistoryResponse:
    return HeartRateHistoryResponse(
        user=user,
        samples=history.samples_for(user),
        summary=history.summary_for(user),
    )


@app.get("/api/readings/{user}/live", response_model=LiveFeedResponse)
def live_feed(user: str, count: int = Query(10, ge=1, le=600)) -> LiveFeedResponse:
    stored = [sample.bpm for sample in history.samples_for(user)]
    feed = LiveHeartRateFeed(stored, UniformSampler())
    points = [LivePoint(x=x, bpm=bpm) for x, bpm in feed.take(count)]
    return LiveFeedResponse(user=user, replayed=feed.replayed, points=points)


@app.get("/api/tips/{tier}", response_model=List[TipModel])
def tips(tier: str) -> List[TipModel]:
    parsed = parse_tier(tier)
    if parsed is None:
        raise HTTPException(status_code=404, detail=f"Unknown risk tier: {tier}")
    return [TipModel(**asdict(tip)) for tip in tips_for(parsed)]


@app.post("/api/alerts/{user}", response_model=AlertResponse)
def send_alert(
    user: str,
    request: AlertRequest,
    sender: AlertSender = Depends(get_alert_sender),
) -> AlertResponse:
    message = compose_alert(user, request.recipient.strip(), history.summary_for(user))
    if request.dry_run:
        RecordingAlertSender().send(message)
        return AlertResponse(status="composed", message=message)
    try:
        sender.send(message)
    except AlertDeliveryError as exc:
        log_exception(exc)
        raise HTTPException(status_code=502, detail=str(exc))
    return AlertResponse(status="sent", message=message)


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    uvicorn.run("heartpi.api:app", host=settings.host, port=settings.port, reload=False)
