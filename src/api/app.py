"""FastAPI application for the password strength service.

Provides REST endpoints for scoring a password, rendering the sign-up
strength meter, and health checks.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from src.strength.evaluator import evaluate
from src.strength.meter import meter_view
from src.utils.config import AppConfig, load_config
from src.utils.logger import get_logger

from .schemas import HealthResponse, MeterResponse, PasswordRequest, StrengthResponse

logger = get_logger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="Password Strength API",
    description="Score passwords and suggest improvements",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_config() -> AppConfig:
    """Load the application configuration."""
    return load_config()


def _check_length(password: str, config: AppConfig) -> None:
    """Reject passwords over the configured transport limit."""
    limit = config.api.max_password_length
    if len(password) > limit:
        logger.warning(
            "Rejected password of length %d (limit %d)", len(password), limit
        )
        raise HTTPException(
            status_code=400,
            detail=f"Password exceeds maximum length of {limit} characters",
        )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return system health status."""
    return HealthResponse(status="healthy", version=VERSION)


@app.post("/password/strength", response_model=StrengthResponse)
async def password_strength(request: PasswordRequest) -> StrengthResponse:
    """Score a password.

    Args:
        request: Body carrying the password.

    Returns:
        Score, label, severity tag, and every improvement suggestion.
    """
    _check_length(request.password, _get_config())
    report = evaluate(request.password)
    return StrengthResponse(
        score=report.score,
        label=report.label,
        color_tag=report.color_tag,
        suggestions=list(report.suggestions),
    )


@app.post("/password/meter", response_model=MeterResponse)
async def password_meter(request: PasswordRequest) -> MeterResponse:
    """Render the sign-up strength meter for a password.

    Args:
        request: Body carrying the password.

    Returns:
        Meter display with suggestions truncated to the configured maximum.
    """
    config = _get_config()
    _check_length(request.password, config)
    view = meter_view(evaluate(request.password), config.meter.max_suggestions)
    return MeterResponse(
        visible=view.visible,
        score=view.score,
        label=view.label,
        color_tag=view.color_tag,
        color=view.color,
        suggestions=list(view.suggestions),
    )
