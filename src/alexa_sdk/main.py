"""FastAPI application entrypoint with Lambda handlers."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable

from fastapi import FastAPI
from mangum import Mangum

from .config import settings
from .models.request import Request
from .models.response import Response
from .routes import alexa, health
from .services.codec import parse_request, response_to_dict
from .services.hello_skill import handle_hello_request

SkillHandler = Callable[[Request], Response]

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.service_name} in {settings.environment} mode")
    yield
    logger.info(f"Shutting down {settings.service_name}")


def create_app(skill_handler: SkillHandler = handle_hello_request) -> FastAPI:
    """Build the webhook application serving ``skill_handler``."""
    app = FastAPI(
        title="Alexa Skill",
        description="Alexa Skills Kit webhook",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.skill_handler = skill_handler

    # Include routers
    app.include_router(health.router)
    app.include_router(alexa.router)

    return app


app = create_app()

# API Gateway handler via Mangum
handler = Mangum(app, lifespan="off")


def make_lambda_handler(
    skill_handler: SkillHandler,
) -> Callable[[dict[str, Any], Any], dict[str, Any]]:
    """
    Build a handler for direct Alexa -> Lambda invocations.

    The Alexa service invokes the function with the request envelope as the
    event; the returned dict is the response envelope. A malformed event
    raises MalformedPayload, which the Lambda runtime reports as a failed
    invocation.
    """

    def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        skill_request = parse_request(event)

        logger.info(f"Alexa request received: {skill_request.body.type}")

        return response_to_dict(skill_handler(skill_request))

    return lambda_handler


lambda_handler = make_lambda_handler(handle_hello_request)
