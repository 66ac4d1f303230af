"""alertbridge - FastAPI application relaying Alertmanager notifications to Discord."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import click
import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from alertbridge.config import get_settings
from alertbridge.exceptions import ConfigError, DecodeError
from alertbridge.pipeline import NotificationPipeline

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def dump_request(request: Request, body: bytes) -> str:
    """Render a request as method line, headers and body."""
    http_version = request.scope.get("http_version", "1.1")
    lines = [f"{request.method} {request.url} HTTP/{http_version}"]
    lines.extend(f"{key}: {value}" for key, value in request.headers.items())
    lines.append("")
    lines.append(body.decode("utf-8", errors="replace"))
    return "\n".join(lines)


def create_app(pipeline: NotificationPipeline | None = None) -> FastAPI:
    """Create the application.

    Without an explicit pipeline, one is built from the environment at
    startup, and startup fails when no destination webhook is configured.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if getattr(app.state, "pipeline", None) is None:
            settings = get_settings()
            logging.getLogger().setLevel(settings.log_level.upper())
            try:
                app.state.pipeline = NotificationPipeline.from_settings(settings)
            except ConfigError as e:
                logger.error(f"error: {e}")
                raise

        logger.info("alertbridge started")

        yield

        logger.info("alertbridge stopped")

    app = FastAPI(
        title="alertbridge",
        description="Relays Alertmanager webhook notifications to a Discord webhook",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.pipeline = pipeline

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def notification_webhook(request: Request) -> JSONResponse:
        """Receive a notification on any path and relay it."""
        body = await request.body()
        logger.info(f"Request received: {dump_request(request, body)}")

        pipeline: NotificationPipeline = request.app.state.pipeline
        try:
            report = await pipeline.handle(body)
        except DecodeError as e:
            logger.error(f"Failed to decode notification: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid payload: {e}",
            )

        return JSONResponse(status_code=status.HTTP_200_OK, content=report.summary())

    return app


app = create_app()


@click.command()
@click.option(
    "--webhook.url",
    "webhook_url",
    default=None,
    help="Discord webhook URL (overrides DISCORD_WEBHOOK).",
)
@click.option("--host", default=None, help="Listen address.")
@click.option("--port", type=int, default=None, help="Listen port.")
@click.option("--log-level", default=None, help="Log level.")
def main(webhook_url: str | None, host: str | None, port: int | None, log_level: str | None) -> None:
    """Run the application using uvicorn."""
    overrides = {
        "discord_webhook": webhook_url,
        "host": host,
        "port": port,
        "log_level": log_level,
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    logging.getLogger().setLevel(settings.log_level.upper())

    try:
        pipeline = NotificationPipeline.from_settings(settings)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(pipeline),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
