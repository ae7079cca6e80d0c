from __future__ import annotations

import logging

from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, Response

from faviconkit import __version__
from faviconkit.errors import ErrorCode, FaviconKitError, ValidationError
from faviconkit.pipeline import generate_kit
from faviconkit.upload import validate_upload

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="faviconkit", version=__version__)

    @app.exception_handler(FaviconKitError)
    async def _kit_error(request: Request, exc: FaviconKitError) -> JSONResponse:  # noqa: ARG001
        if exc.code != ErrorCode.INTERNAL_ERROR:
            logger.warning("rejected %s: %s", exc.code.value, exc.detail or "-")
        return JSONResponse(exc.to_payload(), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        logger.exception("generate api error: %s", exc)
        return JSONResponse({"error": ErrorCode.INTERNAL_ERROR.value}, status_code=500)

    @app.get("/health")
    def health() -> dict:
        return {"ok": True, "service": "faviconkit"}

    @app.post("/api/generate")
    async def generate(
        image: UploadFile | None = File(None),
        options: str | None = Form(None),
    ) -> Response:
        if image is None or not image.filename:
            raise ValidationError("No image file provided.")

        # Starlette knows the spooled size up front; reject before reading it into memory.
        if image.size is not None:
            validate_upload(image.filename, image.content_type, image.size)

        raw = await image.read()
        result = await run_in_threadpool(
            generate_kit,
            raw,
            options,
            filename=image.filename,
            content_type=image.content_type,
        )

        return Response(
            content=result.content,
            media_type=result.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="{result.filename}"',
                "Content-Length": str(result.size),
            },
        )

    return app


app = create_app()
