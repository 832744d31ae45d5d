"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from shoot_mode.api.models import (
    AddShotRequest,
    CompleteRequest,
    NotesRequest,
    ShotStatusRequest,
    StartSessionRequest,
)
from shoot_mode.app_logging import configure_logging
from shoot_mode.containers import AppContainer
from shoot_mode.domain.catalog import ShotCategory, list_categories
from shoot_mode.domain.progress import CompletionValidation
from shoot_mode.domain.sessions import ShootSession, ShotMetadata
from shoot_mode.services.codec import session_to_dict
from shoot_mode.services.shoots import (
    SessionClosedError,
    SessionIncompleteError,
    ShootService,
    ShootSessionNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: C901
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(ShootSessionNotFoundError)
    async def session_not_found(
        request: Request, exc: ShootSessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog() -> dict[str, object]:
        """Return shot categories in recommendation order."""
        return {"categories": [_category_to_dict(c) for c in list_categories()]}

    @app.post("/shoots", status_code=status.HTTP_201_CREATED)
    async def start_shoot(
        payload: StartSessionRequest, request: Request
    ) -> dict[str, object]:
        """Start a new capture session."""
        session = _service(request).start_session(
            listing_id=payload.listing_id,
            assignment_id=payload.assignment_id,
            photographer_id=payload.photographer_id,
            square_footage=payload.square_footage,
        )
        return _session_response(session)

    @app.get("/shoots/{session_id}")
    async def get_shoot(session_id: str, request: Request) -> dict[str, object]:
        """Return a stored session."""
        return _session_response(_service(request).get_session(session_id))

    @app.post("/shoots/{session_id}/shots", status_code=status.HTTP_201_CREATED)
    async def add_shot(
        session_id: str, payload: AddShotRequest, request: Request
    ) -> dict[str, object]:
        """Record a captured shot."""
        metadata = (
            ShotMetadata(**payload.metadata.model_dump()) if payload.metadata else None
        )
        session = _service(request).add_shot(
            session_id, payload.category_id, payload.local_uri, metadata
        )
        return _session_response(session)

    @app.delete("/shoots/{session_id}/shots/{shot_id}")
    async def remove_shot(
        session_id: str, shot_id: str, request: Request
    ) -> dict[str, object]:
        """Remove a shot."""
        return _session_response(_service(request).remove_shot(session_id, shot_id))

    @app.patch("/shoots/{session_id}/shots/{shot_id}")
    async def report_upload(
        session_id: str, shot_id: str, payload: ShotStatusRequest, request: Request
    ) -> dict[str, object]:
        """Apply an upload status report to a shot."""
        session = _service(request).report_upload(
            session_id,
            shot_id,
            payload.status,
            upload_progress=payload.upload_progress,
            uploaded_url=payload.uploaded_url,
            error=payload.error,
        )
        return _session_response(session)

    @app.put("/shoots/{session_id}/notes")
    async def update_notes(
        session_id: str, payload: NotesRequest, request: Request
    ) -> dict[str, object]:
        """Replace session notes."""
        return _session_response(
            _service(request).update_notes(session_id, payload.notes)
        )

    @app.get("/shoots/{session_id}/progress")
    async def progress(session_id: str, request: Request) -> dict[str, object]:
        """Return the progress snapshot."""
        return asdict(_service(request).progress(session_id))

    @app.get("/shoots/{session_id}/recommendation")
    async def recommendation(session_id: str, request: Request) -> dict[str, object]:
        """Return the next category to shoot."""
        category = _service(request).recommend(session_id)
        return {"category": _category_to_dict(category) if category else None}

    @app.get("/shoots/{session_id}/validation")
    async def validation(session_id: str, request: Request) -> dict[str, object]:
        """Return completion errors and warnings."""
        return _validation_to_dict(_service(request).validate(session_id))

    @app.post("/shoots/{session_id}/pause")
    async def pause(session_id: str, request: Request) -> dict[str, object]:
        """Pause the session."""
        return _session_response(_service(request).pause(session_id))

    @app.post("/shoots/{session_id}/resume")
    async def resume(session_id: str, request: Request) -> dict[str, object]:
        """Resume the session."""
        return _session_response(_service(request).resume(session_id))

    @app.post("/shoots/{session_id}/cancel")
    async def cancel(session_id: str, request: Request) -> dict[str, object]:
        """Cancel the session."""
        return _session_response(_service(request).cancel(session_id))

    @app.post("/shoots/{session_id}/complete")
    async def complete(
        session_id: str, request: Request, payload: CompleteRequest | None = None
    ) -> dict[str, object]:
        """Complete the session once it passes validation."""
        force = payload.force if payload else False
        try:
            session = _service(request).complete(session_id, force=force)
        except SessionIncompleteError as exc:
            logger.info("Shoot session not ready: id=%s %s", session_id, exc)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=_validation_to_dict(exc.validation),
            ) from exc
        except SessionClosedError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=str(exc)
            ) from exc
        return _session_response(session)

    return app


def _service(request: Request) -> ShootService:
    container: AppContainer = request.app.state.container
    return container.shoot_service


def _session_response(session: ShootSession) -> dict[str, object]:
    return {"session": session_to_dict(session)}


def _category_to_dict(category: ShotCategory) -> dict[str, object]:
    data = asdict(category)
    data["tips"] = list(category.tips)
    return data


def _validation_to_dict(validation: CompletionValidation) -> dict[str, object]:
    return {
        "is_valid": validation.is_valid,
        "errors": list(validation.errors),
        "warnings": list(validation.warnings),
    }
