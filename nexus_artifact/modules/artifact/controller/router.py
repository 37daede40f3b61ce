"""FastAPI routes exposing the artifact helpers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from nexus_artifact.exceptions import (
    ArtifactError,
    ConfigNotFound,
    EnvironmentConfigNotFound,
    InvalidRepositoryConfig,
    LinkResolutionFailure,
    MalformedCoordinate,
    RemoteFetchFailure,
    RemoteResolutionFailure,
)
from nexus_artifact.modules.artifact.service.manager import ArtifactService

router = APIRouter(prefix="/artifacts", tags=["artifacts"])

_STATUS_BY_ERROR = (
    (MalformedCoordinate, 400),
    (ConfigNotFound, 404),
    (EnvironmentConfigNotFound, 404),
    (LinkResolutionFailure, 409),
    (InvalidRepositoryConfig, 500),
    (RemoteResolutionFailure, 502),
    (RemoteFetchFailure, 502),
)


class FetchRequest(BaseModel):
    coordinate: str
    environment: str
    destination: str
    ssl_verify: bool = True


def get_service(request: Request) -> ArtifactService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "artifact_service", None):
        raise HTTPException(status_code=500, detail="Artifact service not initialized.")
    return container.artifact_service


def _to_http(exc: ArtifactError) -> HTTPException:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(
                status_code=status,
                detail={"code": exc.error_code, "msg": str(exc)},
            )
    return HTTPException(status_code=500, detail={"code": exc.error_code, "msg": str(exc)})


def _default_verify(request: Request, value: Optional[bool]) -> bool:
    if value is not None:
        return value
    container = getattr(request.app.state, "container", None)
    settings = getattr(container, "settings", None)
    return bool(getattr(settings, "ssl_verify", True))


@router.get("/version")
def resolve_version(
    request: Request,
    coordinate: str,
    environment: str,
    ssl_verify: Optional[bool] = None,
    svc: ArtifactService = Depends(get_service),
) -> Dict[str, str]:
    try:
        version = svc.get_actual_version(
            environment, coordinate, _default_verify(request, ssl_verify)
        )
    except ArtifactError as exc:
        raise _to_http(exc) from exc
    return {"coordinate": coordinate, "version": version}


@router.get("/download-url")
def download_url(
    coordinate: str,
    environment: str,
    svc: ArtifactService = Depends(get_service),
) -> Dict[str, str]:
    try:
        url = svc.artifact_download_url_for(environment, coordinate)
    except ArtifactError as exc:
        raise _to_http(exc) from exc
    return {"coordinate": coordinate, "url": url}


@router.post("/fetch")
def fetch(payload: FetchRequest, svc: ArtifactService = Depends(get_service)) -> Dict[str, Any]:
    try:
        info = svc.retrieve_from_nexus(
            payload.environment,
            payload.coordinate,
            payload.destination,
            payload.ssl_verify,
        )
    except ArtifactError as exc:
        raise _to_http(exc) from exc
    return info.as_dict()


@router.get("/deployed")
async def deployed_version(
    root: str,
    svc: ArtifactService = Depends(get_service),
) -> Dict[str, Optional[str]]:
    try:
        version = svc.get_current_deployed_version(root)
    except ArtifactError as exc:
        raise _to_http(exc) from exc
    return {"root": root, "version": version}
