import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from gallery.common.dependencies import get_manifest_service, get_portfolio_root
from gallery.common.errors import ManifestRootError
from gallery.schemas.manifest_dto import ManifestDocument
from gallery.services.manifest_service import ManifestService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Manifest"])


def _build_or_404(service: ManifestService, root: Path) -> ManifestDocument:
    try:
        return service.build(root)
    except ManifestRootError as e:
        logger.warning(f"⚠️ {e}")
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/data.json")
def get_manifest(
    service: ManifestService = Depends(get_manifest_service),
    root: Path = Depends(get_portfolio_root),
):
    """렌더러가 읽는 data.json을 매 요청마다 새로 생성"""
    return _build_or_404(service, root).to_json_dict()


@router.get("/projects/{category}/{project_id}")
def get_project(
    category: str,
    project_id: str,
    service: ManifestService = Depends(get_manifest_service),
    root: Path = Depends(get_portfolio_root),
):
    document = _build_or_404(service, root)
    for project in document.projects:
        if project.category == category and project.id == project_id:
            return project.model_dump(by_alias=True, mode="json")
    raise HTTPException(status_code=404, detail=f"project not found: {category}/{project_id}")


ROUTERS = [router]
