from fastapi import APIRouter

from gallery import __version__
from gallery.config.settings import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "version": __version__,
        "env": settings.ENV,
        "portfolio_dir_exists": settings.PORTFOLIO_DIR.is_dir(),
    }


ROUTERS = [router]
