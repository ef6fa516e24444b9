from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from gallery import __version__
from gallery.api import include_all_routers
from gallery.config.settings import settings

# 앱 생성
app = FastAPI(debug=settings.DEBUG_MODE)

# 자동으로 gallery/api/* 모듈을 스캔해 라우터 전부 등록
include_all_routers(app)

app.openapi = lambda: get_openapi(
    title="Portfolio Manifest Preview",
    version=__version__,
    description="portfolio 폴더에서 data.json을 생성해 미리보기",
    routes=app.routes,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gallery.main:app", host="0.0.0.0", port=settings.FASTAPI_PORT, reload=True)
