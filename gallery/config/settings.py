from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

# helpers
from gallery.config.env_utils import env_bool, env_int, env_list, env_path


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수, 그것도 없으면 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any((parent / m).exists() for m in (".git", "pyproject.toml")):
            return parent
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "local")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = env_int("FASTAPI_PORT", 8000)
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    PORTFOLIO_DIR: Path = env_path("PORTFOLIO_DIR", ROOT / "portfolio")
    OUTPUT_FILE: Path = env_path("OUTPUT_FILE", ROOT / "data.json")

    # ── URL 구성 ──────────────────────────────────────────
    # repo 모드: 사이트 기준 상대 경로 prefix (예: "/portfolio_yarik/")
    SITE_BASE_PATH: str = os.getenv("SITE_BASE_PATH", "/")
    # release 모드: {RELEASE_REPO_URL}/releases/download/{version}/...
    RELEASE_REPO_URL: str = os.getenv(
        "RELEASE_REPO_URL", "https://github.com/Confucii/portfolio_yarik"
    )

    # ── 이미지 탐색 (앞쪽일수록 우선) ─────────────────────
    IMAGE_EXTS = env_list("IMAGE_EXTS", ["webp", "png", "jpg", "jpeg"])
    THUMBNAIL_EXTS = env_list("THUMBNAIL_EXTS", ["webp", "jpg", "png"])

    # ── 이미지 최적화 ─────────────────────────────────────
    WEBP_QUALITY: int = env_int("WEBP_QUALITY", 85)
    THUMBNAIL_SIZE: int = env_int("THUMBNAIL_SIZE", 400)
    THUMBNAIL_QUALITY: int = env_int("THUMBNAIL_QUALITY", 90)


# 전역 싱글톤처럼 사용
settings = Settings()
