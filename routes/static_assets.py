"""Landing page and static asset endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from config import AppConfig
from dependencies import get_config

router = APIRouter(include_in_schema=False)

ConfigDep = Annotated[AppConfig, Depends(get_config)]


@router.get("/")
def index(config: ConfigDep):
    """Serves the browser UI."""
    index_path = config.server.static_dir / "index.html"
    if not index_path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index_path)


@router.get("/static/{asset_path:path}")
def static_asset(asset_path: str, config: ConfigDep):
    """Serves a file from the static root; content type follows the extension."""
    if ".." in asset_path:
        raise HTTPException(status_code=400, detail="Invalid path")

    root = config.server.static_dir.resolve()
    file_path = (root / asset_path).resolve()
    if not file_path.is_relative_to(root) or not file_path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")

    return FileResponse(file_path)
