"""Static icon assets referenced by the dashboard page."""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from moviedash.api.deps import get_settings
from moviedash.config import Settings

router = APIRouter(prefix="/icons")


@router.get("/imdb.svg")
async def imdb_icon(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(settings.icons_dir / "imdb.svg")


@router.get("/rt.png")
async def rotten_tomatoes_icon(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(settings.icons_dir / "rt.png")


@router.get("/trending.png")
async def trending_icon(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(settings.icons_dir / "trending.png")
