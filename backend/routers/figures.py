from fastapi import APIRouter, Depends, HTTPException, Query

from db import get_lookup
from models import HistoricalFigure

router = APIRouter()


@router.get("/api/figures/search")
async def search_figures(
    q:      str = Query(..., min_length=1),
    limit:  int = Query(10, ge=1, le=50),
    lookup = Depends(get_lookup),
):
    return {"results": await lookup.search(q, limit)}


@router.get("/api/figures/{name}", response_model=HistoricalFigure)
async def get_figure(name: str, lookup = Depends(get_lookup)):
    figure = await lookup.get_person(name)
    if figure is None:
        raise HTTPException(status_code=404, detail=f"No dated biography found for '{name}'.")
    return figure
