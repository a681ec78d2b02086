from fastapi import APIRouter
from pydantic import BaseModel

from analytics.chain import analyze_chain, would_improve_chain
from models import ChainAnalysis, HistoricalFigure

router = APIRouter()


class ChainRequest(BaseModel):
    target_a: HistoricalFigure
    target_b: HistoricalFigure
    figures:  list[HistoricalFigure] = []


class ImprovementRequest(ChainRequest):
    candidate: HistoricalFigure


@router.post("/api/chain/analyze", response_model=ChainAnalysis)
def analyze(req: ChainRequest):
    return analyze_chain(req.target_a, req.target_b, req.figures)


@router.post("/api/chain/would-improve")
def would_improve(req: ImprovementRequest):
    return {"improves": would_improve_chain(req.candidate, req.target_a, req.target_b, req.figures)}
