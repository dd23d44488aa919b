"""
Top‑level routers for the two services.

``planner_router`` aggregates every domain of the investment planner
service; ``portfolio_router`` carries the ticker‑keyed asset routes and
the portfolio summary.  When a domain is added, include its router in
the service that should expose it.
"""

from fastapi import APIRouter

from .endpoints import assets, contributions, goals, portfolio, questions, suggestions

planner_router = APIRouter()

planner_router.include_router(contributions.router, prefix="/contributions", tags=["contributions"])
planner_router.include_router(suggestions.router, prefix="/suggestions", tags=["suggestions"])
planner_router.include_router(goals.router, prefix="/goals", tags=["goals"])
planner_router.include_router(questions.router, prefix="/questions", tags=["questions"])
planner_router.include_router(
    questions.answers_router, prefix="/asset-question-answers", tags=["questions"]
)
planner_router.include_router(assets.router, prefix="/assets", tags=["assets"])

portfolio_router = APIRouter()

portfolio_router.include_router(assets.ticker_router, prefix="/assets", tags=["assets"])
portfolio_router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
