"""
Portfolio aggregation and investment suggestions.

Both computations are pure functions over a list of assets so they
can be used without a store; ``PortfolioService`` wraps them for the
API layer.

``compute_portfolio`` makes two passes: the first accumulates the
total value (price × quantity) and a subtotal per asset type, the
second turns each subtotal into a percentage of the total.  An empty
or worthless portfolio reports every type at ``0.0`` instead of
dividing by zero.  A total too large to represent as a finite float
raises ``ValuationError``.

``suggest_investments`` splits a cash amount across assets according
to each asset's target ``percentage``.  The amount is not validated:
zero or negative amounts yield zero or negative suggestions.  Assets
without a positive price get a suggested quantity of zero.  A
suggested amount that overflows raises ``ValuationError``.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from portfolio_api.app.core.errors import ValuationError
from portfolio_api.app.core.store import Store
from portfolio_api.app.schemas.asset import Asset
from portfolio_api.app.schemas.portfolio import InvestmentSuggestion, Portfolio


def compute_portfolio(assets: Iterable[Asset]) -> Portfolio:
    total_value = 0.0
    subtotals: Dict[str, float] = {}
    count = 0
    for asset in assets:
        value = asset.total_value
        total_value += value
        subtotals[asset.type] = subtotals.get(asset.type, 0.0) + value
        count += 1

    if not math.isfinite(total_value):
        raise ValuationError("Portfolio total value is not a finite number")
    if total_value == 0:
        distribution = {asset_type: 0.0 for asset_type in subtotals}
    else:
        distribution = {
            asset_type: subtotal / total_value * 100 for asset_type, subtotal in subtotals.items()
        }
    return Portfolio(total_value=total_value, distribution=distribution, assets_quantity=count)


def suggest_investments(amount: float, assets: Iterable[Asset]) -> List[InvestmentSuggestion]:
    suggestions = []
    for asset in assets:
        suggested_amount = amount * (asset.percentage / 100)
        if not math.isfinite(suggested_amount):
            raise ValuationError(f"Suggested amount for {asset.ticker or asset.id} is not a finite number")
        if asset.price > 0:
            units = suggested_amount / asset.price
            if not math.isfinite(units):
                raise ValuationError(f"Suggested quantity for {asset.ticker or asset.id} is not a finite number")
            suggested_quantity = math.floor(units)
        else:
            suggested_quantity = 0
        suggestions.append(
            InvestmentSuggestion(
                asset_id=asset.id,
                ticker=asset.ticker,
                suggested_amount=suggested_amount,
                suggested_quantity=suggested_quantity,
            )
        )
    return suggestions


class PortfolioService:
    """Derived views over the asset collection of a store."""

    @classmethod
    async def get_portfolio(cls, store: Store) -> Portfolio:
        return compute_portfolio(store.assets.list_all())

    @classmethod
    async def get_suggestions(cls, store: Store, amount: float) -> List[InvestmentSuggestion]:
        return suggest_investments(amount, store.assets.list_all())
