"""Investment Portfolio API client.

This module defines a small client wrapper around the HTTP API served
by ``portfolio_api``.  One client talks to one service: point
``base_url`` at the planner service for contributions, goals,
questions and suggestions, or at the portfolio service for
``get_portfolio``.  Asset methods work against either.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  Network errors
are reported with ``status_code`` set to ``None``.  The client never
raises for HTTP or connection failures.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PortfolioAPI:
    """Client for the investment planner and portfolio services."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST`` or ``PUT``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/assets``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get_list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        # Empty collections may come back as ``null``.
        return data or [], None

    def _post(self, path: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", path, json_body=payload)

    # ------------------------------------------------------------------
    # Assets and derived views
    # ------------------------------------------------------------------
    def list_assets(self, asset_type: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return all assets, or only those of ``asset_type``."""
        params = {"type": asset_type} if asset_type else None
        return self._get_list("/api/assets", params)

    def add_asset(self, asset: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._post("/api/assets", asset)

    def update_asset(self, key: Any, asset: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace an asset.

        Args:
            key: Asset id on the planner service, ticker on the
                portfolio service.
            asset: The full replacement asset.
        """
        return self._request("PUT", f"/api/assets/{key}", json_body=asset)

    def get_portfolio(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/portfolio")

    def get_suggestions(self, amount: float) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/api/suggestions", {"amount": amount})

    # ------------------------------------------------------------------
    # Contributions and goals
    # ------------------------------------------------------------------
    def get_latest_contribution(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/contributions/latest/{user_id}")

    def add_contribution(self, contribution: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._post("/api/contributions", contribution)

    def list_goals(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/goals/{user_id}")

    def add_goal(self, goal: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._post("/api/goals", goal)

    # ------------------------------------------------------------------
    # Questionnaire
    # ------------------------------------------------------------------
    def list_questions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list("/api/questions")

    def add_question(self, question: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._post("/api/questions", question)

    def list_answers(self, asset_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._get_list(f"/api/asset-question-answers/{asset_id}")

    def add_answer(self, answer: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._post("/api/asset-question-answers", answer)
