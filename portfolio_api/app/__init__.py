"""
Application package initializer.

This package contains the entrypoints for both services and all of
their submodules.  Each domain (assets, contributions, goals,
questions and answers, portfolio) has its own schema module, service
and router defined in ``api/endpoints``.  Two applications are built
from these pieces:

* ``app`` – the investment planner service with every domain;
* ``portfolio_app`` – the portfolio service, which manages assets keyed
  by ticker and exposes the aggregated portfolio view.
"""

from .main import app, portfolio_app  # noqa: F401
