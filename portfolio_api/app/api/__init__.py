"""
API package containing the routers of both services.

``router.py`` exposes ``planner_router`` and ``portfolio_router``;
each is mounted under ``/api`` by its application factory in
``main.py``.
"""
