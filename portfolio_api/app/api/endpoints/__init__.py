"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one domain.  The routers are
aggregated per service in ``api/router.py``.
"""
