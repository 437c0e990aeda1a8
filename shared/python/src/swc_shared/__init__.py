"""
swc_shared — configuration, logging, database and record models shared by
the SWC platform packages.

Usage:
    from swc_shared.config import settings
    from swc_shared.db import get_sessionmaker, init_db
    from swc_shared.orm import Site, Design, BOQ
    from swc_shared.models import SiteCreate, Site
    from swc_shared.constants import SlopeClass, DEFAULT_CURRENCY
"""

__version__ = "0.1.0"
