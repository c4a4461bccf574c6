"""
main.py
-------
Entry point and composition root.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Wire the gateway, cache and repositories into a SportService.
    - Log the sports currently registered, as a startup smoke check.
"""

from db.connection import close_pool, init_pool
from db.gateway import StoreGateway
from db.init_db import create_tables
from repositories.facility_repo import FacilityRepository
from repositories.sport_repo import SportRepository
from services.sport_service import SportService
from utils.cache import Cache
from utils.logger import get_logger

logger = get_logger(__name__)


def build_sport_service(gateway: StoreGateway | None = None, cache: Cache | None = None) -> SportService:
    """Create a SportService whose repositories share one gateway and one cache."""
    gateway = gateway or StoreGateway()
    return SportService(
        repo=SportRepository(gateway),
        cache=cache if cache is not None else Cache(),
        facilities=FacilityRepository(gateway),
    )


def main() -> None:
    """Initialize the database and report what is stored."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    try:
        create_tables()

        # ── 2. Services ───────────────────────────────────
        service = build_sport_service()
        sports = service.find_all()
        logger.info(f"{len(sports)} sport(s) registered: {', '.join(s.name for s in sports) or '-'}")
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
