"""
db/init_db.py
-------------
Creates the database schema (tables and procedures) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Sports table: every sport the club offers, names are unique
CREATE TABLE IF NOT EXISTS sports (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    CONSTRAINT sports_name_key UNIQUE (name)
);

-- Facilities table: venues, optionally dedicated to one sport
CREATE TABLE IF NOT EXISTS facilities (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    sport_id        INT REFERENCES sports(id)
);

CREATE INDEX IF NOT EXISTS idx_facilities_sport ON facilities(sport_id);

-- Deleting a sport detaches its facilities first, so callers never need
-- to know which tables point at sports.
CREATE OR REPLACE PROCEDURE delete_sport(p_sport_id INT)
LANGUAGE plpgsql
AS $$
BEGIN
    UPDATE facilities SET sport_id = NULL WHERE sport_id = p_sport_id;
    DELETE FROM sports WHERE id = p_sport_id;
END;
$$;
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables and procedures.
    Safe to call multiple times (uses IF NOT EXISTS / OR REPLACE).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
