"""
SQLite persistence for the object database.

The store is write-once per build: ``create()`` removes any previous file,
rows are only ever added with ``INSERT OR IGNORE`` and ``finalize()``
indexes and compacts the result for the read-only consumers.
"""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional, Tuple

from ..catalogs.taxonomy import CatalogType, SkyObjectType
from ..config import NAMES_TABLE, OBJECTS_TABLE, SQLITE_JOURNAL_MODE
from ..data.records import SkyObject
from ..exceptions import StoreError

log = logging.getLogger(__name__)

# Column names are read as-is by the viewer application
SCHEMA = (
    f"""
    CREATE TABLE IF NOT EXISTS {OBJECTS_TABLE} (
        id INTEGER PRIMARY KEY,
        objectType INTEGER NOT NULL,
        ra REAL NOT NULL,
        dec REAL NOT NULL,
        magnitude REAL NOT NULL,
        pmRa REAL NOT NULL DEFAULT 0,
        pmDec REAL NOT NULL DEFAULT 0,
        distance INTEGER NOT NULL DEFAULT 0,
        rv REAL NOT NULL DEFAULT 0,
        constellation INTEGER NOT NULL,
        spectralType TEXT
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS {NAMES_TABLE} (
        objectId INTEGER NOT NULL,
        catalogType INTEGER NOT NULL,
        name TEXT NOT NULL COLLATE NOCASE,
        PRIMARY KEY (objectId, catalogType, name),
        FOREIGN KEY (objectId) REFERENCES {OBJECTS_TABLE}(id)
    ) WITHOUT ROWID
    """,
)

INDEXES = (
    f"CREATE INDEX IF NOT EXISTS idx_names_type_name ON {NAMES_TABLE}(catalogType, name)",
    f"CREATE INDEX IF NOT EXISTS idx_objects_type ON {OBJECTS_TABLE}(objectType)",
    f"CREATE INDEX IF NOT EXISTS idx_objects_magnitude ON {OBJECTS_TABLE}(magnitude)",
    f"CREATE INDEX IF NOT EXISTS idx_objects_constellation ON {OBJECTS_TABLE}(constellation)",
)

_OBJECT_COLUMNS = 'id, objectType, ra, dec, magnitude, pmRa, pmDec, distance, rv, constellation, spectralType'


class SkyObjectStore:
    """
    Writer for the ``objects`` and ``names`` tables.

    Names are written as soon as they are found, possibly before their
    object row exists, so foreign keys are declared but not enforced.
    """

    def __init__(self, database_path: str):
        self.database_path = database_path
        self.conn: Optional[sqlite3.Connection] = None

    def create(self) -> 'SkyObjectStore':
        """
        Create an empty database, deleting any file already at the path.

        Raises:
            StoreError: If the file cannot be removed or the database created
        """
        path = Path(self.database_path)

        try:
            if not path.parent.exists():
                path.parent.mkdir(parents=True)

            for stale in (path, Path(f"{path}-wal"), Path(f"{path}-shm")):
                if stale.exists():
                    stale.unlink()
                    log.debug(f"Removed previous database file: {stale}")

            self.conn = sqlite3.connect(str(path))
            mode = self.conn.execute(f'PRAGMA journal_mode = {SQLITE_JOURNAL_MODE}').fetchone()[0]
            if mode.upper() != SQLITE_JOURNAL_MODE:
                log.warning(f"SQLite refused journal mode {SQLITE_JOURNAL_MODE}, using {mode}")

            for statement in SCHEMA:
                self.conn.execute(statement)
            self.conn.commit()

        except (OSError, sqlite3.Error) as e:
            log.error(f"Failed to create database {self.database_path}: {e}")
            self.close()
            raise StoreError(f"Cannot create database {self.database_path}: {e}") from e

        log.info(f"Created database: {self.database_path}")
        return self

    def open_existing(self) -> 'SkyObjectStore':
        """
        Connect to a database built earlier, for inspection.

        Raises:
            StoreError: If there is no database at the path
        """
        if not Path(self.database_path).is_file():
            raise StoreError(f"Database not found: {self.database_path}")
        try:
            self.conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open database {self.database_path}: {e}") from e
        return self

    def _connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise StoreError("Database connection is closed")
        return self.conn

    def insert_object(self, sky_object: SkyObject) -> bool:
        """Insert an object row; returns False when the id already exists."""
        try:
            cursor = self._connection().execute(
                f"INSERT OR IGNORE INTO {OBJECTS_TABLE}({_OBJECT_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    sky_object.id,
                    int(sky_object.object_type),
                    sky_object.ra,
                    sky_object.dec,
                    sky_object.magnitude,
                    sky_object.pm_ra,
                    sky_object.pm_dec,
                    sky_object.distance,
                    sky_object.rv,
                    sky_object.constellation,
                    sky_object.spectral_type,
                ),
            )
        except sqlite3.Error as e:
            raise StoreError(f"Failed to insert object {sky_object.id}: {e}") from e
        return cursor.rowcount > 0

    def insert_name(self, object_id: int, catalog_type: CatalogType, name: str) -> bool:
        """Insert a name row; returns False when the triple already exists (case-insensitively)."""
        try:
            cursor = self._connection().execute(
                f"INSERT OR IGNORE INTO {NAMES_TABLE}(objectId, catalogType, name) VALUES (?, ?, ?)",
                (object_id, int(catalog_type), name),
            )
        except sqlite3.Error as e:
            raise StoreError(f"Failed to insert name {name!r} for object {object_id}: {e}") from e
        return cursor.rowcount > 0

    def find_object_id(self, catalog_type: CatalogType, name: str) -> Optional[int]:
        """Id of an object carrying the designation, or None."""
        row = self._connection().execute(
            f"SELECT objectId FROM {NAMES_TABLE} WHERE catalogType = ? AND name = ? ORDER BY objectId LIMIT 1",
            (int(catalog_type), name),
        ).fetchone()
        return row[0] if row else None

    def fetch_object(self, object_id: int) -> Optional[SkyObject]:
        row = self._connection().execute(
            f"SELECT {_OBJECT_COLUMNS} FROM {OBJECTS_TABLE} WHERE id = ?", (object_id,)
        ).fetchone()
        if row is None:
            return None
        return SkyObject(
            id=row[0],
            object_type=SkyObjectType(row[1]),
            ra=row[2],
            dec=row[3],
            magnitude=row[4],
            pm_ra=row[5],
            pm_dec=row[6],
            distance=row[7],
            rv=row[8],
            constellation=row[9],
            spectral_type=row[10],
        )

    def fetch_names(self, object_id: int) -> List[Tuple[CatalogType, str]]:
        """All (catalog, name) pairs of an object, ordered by catalog then name."""
        rows = self._connection().execute(
            f"SELECT catalogType, name FROM {NAMES_TABLE} WHERE objectId = ? ORDER BY catalogType, name",
            (object_id,),
        ).fetchall()
        return [(CatalogType(catalog_type), name) for catalog_type, name in rows]

    def count_objects(self) -> int:
        return self._connection().execute(f"SELECT COUNT(*) FROM {OBJECTS_TABLE}").fetchone()[0]

    def count_names(self) -> int:
        return self._connection().execute(f"SELECT COUNT(*) FROM {NAMES_TABLE}").fetchone()[0]

    def commit(self) -> None:
        try:
            self._connection().commit()
        except sqlite3.Error as e:
            raise StoreError(f"Commit failed: {e}") from e

    def finalize(self) -> None:
        """Commit, create the lookup indexes, fold the WAL back and compact the file."""
        conn = self._connection()
        try:
            conn.commit()
            for statement in INDEXES:
                conn.execute(statement)
            conn.commit()
            conn.execute('PRAGMA wal_checkpoint(TRUNCATE)')
            conn.execute('VACUUM')
        except sqlite3.Error as e:
            raise StoreError(f"Failed to finalize database {self.database_path}: {e}") from e

        log.info(f"Database finalized: {self.count_objects()} objects, {self.count_names()} names")

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None
            log.debug("Database connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with proper cleanup."""
        self.close()
