"""
Remote star cluster query against the SIMBAD TAP service.

The query is issued exactly once per build; there is no retry. Any
failure is reported as ``SimbadQueryError`` so the caller can decide how
fatal it is.
"""

import logging
from typing import Iterator, List, Optional

from astropy.table import Table
from astroquery.exceptions import TimeoutError as AstroqueryTimeoutError
from astroquery.simbad import Simbad

from .records import ClusterRow
from ..config import SIMBAD_MAX_ROWS, SIMBAD_STAR_CLUSTER_QUERY, SIMBAD_TIMEOUT_SECONDS
from ..exceptions import SimbadQueryError
from ..utils.io import safe_float, safe_int, safe_text

log = logging.getLogger(__name__)


def table_to_cluster_rows(table: Table) -> Iterator[ClusterRow]:
    """Convert the query result table into ClusterRow records, skipping rows without position."""
    for row in table:
        oid = safe_int(row['oid'])
        ra = safe_float(row['ra'])
        dec = safe_float(row['dec'])
        identifiers = safe_text(row['ids'])

        if oid is None or ra is None or dec is None or identifiers is None:
            log.debug(f"Skipping SIMBAD row without oid, position or identifiers: {oid}")
            continue

        yield ClusterRow(
            oid=oid,
            ra_deg=ra,
            dec_deg=dec,
            otype=safe_text(row['otype']) or '',
            identifiers=identifiers,
            pm_ra_mas=safe_float(row['pmra']),
            pm_dec_mas=safe_float(row['pmdec']),
            parallax_mas=safe_float(row['plx_value']),
            radial_velocity_kms=safe_float(row['rvz_radvel']),
            v_magnitude=safe_float(row['V']),
            b_magnitude=safe_float(row['B']),
            j_magnitude=safe_float(row['J']),
            h_magnitude=safe_float(row['H']),
        )


class SimbadClusterQuery:
    """
    Fetches open/globular clusters and stellar associations from SIMBAD.

    Instances are callables returning the rows, so the build pipeline can
    take any callable with the same shape in tests.
    """

    def __init__(self,
                 query: str = SIMBAD_STAR_CLUSTER_QUERY,
                 timeout: int = SIMBAD_TIMEOUT_SECONDS,
                 max_rows: int = SIMBAD_MAX_ROWS):
        self.query = query
        self.timeout = timeout
        self.max_rows = max_rows

    def __call__(self) -> List[ClusterRow]:
        """
        Run the query.

        Returns:
            Cluster rows in SIMBAD oid order

        Raises:
            SimbadQueryError: If the TAP query fails for any reason
        """
        log.info(f"Querying SIMBAD for star clusters (timeout={self.timeout}s, max rows={self.max_rows})")

        try:
            simbad = Simbad()
            simbad.TIMEOUT = self.timeout
            table: Optional[Table] = simbad.query_tap(self.query, maxrec=self.max_rows)
        except AstroqueryTimeoutError as e:
            log.warning(f"SIMBAD query timed out after {self.timeout}s")
            raise SimbadQueryError(f"SIMBAD star cluster query timed out: {e}") from e
        except Exception as e:
            raise SimbadQueryError(f"SIMBAD star cluster query failed: {e}") from e

        if table is None:
            raise SimbadQueryError("SIMBAD star cluster query returned no table")

        rows = list(table_to_cluster_rows(table))
        log.info(f"SIMBAD returned {len(table)} rows, {len(rows)} usable")

        if len(table) >= self.max_rows:
            log.warning(f"SIMBAD result reached the row limit ({self.max_rows}); clusters may be missing")

        return rows
