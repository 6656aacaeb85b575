# config.py
import os

# ======= Grid / bitmask width =======
# 4 x 4 x 4 = 64 cells fits one machine word.  Python ints are unbounded, so
# raising this only relaxes the guard; the bitmask code does not change.
MAX_CELLS = int(os.getenv("SOMA_MAX_CELLS", "64"))

# ======= Placement precomputation =======
DEDUP_PLACEMENTS = int(os.getenv("SOMA_DEDUP_PLACEMENTS", "0")) != 0

# ======= Search reporting =======
# "every": one report per search leaf (same board reached in another insertion
# order is reported again).  "distinct": one report per piece assignment.
REPORT_MODE    = os.getenv("SOMA_REPORT", "every").strip().lower()
PROGRESS_EVERY = int(os.getenv("SOMA_PROGRESS_EVERY", "1000"))

# ======= Output =======
USE_COLOR = int(os.getenv("SOMA_COLOR", "1")) != 0 and "NO_COLOR" not in os.environ
LOG_LEVEL = os.getenv("SOMA_LOG_LEVEL", "WARNING").upper()

REPORT_MODES = ("every", "distinct")


class CFG:
    MAX_CELLS = MAX_CELLS

    DEDUP_PLACEMENTS = DEDUP_PLACEMENTS

    REPORT_MODE    = REPORT_MODE
    PROGRESS_EVERY = PROGRESS_EVERY

    USE_COLOR = USE_COLOR
    LOG_LEVEL = LOG_LEVEL


__all__ = ["CFG", "REPORT_MODES"]
