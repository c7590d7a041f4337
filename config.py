# config.py
import os

# ======= Grid defaults =======
DEFAULT_SIZE = int(os.getenv("NET_DEFAULT_SIZE", "5"))

# ======= Random generation =======
# A negative seed leaves the generator unseeded (fresh entropy per run).
RANDOM_SEED = int(os.getenv("NET_RANDOM_SEED", "-1"))

# ======= Solver reporting =======
# Number of tried orientations between two progress updates.
PROGRESS_EVERY = int(os.getenv("NET_PROGRESS_EVERY", "5000"))
LOG_SOLVER     = int(os.getenv("NET_LOG_SOLVER", "1")) != 0

# ======= Output names =======
SAVE_DIR     = os.getenv("NET_SAVE_DIR", "")
SOLUTION_OUT = os.getenv("NET_SOLUTION_OUT", "solution.txt")

class CFG:
    DEFAULT_SIZE = DEFAULT_SIZE

    RANDOM_SEED = RANDOM_SEED

    PROGRESS_EVERY = PROGRESS_EVERY
    LOG_SOLVER     = LOG_SOLVER

    SAVE_DIR     = SAVE_DIR
    SOLUTION_OUT = SOLUTION_OUT

__all__ = ["CFG", "DEFAULT_SIZE"]
