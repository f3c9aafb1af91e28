"""
Shared data paths for the loaders and the benchmark driver.

Assumed layout:
  PROJECT_ROOT/
    data/
      processed/
    socialgraph/
      common/
        config_paths.py
"""

import os

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, "..", ".."))

DATA_DIR = os.path.join(PROJECT_ROOT, "data")
DATA_PROCESSED = os.path.join(DATA_DIR, "processed")

# Default inputs for the file loaders
USERS_JSON = os.path.join(DATA_PROCESSED, "users.json")
FRIENDSHIPS_JSON = os.path.join(DATA_PROCESSED, "friendships.json")
EDGES_CSV = os.path.join(DATA_PROCESSED, "edges.csv")
