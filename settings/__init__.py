"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VOTING_DB_PATH", "voting.duckdb")

# Logging
LOG_DIR = Path(os.getenv("VOTING_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("VOTING_LOG_LEVEL", "INFO")

# Access control
PROPOSAL_CREATOR_ROLES = ("Admin", "Manager")
TALLY_ROLES = ("Admin", "Manager")
UNRESTRICTED_ROLES = ("Admin",)

# Tallying
TALLY_RULESET_VERSION = "v1"
