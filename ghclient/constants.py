# Entrius 2025
from pathlib import Path

# =============================================================================
# GitHub API
# =============================================================================
BASE_GITHUB_API_URL = "https://api.github.com"
# GitHub rejects requests without a User-Agent
USER_AGENT = "github.com/ghclient/ghclient-py"
JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# Milestone listing filters
# =============================================================================
MILESTONE_STATE_FILTERS = ('open', 'closed', 'all')
TITLE_LOOKUP_STATE_FILTER = 'all'

# =============================================================================
# Configuration
# =============================================================================
GITHUB_TOKEN_ENV = 'GITHUB_TOKEN'
GHCLIENT_DIR = Path.home() / '.ghclient'
CONFIG_FILE = GHCLIENT_DIR / 'config.json'
