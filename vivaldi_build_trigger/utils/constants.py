"""Shared constants used across the application."""

# GitHub Constants
# ----------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API URL."""

GITHUB_REST_API_VERSION = "2022-11-28"
"""GitHub REST API version sent in the X-GitHub-Api-Version header of every request."""

DEFAULT_REPO = "Aldaviva/VivaldiCustomLauncher"
"""Repository whose workflows are monitored and dispatched."""

DEFAULT_WORKFLOW_FILE = "build.yml"
"""Workflow file that builds and tests the launcher."""

DEFAULT_WORKFLOW_REF = "master"
"""Branch the build workflow is dispatched against."""

BUILD_STATUS_PAGE_SIZE = 10
"""Number of most recent workflow runs inspected when checking for a running build."""

RUN_DURATIONS_PAGE_SIZE = 100
"""Page size used when paging through historical workflow runs."""

# Vivaldi Constants
# -----------------

SPARKLE_NAMESPACE = "http://www.andymatuschak.org/xml-namespaces/sparkle"
"""XML namespace of the Sparkle appcast attributes."""

DEFAULT_TEST_DATA_URL = "https://raw.githubusercontent.com/Aldaviva/VivaldiCustomLauncher/master/Tests/Data"
"""Directory holding the Vivaldi versions the test suite was last verified against."""

# HTTP Client Constants
# ---------------------

MAX_CONNECTIONS_PER_SERVER = 16
"""Upper bound on concurrent connections held by each HTTP client."""

DEFAULT_TIMEOUT_SECONDS = 100.0
"""Timeout applied to every outgoing HTTP request."""

CONTACT = "+mailto:ben@aldaviva.com"
"""Contact appended to the User-Agent header."""
