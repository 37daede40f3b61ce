"""Constants shared across the artifact domain."""

DATA_BAG = "artifact"
NEXUS_DBI = "nexus"

WILDCARD_ENVIRONMENT = "*"
LATEST_VERSION = "latest"

CURRENT_LINK_NAME = "current"

REDIRECT_PATH = "/nexus/service/local/artifact/maven/redirect"
RESOLVE_PATH = "/nexus/service/local/artifact/maven/resolve"
