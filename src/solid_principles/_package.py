"""Package metadata and naming constants."""

PACKAGE_NAME = "solid-principles"
PACKAGE_NAME_SHORT = "solid"
__version__ = "0.1.0"
DESCRIPTION = (
    "SOLID object-oriented design principles illustrated through small "
    "capability-based examples"
)

# Derived values
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
ENV_PREFIX = PACKAGE_NAME_SHORT.upper() + "_"
