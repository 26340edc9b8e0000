"""Build metadata, populated from the environment at packaging time."""

import os
import platform

__version__ = "0.1.0"

REVISION = os.getenv("TLSREQUESTS_REVISION", "")
BRANCH = os.getenv("TLSREQUESTS_BRANCH", "")
BUILD_USER = os.getenv("TLSREQUESTS_BUILD_USER", "")
BUILD_DATE = os.getenv("TLSREQUESTS_BUILD_DATE", "")
PYTHON_VERSION = platform.python_version()


def info_context() -> str:
    """Return version, branch and revision information."""
    return f"(version={__version__}, branch={BRANCH}, revision={REVISION})"


def build_context() -> str:
    """Return python version, build user and build date information."""
    return f"(python={PYTHON_VERSION}, user={BUILD_USER}, date={BUILD_DATE})"


def print_info() -> str:
    return f"VERSION: {info_context()}\nBUILD: {build_context()}"
