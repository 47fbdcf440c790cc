#!/usr/bin/env python3
"""
Constants and defaults shared across monopy
"""
# Imports:
from __future__ import annotations

import re
from typing import Final

__version__ : Final[str]                 = "0.1.0"

TOOL_TABLE          : Final[str]         = "monopy"
VENV_DIR            : Final[str]         = ".venv"
PYTEST_CACHE_DIR    : Final[str]         = ".pytest_cache"
BUILD_DIR           : Final[str]         = "build"
PYPROJECT           : Final[str]         = "pyproject.toml"
REQUIREMENTS        : Final[str]         = "requirements.txt"
SETUP_PY            : Final[str]         = "setup.py"
PYTEST_INI          : Final[str]         = "pytest.ini"
ROOT_MARKER         : Final[str]         = ".git"
REPORTS_ENV         : Final[str]         = "MONOPY_REPORTS_FOLDER"
REPORTS_VAR         : Final[str]         = "reports_folder"

PYENV_DIR           : Final[str]         = ".pyenv"
MIN_PYTHON          : Final[str]         = "3.9"

# Pytest's discovery convention
TEST_FILE_RE        : Final[re.Pattern]  = re.compile(r"(^test_.*|.*_test)\.py$")
UNIT_TEST_DIR       : Final[str]         = "unit_tests"
INTEGRATION_TEST_DIR: Final[str]         = "integration_tests"

PYTHON_LOG_PREFIX   : Final[str]         = "[python]"
TEMP_COVERAGE       : Final[str]         = "temp_coverage.xml"
COVERAGE_XML        : Final[str]         = "coverage.xml"

REPORT_FILES        : Final[dict[str, str]] = {
    "blackReport" : "black.diff",
    "isortReport" : "isort.diff",
    "flakeReport" : "flake.txt",
    "mypyReport"  : "mypy.log",
}

DEFAULT_PIP         : Final[list[str]]   = [
    "pip==21.3.1",
    "mccabe==0.6.1",
    # pyproject-flake8 pins the flake8 it can wrap
    "flake8==4.0.1",
    "pyproject-flake8==0.0.1a2",
    "black==22.3.0",
    "mypy==1.4.1",
    "isort==5.6.4",
    "pytest==6.2.5",
    "coverage[toml]==6.3.1",
]

LOCAL_REQS_EXTRAS   : Final[str]         = ".[dev,tests]"
MAIN_EXTRAS         : Final[str]         = ".[main]"
TEST_EXTRAS         : Final[str]         = ".[tests]"
