"""Common literal values used across docsite_config.

These constants keep file locations and schema markers centralized so the
loader, resolver, CLI, and tests can import the same values without drifting.
Intended for internal use within the docsite_config package.

Examples
--------
>>> from docsite_config import _constants
>>> _constants.LOCALE_CODE_PATTERN.fullmatch("pt-BR") is not None
True
>>> _constants.EDIT_LINK_PLACEHOLDER
':path'
"""

import re
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config/site.yaml")
DEFAULT_DOCS_ROOT = Path("docs")

LOCALE_CODE_PATTERN = re.compile(r"[a-z]{2}(-[A-Z]{2})?")
ROOT_LOCALE_LINK = "/"
EDIT_LINK_PLACEHOLDER = ":path"
EXTERNAL_LINK_PREFIXES = ("http://", "https://", "mailto:", "tel:", "//")
PAGE_SUFFIXES = (".md", ".html")
