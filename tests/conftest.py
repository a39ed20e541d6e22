"""Shared fixtures for the site configuration tests.

``raw_config`` returns a fresh two-locale mapping on every call so tests may
mutate it freely before handing it to :func:`docsite_config.config.load`.
``shipped_config_path`` points at the repository's own ``config/site.yaml``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]


def build_raw_config() -> dict[str, typ.Any]:
    """Return a minimal but complete ``es``/``en`` configuration mapping."""
    return {
        "title": "Docs",
        "description": "Team documentation",
        "ignoreDeadLinks": False,
        "locales": {
            "es": {
                "label": "Español",
                "lang": "es",
                "link": "/es/",
                "title": "Documentación",
                "themeConfig": {
                    "siteTitle": "Docs",
                    "nav": [
                        {"text": "Inicio", "link": "/es/"},
                        {"text": "Guías", "link": "/es/guides/"},
                    ],
                    "sidebar": {
                        "/es/guides/": [
                            {
                                "text": "Guías",
                                "items": [
                                    {"text": "Setup", "link": "/es/guides/setup"},
                                ],
                            }
                        ]
                    },
                    "search": {
                        "provider": "local",
                        "options": {
                            "locales": {
                                "es": {
                                    "translations": {
                                        "button": {
                                            "buttonText": "Buscar",
                                            "buttonAriaLabel": "Buscar",
                                        },
                                        "modal": {
                                            "noResultsText": "Sin resultados",
                                            "resetButtonTitle": "Limpiar",
                                            "footer": {
                                                "selectText": "Seleccionar",
                                                "navigateText": "Navegar",
                                                "closeText": "Cerrar",
                                            },
                                        },
                                    }
                                }
                            }
                        },
                    },
                    "editLink": {
                        "pattern": "https://example.invalid/edit/main/docs/:path",
                        "text": "Editar",
                    },
                    "outlineTitle": "En esta página",
                },
            },
            "en": {
                "label": "English",
                "lang": "en",
                "link": "/en/",
                "themeConfig": {
                    "nav": [
                        {"text": "Guides", "link": "/en/guides/"},
                        {"text": "GitHub", "link": "https://github.com/example"},
                    ],
                    "sidebar": {
                        "/en/guides/": [
                            {
                                "text": "Guides",
                                "collapsed": False,
                                "items": [
                                    {"text": "Setup", "link": "/en/guides/setup"},
                                    {
                                        "text": "Advanced",
                                        "collapsed": True,
                                        "items": [
                                            {
                                                "text": "Tuning",
                                                "link": "/en/guides/advanced/tuning",
                                            }
                                        ],
                                    },
                                ],
                            }
                        ]
                    },
                    "search": {"provider": "local"},
                    "socialLinks": [{"icon": "github", "link": "https://github.com/example"}],
                },
            },
        },
        "markdown": {"lineNumbers": True},
    }


@pytest.fixture
def raw_config() -> dict[str, typ.Any]:
    """Return a fresh, mutable two-locale configuration mapping."""
    return build_raw_config()


@pytest.fixture
def shipped_config_path() -> Path:
    """Return the path of the repository's ``config/site.yaml``."""
    return REPO_ROOT / "config" / "site.yaml"
