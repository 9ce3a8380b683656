"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from bizstore.infrastructure.config import get_settings
from bizstore.infrastructure.persistence.json_company_repository import (
    JsonCompanyRepository,
)


def store_path(file_name: str) -> Path:
    """Map the name typed at startup to the data file.

    Only a missing canonical extension is added; any other extension is
    kept, so ``acme.txt`` becomes ``acme.txt.dat``.
    """
    extension = get_settings().store_extension
    if not file_name.endswith(extension):
        file_name += extension
    return Path(file_name)


def company_repository(file_name: str) -> JsonCompanyRepository:
    return JsonCompanyRepository(store_path(file_name))
