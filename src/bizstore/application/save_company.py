"""Application service: Save Company use case."""

from __future__ import annotations

import logging

from bizstore.domain.model.company import Company
from bizstore.domain.repository.company_repository import CompanyRepository

logger = logging.getLogger(__name__)


class SaveCompanyHandler:

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def handle(self, company: Company) -> None:
        """Write the whole company back.  StorageError propagates to the caller."""
        self._company_repo.save(company)
        logger.info("Saved %s to %s", company.name, self._company_repo.name)
