"""Application service: Open Company use case.

Loads the company from its store.  A missing or unreadable store is never
fatal: the operator gets a notice and an empty company named after the
store.  An unreadable file is left untouched until the next save.  An
empty (null) document gives the same company without a notice.
"""

from __future__ import annotations

import logging

from bizstore.application.dto import OpenedCompanyDTO
from bizstore.domain.exceptions import EntityNotFoundError, StorageError
from bizstore.domain.model.company import Company
from bizstore.domain.repository.company_repository import CompanyRepository

logger = logging.getLogger(__name__)

MISSING_NOTICE = "File does not exist. Creating a new company data file."


class OpenCompanyHandler:

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def handle(self) -> OpenedCompanyDTO:
        try:
            company = self._company_repo.load()
        except EntityNotFoundError:
            logger.info("No stored data for %s, starting empty", self._company_repo.name)
            return OpenedCompanyDTO(company=self._fresh(), notice=MISSING_NOTICE)
        except StorageError as exc:
            logger.warning("Could not load %s: %s", self._company_repo.name, exc)
            return OpenedCompanyDTO(
                company=self._fresh(), notice=f"Failed to load data: {exc}"
            )

        if company is None:
            logger.info("Stored data for %s is empty, starting empty", self._company_repo.name)
            return OpenedCompanyDTO(company=self._fresh())

        logger.info(
            "Loaded %s (%d employees, %d customers)",
            company.name,
            len(company.employees),
            len(company.customers),
        )
        return OpenedCompanyDTO(company=company)

    def _fresh(self) -> Company:
        return Company(name=self._company_repo.name)
