"""Abstract repository for the Company aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The whole aggregate is read and written as one unit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bizstore.domain.model.company import Company


class CompanyRepository(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Base name of the store, used to name a company created from scratch."""

    @abstractmethod
    def load(self) -> Company | None:
        """Return the stored company, or None if the stored document is empty.

        Raises EntityNotFoundError if nothing is stored yet, StorageError
        if the stored data cannot be read.
        """

    @abstractmethod
    def save(self, company: Company) -> None:
        """Replace the stored company.  Raises StorageError on failure."""
