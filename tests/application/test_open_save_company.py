"""Integration tests for the Open Company and Save Company use cases.

Uses the in-memory fake repository, no file I/O.
"""

from decimal import Decimal

import pytest

from bizstore.application.open_company import MISSING_NOTICE, OpenCompanyHandler
from bizstore.application.save_company import SaveCompanyHandler
from bizstore.domain.exceptions import StorageError
from bizstore.domain.model.company import Company
from bizstore.domain.model.employee import Employee
from tests.fakes import FakeCompanyRepository


class TestOpenCompany:

    def test_missing_store_gives_empty_company_named_after_store(self):
        repo = FakeCompanyRepository(name="acme")
        opened = OpenCompanyHandler(repo).handle()
        assert opened.company == Company(name="acme")
        assert opened.notice == MISSING_NOTICE

    def test_unreadable_store_falls_back_with_message(self):
        repo = FakeCompanyRepository(name="acme", load_error="Expecting value")
        opened = OpenCompanyHandler(repo).handle()
        assert opened.company == Company(name="acme")
        assert opened.notice == "Failed to load data: Expecting value"

    def test_empty_document_falls_back_silently(self):
        repo = FakeCompanyRepository(name="acme", empty=True)
        opened = OpenCompanyHandler(repo).handle()
        assert opened.company == Company(name="acme")
        assert opened.notice is None

    def test_opening_never_saves(self):
        repo = FakeCompanyRepository(name="acme")
        OpenCompanyHandler(repo).handle()
        assert repo.save_calls == 0

    def test_stored_company_returned_as_is(self):
        stored = Company(
            name="Acme Widgets Ltd",
            employees=[Employee("Ada", "ada@x.com", "555-1111", Decimal("91000.50"))],
        )
        repo = FakeCompanyRepository(stored, name="acme")
        opened = OpenCompanyHandler(repo).handle()
        assert opened.company == stored
        assert opened.company.name == "Acme Widgets Ltd"
        assert opened.notice is None


class TestSaveCompany:

    def test_saves_whole_company(self):
        repo = FakeCompanyRepository(name="acme")
        company = Company(name="acme")
        company.hire(Employee("Ada", "ada@x.com", "555-1111", Decimal("1")))
        SaveCompanyHandler(repo).handle(company)
        assert repo.stored == company
        assert repo.save_calls == 1

    def test_storage_error_propagates(self):
        repo = FakeCompanyRepository(name="acme", save_error="disk full")
        with pytest.raises(StorageError, match="disk full"):
            SaveCompanyHandler(repo).handle(Company(name="acme"))
        assert repo.save_calls == 1
