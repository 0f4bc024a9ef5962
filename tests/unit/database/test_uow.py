#!/usr/bin/env python3
"""
Unit tests for the catalog unit of work.
"""

import unittest

from database.models import InternshipPost
from database.uow import catalog_uow
from tests import make_sqlite_engine, make_session_factory


class TestCatalogUnitOfWork(unittest.TestCase):

    def setUp(self):
        self.engine = make_sqlite_engine()
        self.SessionLocal = make_session_factory(self.engine)

    def tearDown(self):
        self.engine.dispose()

    def count_rows(self):
        session = self.SessionLocal()
        try:
            return session.query(InternshipPost).count()
        finally:
            session.close()

    def test_commits_on_success(self):
        with catalog_uow(self.SessionLocal) as repos:
            repos.internships.create({"title": "T", "org_name": "O", "sector": "IT"})

        self.assertEqual(self.count_rows(), 1)

    def test_rolls_back_on_error(self):
        with self.assertRaises(RuntimeError):
            with catalog_uow(self.SessionLocal) as repos:
                repos.internships.create({"title": "T", "org_name": "O", "sector": "IT"})
                raise RuntimeError("boom")

        self.assertEqual(self.count_rows(), 0)

    def test_repositories_share_one_session(self):
        with catalog_uow(self.SessionLocal) as repos:
            self.assertIs(repos.internships.db, repos.profiles.db)
            self.assertIs(repos.internships.db, repos.applications.db)


if __name__ == '__main__':
    unittest.main()
