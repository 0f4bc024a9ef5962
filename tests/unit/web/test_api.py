#!/usr/bin/env python3
"""
Unit tests for the web API against an in-memory database.
"""

import uuid
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from core.config_loader import AppConfig, ScorerConfig
from web.backend.app import app
from web.backend.dependencies import get_db
from tests import make_sqlite_engine, make_session_factory


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.engine = make_sqlite_engine()
        SessionLocal = make_session_factory(self.engine)

        def override_get_db():
            session = SessionLocal()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def create_internship(self, **overrides):
        body = {
            "title": "Data Analyst Intern",
            "org_name": "FinServ",
            "sector": "IT Sector",
            "city": "Mumbai",
            "required_skills": ["Python", "SQL"],
            "application_url": "https://example.com/apply",
        }
        body.update(overrides)
        response = self.client.post("/api/admin/internships", json=body)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["internship"]

    def create_profile(self, email="asha@example.com"):
        response = self.client.post("/api/profiles", json={"full_name": "Asha Rao", "email": email})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["profile"]


class TestRecommendationsApi(ApiTestCase):

    def test_health(self):
        self.assertEqual(self.client.get("/health").json()["status"], "healthy")

    def test_options(self):
        data = self.client.get("/api/options").json()
        self.assertIn("IT Sector", data["sectors"])
        self.assertIn("Python", data["skills"])
        self.assertEqual(data["remote_option"], "Remote")

    def test_options_follow_configured_remote_sentinel(self):
        config = AppConfig(scorer=ScorerConfig(remote_sentinel="Anywhere"))
        with patch("web.backend.routers.recommendations.get_config", return_value=config):
            data = self.client.get("/api/options").json()
        self.assertEqual(data["remote_option"], "Anywhere")

    def test_ranked_recommendations(self):
        self.create_internship()
        self.create_internship(title="Design Intern", org_name="Studio", sector="Media",
                               city="Delhi", required_skills=["Figma"])
        self.create_internship(title="Hidden Intern", org_name="Old", sector="IT Sector",
                               required_skills=["Python"], active=False)

        response = self.client.post("/api/recommendations", json={
            "sectors": ["IT Sector"],
            "skills": ["Python"],
            "custom_skills": "Excel,",
            "preferred_locations": ["Mumbai"],
        })

        self.assertEqual(response.status_code, 200, response.text)
        data = response.json()
        self.assertFalse(data["fallback"])
        self.assertEqual(data["count"], 2)
        top = data["recommendations"][0]
        self.assertEqual(top["title"], "Data Analyst Intern")
        self.assertEqual(top["score"], 45)
        self.assertEqual(top["matched_skills"], ["Python"])
        self.assertNotIn("Hidden Intern", [r["title"] for r in data["recommendations"]])

    def test_fallback_flag(self):
        self.create_internship()
        response = self.client.post("/api/recommendations", json={"skills": ["Welding"]})

        data = response.json()
        self.assertTrue(data["fallback"])
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["recommendations"][0]["score"], 0)

    def test_empty_catalog(self):
        data = self.client.post("/api/recommendations", json={}).json()
        self.assertEqual(data["count"], 0)
        self.assertFalse(data["fallback"])


class TestApplicationsApi(ApiTestCase):

    def test_apply_twice_is_idempotent(self):
        internship = self.create_internship()
        profile = self.create_profile()
        body = {"user_id": profile["id"], "internship_id": internship["id"]}

        first = self.client.post("/api/applications", json=body).json()
        second = self.client.post("/api/applications", json=body).json()

        self.assertTrue(first["created"])
        self.assertFalse(second["created"])
        self.assertEqual(first["application"]["id"], second["application"]["id"])

        mine = self.client.get(f"/api/users/{profile['id']}/applications").json()
        self.assertEqual(mine["count"], 1)
        self.assertEqual(mine["applications"][0]["internship_title"], "Data Analyst Intern")

    def test_apply_unknown_internship(self):
        profile = self.create_profile()
        response = self.client.post("/api/applications", json={
            "user_id": profile["id"], "internship_id": str(uuid.uuid4())
        })
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "InternshipNotFoundException")

    def test_invalid_uuid(self):
        response = self.client.get("/api/users/not-a-uuid/applications")
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])


class TestProfilesApi(ApiTestCase):

    def test_create_get_update(self):
        profile = self.create_profile()

        fetched = self.client.get(f"/api/profiles/{profile['id']}").json()["profile"]
        self.assertEqual(fetched["email"], "asha@example.com")
        self.assertEqual(fetched["role"], "student")

        updated = self.client.put(f"/api/profiles/{profile['id']}", json={"degree": "B.Tech"}).json()
        self.assertEqual(updated["profile"]["degree"], "B.Tech")
        self.assertEqual(updated["profile"]["full_name"], "Asha Rao")

    def test_duplicate_email(self):
        self.create_profile()
        response = self.client.post("/api/profiles", json={"full_name": "Other", "email": "asha@example.com"})
        self.assertEqual(response.status_code, 409)

    def test_duplicate_provider_id(self):
        user_id = str(uuid.uuid4())
        first = self.client.post("/api/profiles", json={"id": user_id, "full_name": "Asha Rao", "email": "asha@example.com"})
        self.assertEqual(first.status_code, 201, first.text)

        second = self.client.post("/api/profiles", json={"id": user_id, "full_name": "Asha Rao", "email": "asha.rao@example.com"})

        self.assertEqual(second.status_code, 409)
        self.assertEqual(second.json()["type"], "DuplicateProfileException")
        self.assertEqual(self.client.get(f"/api/profiles/{user_id}").json()["profile"]["email"], "asha@example.com")

    def test_missing_profile(self):
        response = self.client.get(f"/api/profiles/{uuid.uuid4()}")
        self.assertEqual(response.status_code, 404)


class TestAdminApi(ApiTestCase):

    def test_update_and_delete_internship(self):
        internship = self.create_internship()

        response = self.client.put(f"/api/admin/internships/{internship['id']}", json={"active": False})
        self.assertFalse(response.json()["internship"]["active"])
        self.assertEqual(response.json()["internship"]["title"], "Data Analyst Intern")

        listed = self.client.get("/api/admin/internships", params={"active_only": True}).json()
        self.assertEqual(listed["count"], 0)

        response = self.client.delete(f"/api/admin/internships/{internship['id']}")
        self.assertTrue(response.json()["success"])
        response = self.client.delete(f"/api/admin/internships/{internship['id']}")
        self.assertEqual(response.status_code, 404)

    def test_stipend_range_validated(self):
        response = self.client.post("/api/admin/internships", json={
            "title": "T", "org_name": "O", "stipend_min": 20000, "stipend_max": 10000
        })
        self.assertEqual(response.status_code, 422)

    def test_update_cannot_invert_stipend_range(self):
        internship = self.create_internship(stipend_min=1000, stipend_max=2000)
        url = f"/api/admin/internships/{internship['id']}"

        response = self.client.put(url, json={"stipend_min": 5000})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "InvalidInternshipException")

        listed = self.client.get("/api/admin/internships").json()["internships"][0]
        self.assertEqual((listed["stipend_min"], listed["stipend_max"]), (1000, 2000))

        response = self.client.put(url, json={"stipend_min": 1500, "stipend_max": None})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["internship"]["stipend_min"], 1500)
        self.assertIsNone(response.json()["internship"]["stipend_max"])

    def test_csv_import(self):
        self.create_internship(title="Software Engineer Intern", org_name="TechCorp")
        csv_text = (
            "title,sector,orgName,requiredSkills,remote,active\n"
            "Software Engineer Intern,Technology,TechCorp,Python;React,false,true\n"
            "Data Analyst Intern,Finance,FinServ,Excel;SQL,true,true\n"
            ",Finance,NoTitle,Excel,false,true\n"
        )

        response = self.client.post(
            "/api/admin/internships/import",
            files={"file": ("internships.csv", csv_text, "text/csv")}
        )

        self.assertEqual(response.status_code, 200, response.text)
        data = response.json()
        self.assertEqual(data["inserted"], 1)
        self.assertEqual(len(data["skipped_duplicates"]), 1)
        self.assertEqual(data["errors"][0]["row"], 3)

    def test_csv_import_without_valid_rows(self):
        response = self.client.post(
            "/api/admin/internships/import",
            files={"file": ("bad.csv", "title,orgName\n,\n", "text/csv")}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "CsvImportException")

    def test_csv_import_non_finite_stipend(self):
        csv_text = "title,sector,orgName,stipendMin\nA,IT,Org,inf\nB,IT,Org,1000\n"

        response = self.client.post(
            "/api/admin/internships/import",
            files={"file": ("internships.csv", csv_text, "text/csv")}
        )

        self.assertEqual(response.status_code, 200, response.text)
        data = response.json()
        self.assertEqual(data["inserted"], 1)
        self.assertEqual(data["errors"][0]["row"], 1)

    def test_users_overview_and_delete(self):
        internship = self.create_internship()
        self.create_internship(title="Closed", org_name="Old", active=False)
        profile = self.create_profile()
        self.client.post("/api/applications", json={"user_id": profile["id"], "internship_id": internship["id"]})

        stats = self.client.get("/api/admin/overview").json()["stats"]
        self.assertEqual(stats, {
            "total_internships": 2,
            "active_internships": 1,
            "total_users": 1,
            "student_users": 1,
            "total_applications": 1,
        })

        users = self.client.get("/api/admin/users").json()
        self.assertEqual(users["count"], 1)

        recent = self.client.get("/api/admin/applications/recent").json()
        self.assertEqual(recent["applications"][0]["user_name"], "Asha Rao")

        self.assertTrue(self.client.delete(f"/api/admin/users/{profile['id']}").json()["success"])
        stats = self.client.get("/api/admin/overview").json()["stats"]
        self.assertEqual(stats["total_users"], 0)
        self.assertEqual(stats["total_applications"], 0)


if __name__ == '__main__':
    unittest.main()
