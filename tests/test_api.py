"""Tests for the Flask REST API."""
from datetime import datetime, timedelta, timezone

import pytest

from src.auth.rate_limit import RateLimiter
from src.auth.tokens import issue_token
from src.persistence.models import Job, User


def _register(client, email="new@example.com", password="SecurePass123!", name="New User"):
    return client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


def _add_jobs(session_factory, poster_id, rows):
    """Insert jobs directly; rows are (title, skills) pairs, oldest first."""
    session = session_factory()
    base = datetime(2026, 3, 1, tzinfo=timezone.utc)
    for i, (title, skills) in enumerate(rows):
        session.add(Job(
            title=title,
            description=f"{title} role",
            budget=1000 * (i + 1),
            skills=skills,
            posted_by_id=poster_id,
            created_at=base + timedelta(hours=i),
        ))
    session.commit()
    session.close()


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "OK"
        assert "timestamp" in response.get_json()

    def test_unknown_route_is_json(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert "message" in response.get_json()


class TestAuthRoutes:
    """Tests for /api/auth."""

    def test_register(self, client):
        response = _register(client)
        body = response.get_json()

        assert response.status_code == 201
        assert body["message"] == "User created successfully"
        assert body["token"]
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["skills"] == []
        assert "password_hash" not in body["user"]

    def test_register_duplicate(self, client):
        _register(client)
        response = _register(client)
        assert response.status_code == 400
        assert response.get_json()["message"] == "User already exists"

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "x@example.com"})
        assert response.status_code == 400

    def test_login(self, client):
        _register(client)
        response = client.post(
            "/api/auth/login",
            json={"email": "new@example.com", "password": "SecurePass123!"},
        )
        assert response.status_code == 200
        assert response.get_json()["message"] == "Login successful"

    def test_login_bad_password(self, client):
        _register(client)
        response = client.post(
            "/api/auth/login",
            json={"email": "new@example.com", "password": "nope-nope"},
        )
        assert response.status_code == 400
        assert response.get_json()["message"] == "Invalid credentials"

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.get_json()["message"] == "Access token required"

    def test_me_rejects_bad_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert response.get_json()["message"] == "Invalid token"

    def test_me(self, client, auth_headers, api_user):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json()["user"]["id"] == api_user.id

    def test_me_for_deleted_user(self, client):
        ghost = User(id="ghost", name="Ghost", email="ghost@example.com", password_hash="x")
        token = issue_token(ghost, secret="test-secret")
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 404

    def test_update_profile(self, client, auth_headers):
        response = client.put(
            "/api/auth/profile",
            headers=auth_headers,
            json={
                "bio": "Builder",
                "linkedinUrl": "https://linkedin.com/in/api",
                "skills": ["React", " ", "Rust"],
                "walletAddress": "wallet123",
            },
        )
        user = response.get_json()["user"]

        assert response.status_code == 200
        assert user["bio"] == "Builder"
        assert user["linkedinUrl"] == "https://linkedin.com/in/api"
        assert user["skills"] == ["React", "Rust"]
        assert user["walletAddress"] == "wallet123"
        assert user["name"] == "Api User"

    def test_public_profile_counts_views(self, client, api_user):
        client.get(f"/api/users/{api_user.id}")
        response = client.get(f"/api/users/{api_user.id}")
        user = response.get_json()["user"]

        assert user["profileViews"] == 2
        assert "email" not in user

    def test_login_rate_limited(self, api_session_factory):
        from src.api.app import create_app

        app = create_app(
            session_factory=api_session_factory,
            rate_limiter=RateLimiter(max_requests=2, window_seconds=60),
            jwt_secret="test-secret",
        )
        client = app.test_client()
        payload = {"email": "x@example.com", "password": "whatever1"}

        client.post("/api/auth/login", json=payload)
        client.post("/api/auth/login", json=payload)
        response = client.post("/api/auth/login", json=payload)

        assert response.status_code == 429
        assert "Retry-After" in response.headers


class TestJobRoutes:
    """Tests for /api/jobs."""

    def test_create_job(self, client, auth_headers, api_user):
        response = client.post(
            "/api/jobs",
            headers=auth_headers,
            json={
                "title": "Rust Engineer",
                "description": "Build validators",
                "budget": 7000,
                "location": "Remote",
                "skills": ["Rust", "Solana"],
                "jobType": "contract",
                "experienceLevel": "senior",
                "paymentTxHash": "tx-sig",
            },
        )
        job = response.get_json()["job"]

        assert response.status_code == 201
        assert response.get_json()["message"] == "Job posted successfully"
        assert job["jobType"] == "contract"
        assert job["experienceLevel"] == "senior"
        assert job["paymentTxHash"] == "tx-sig"
        assert job["postedBy"]["name"] == "Api User"
        assert job["status"] == "active"

    def test_create_job_requires_auth(self, client):
        response = client.post("/api/jobs", json={"title": "x"})
        assert response.status_code == 401

    def test_create_job_invalid_type(self, client, auth_headers):
        response = client.post(
            "/api/jobs",
            headers=auth_headers,
            json={"title": "T", "description": "D", "budget": 1, "jobType": "gig"},
        )
        assert response.status_code == 400

    def test_list_jobs(self, client, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [
            ("Old", ["Python"]),
            ("Mid", ["React"]),
            ("New", ["Go"]),
        ])

        response = client.get("/api/jobs?limit=2&page=1")
        body = response.get_json()

        assert response.status_code == 200
        assert [j["title"] for j in body["jobs"]] == ["New", "Mid"]
        assert body["total"] == 3
        assert body["page"] == 1
        assert body["totalPages"] == 2

    def test_list_jobs_filters(self, client, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [
            ("Python Dev", ["Python"]),   # budget 1000
            ("React Dev", ["React"]),     # budget 2000
        ])

        assert client.get("/api/jobs?search=react").get_json()["total"] == 1
        assert client.get("/api/jobs?minBudget=1500").get_json()["jobs"][0]["title"] == "React Dev"
        assert client.get("/api/jobs?skills=pyth").get_json()["total"] == 1

    def test_get_job(self, client, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [("Only", ["Go"])])
        job_id = client.get("/api/jobs").get_json()["jobs"][0]["id"]

        response = client.get(f"/api/jobs/{job_id}")
        assert response.status_code == 200
        assert response.get_json()["job"]["title"] == "Only"

    def test_get_missing_job(self, client):
        response = client.get("/api/jobs/missing")
        assert response.status_code == 404
        assert response.get_json()["message"] == "Job not found"

    def test_apply(self, client, auth_headers, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [("Only", ["Go"])])
        job_id = client.get("/api/jobs").get_json()["jobs"][0]["id"]

        response = client.post(f"/api/jobs/{job_id}/apply", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json()["job"]["applicants"] == 1

    def test_recommendations_without_skills(self, client, auth_headers, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [("React Dev", ["React"])])

        response = client.get("/api/jobs/recommendations", headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json() == {"recommendations": []}

    def test_recommendations(self, client, auth_headers, api_user, api_session_factory):
        _add_jobs(api_session_factory, api_user.id, [
            ("Fullstack", ["React", "Node.js", "SQL"]),
            ("Frontend", ["React", "CSS"]),
            ("Backend", ["Go", "SQL", "Docker"]),
        ])
        client.put("/api/auth/profile", headers=auth_headers, json={"skills": ["React", "Node.js"]})

        response = client.get("/api/jobs/recommendations", headers=auth_headers)
        recs = response.get_json()["recommendations"]

        assert [(r["title"], r["matchScore"]) for r in recs] == [("Fullstack", 67), ("Frontend", 50)]
        assert recs[0]["reason"] == "Matches 67% of your skills"

    def test_recommendations_require_auth(self, client):
        assert client.get("/api/jobs/recommendations").status_code == 401


class TestPostRoutes:
    """Tests for /api/posts."""

    def test_create_and_list(self, client, auth_headers):
        created = client.post("/api/posts", headers=auth_headers, json={"content": "gm"})
        assert created.status_code == 201
        assert created.get_json()["post"]["author"]["name"] == "Api User"

        posts = client.get("/api/posts").get_json()["posts"]
        assert [p["content"] for p in posts] == ["gm"]

    def test_create_empty_post(self, client, auth_headers):
        response = client.post("/api/posts", headers=auth_headers, json={"content": ""})
        assert response.status_code == 400

    def test_like_comment_share(self, client, auth_headers):
        post_id = client.post(
            "/api/posts", headers=auth_headers, json={"content": "gm"}
        ).get_json()["post"]["id"]

        liked = client.post(f"/api/posts/{post_id}/like", headers=auth_headers).get_json()
        assert liked["message"] == "Post liked"
        assert liked["post"]["likes"] == 1

        commented = client.post(
            f"/api/posts/{post_id}/comments", headers=auth_headers, json={"content": "gn"}
        )
        assert commented.status_code == 201
        assert commented.get_json()["post"]["comments"][0]["content"] == "gn"

        shared = client.post(f"/api/posts/{post_id}/share", headers=auth_headers).get_json()
        assert shared["post"]["shares"] == 1

    def test_like_missing_post(self, client, auth_headers):
        response = client.post("/api/posts/missing/like", headers=auth_headers)
        assert response.status_code == 404
        assert response.get_json()["message"] == "Post not found"


class TestExtractSkillsRoute:
    """Tests for /api/ai/extract-skills."""

    def test_extract(self, client, auth_headers):
        response = client.post(
            "/api/ai/extract-skills",
            headers=auth_headers,
            json={"text": "I know Python and React"},
        )
        assert response.status_code == 200
        assert response.get_json() == {
            "skills": ["Python", "React"],
            "message": "Extracted 2 skills",
        }

    @pytest.mark.parametrize(
        "payload",
        [{}, {"text": ""}, {"text": None}, {"text": 42}, ["python"], "python"],
    )
    def test_missing_text(self, client, auth_headers, payload):
        response = client.post("/api/ai/extract-skills", headers=auth_headers, json=payload)
        assert response.status_code == 400
        assert response.get_json()["message"] == "Text is required"

    def test_requires_auth(self, client):
        response = client.post("/api/ai/extract-skills", json={"text": "python"})
        assert response.status_code == 401


class TestServerErrors:
    def test_unexpected_error_is_generic_500(self, app, client, auth_headers):
        from unittest.mock import patch

        with patch("src.api.routes.posts.PostService.list_posts", side_effect=RuntimeError("boom")):
            response = client.get("/api/posts")

        assert response.status_code == 500
        assert response.get_json() == {"message": "Server error"}
