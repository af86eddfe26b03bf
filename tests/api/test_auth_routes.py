"""
API tests for authentication endpoints.
Tests registration, login, and profile retrieval.
"""

import pytest

from fastapi import status


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    @pytest.mark.asyncio
    async def test_register_success(self, test_client, token_service):
        """Test successful user registration."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "fullName": "New User",
                "email": "newuser@example.com",
                "password": "securepassword123",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["email"] == "newuser@example.com"
        assert data["fullName"] == "New User"
        assert data["type"] == "Bearer"
        assert data["role"] == "USER"
        assert isinstance(data["id"], int)
        assert token_service.is_valid(data["token"], "newuser@example.com")

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, test_client, alice):
        """Test registration with existing email fails."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "fullName": "Another Alice",
                "email": alice.email,
                "password": "newpassword123",
            },
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        data = response.json()
        assert data["status"] == 409
        assert data["message"] == f"Email {alice.email} is already registered"

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, test_client):
        """Test registration with invalid email format."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "fullName": "Someone",
                "email": "not-an-email",
                "password": "password123",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "email" in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_register_short_password(self, test_client):
        """Test registration with too short password."""
        response = await test_client.post(
            "/api/auth/register",
            json={
                "fullName": "Someone",
                "email": "user@example.com",
                "password": "short",  # Less than 6 characters
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "password" in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_register_blank_name(self, test_client):
        response = await test_client.post(
            "/api/auth/register",
            json={
                "fullName": "   ",
                "email": "user@example.com",
                "password": "password123",
            },
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "fullName" in response.json()["errors"]

    @pytest.mark.asyncio
    async def test_register_missing_fields(self, test_client):
        response = await test_client.post("/api/auth/register", json={"email": "user@example.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "Validation Failed"
        assert {"fullName", "password"} <= set(data["errors"])


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    @pytest.mark.asyncio
    async def test_login_success(self, test_client, alice, token_service):
        """Test successful login."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": alice.email, "password": "alicepass"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == alice.id
        assert data["fullName"] == "Alice Adams"
        assert token_service.get_subject(data["token"]) == alice.email

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, test_client, alice):
        """Test login with wrong password."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": alice.email, "password": "wrongpassword"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_login_nonexistent_user(self, test_client):
        """Test login with non-existent email gives the same answer as a wrong password."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": "nonexistent@example.com", "password": "password123"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_login_ignores_bad_token(self, test_client, alice):
        """Public endpoints don't care about a broken Authorization header."""
        response = await test_client.post(
            "/api/auth/login",
            json={"email": alice.email, "password": "alicepass"},
            headers={"Authorization": "Bearer garbage"},
        )

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_registered_user_can_login(self, test_client):
        await test_client.post(
            "/api/auth/register",
            json={"fullName": "Carol Chen", "email": "carol@example.com", "password": "carolpass"},
        )

        response = await test_client.post(
            "/api/auth/login",
            json={"email": "carol@example.com", "password": "carolpass"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["fullName"] == "Carol Chen"


class TestMeEndpoint:
    """Tests for GET /api/auth/me."""

    @pytest.mark.asyncio
    async def test_get_me_success(self, test_client, alice, alice_headers):
        """Test getting current user profile."""
        response = await test_client.get("/api/auth/me", headers=alice_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Logged in as: Alice Adams"
        assert data["id"] == alice.id
        assert data["email"] == alice.email
        assert data["role"] == "USER"
        assert data["authorities"] == ["ROLE_USER"]

    @pytest.mark.asyncio
    async def test_get_me_unauthorized(self, test_client):
        """Test getting profile without authentication."""
        response = await test_client.get("/api/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
