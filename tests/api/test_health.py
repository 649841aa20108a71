"""
Tests for the health check and root endpoints.
"""


def test_health_check_returns_200(client):
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    """
    The service field is parsed by monitoring; a rename
    would break it.
    """
    data = client.get("/health").json()
    assert data["service"] == "financial-statements"
    assert data["status"] == "healthy"


def test_root_returns_banner(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "API de Estados Financieros"
