"""
Helpers shared by the API tests.
"""


def register(client, email, password="secret1", username=None):
    """Register a user through the API and return the response JSON."""
    payload = {"email": email, "password": password, "confirmPassword": password}
    if username is not None:
        payload["username"] = username
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
