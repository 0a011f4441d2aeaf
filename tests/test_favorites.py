"""Favorite API tests."""

from src.models.favorite import Favorite
from src.models.recipe import Recipe
from tests.conftest import API_KEY_HEADERS, create_recipe


def test_add_favorite(client, auth_headers, other_headers):
    recipe = create_recipe(client, other_headers, "Lasagna")

    response = client.post(
        "/api/v1/favorites", headers=auth_headers, json={"recipeId": recipe["id"]}
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["userId"] == auth_headers.user_id
    assert data["recipeId"] == recipe["id"]
    assert data["recipe"]["title"] == "Lasagna"


def test_duplicate_favorite(client, db, auth_headers):
    """A recipe can be favorited once per user."""
    recipe = create_recipe(client, auth_headers, "Lasagna")
    client.post("/api/v1/favorites", headers=auth_headers, json={"recipeId": recipe["id"]})

    response = client.post(
        "/api/v1/favorites", headers=auth_headers, json={"recipeId": recipe["id"]}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Recipe already in favorites"
    assert db.query(Favorite).count() == 1


def test_same_recipe_different_users(client, db, auth_headers, other_headers):
    recipe = create_recipe(client, auth_headers, "Lasagna")
    for headers in (auth_headers, other_headers):
        response = client.post(
            "/api/v1/favorites", headers=headers, json={"recipeId": recipe["id"]}
        )
        assert response.status_code == 201
    assert db.query(Favorite).count() == 2


def test_favorite_unknown_recipe(client, db, auth_headers):
    response = client.post("/api/v1/favorites", headers=auth_headers, json={"recipeId": 99999})
    assert response.status_code == 404
    assert db.query(Favorite).count() == 0


def test_list_favorites(client, auth_headers, other_headers):
    """Only the current user's favorites are listed."""
    soup = create_recipe(client, auth_headers, "Soup")
    salad = create_recipe(client, auth_headers, "Salad")
    client.post("/api/v1/favorites", headers=auth_headers, json={"recipeId": soup["id"]})
    client.post("/api/v1/favorites", headers=auth_headers, json={"recipeId": salad["id"]})
    client.post("/api/v1/favorites", headers=other_headers, json={"recipeId": soup["id"]})

    response = client.get("/api/v1/favorites", headers=auth_headers)
    assert response.status_code == 200
    favorites = response.json()["data"]
    assert len(favorites) == 2
    assert {f["recipe"]["title"] for f in favorites} == {"Soup", "Salad"}
    assert all(f["userId"] == auth_headers.user_id for f in favorites)


def test_favorites_require_session(client):
    response = client.get("/api/v1/favorites", headers=API_KEY_HEADERS)
    assert response.status_code == 401


def test_delete_favorite(client, db, auth_headers):
    recipe = create_recipe(client, auth_headers, "Soup")
    favorite = client.post(
        "/api/v1/favorites", headers=auth_headers, json={"recipeId": recipe["id"]}
    ).json()["data"]

    response = client.delete(f"/api/v1/favorites/{favorite['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert db.query(Favorite).count() == 0
    assert db.query(Recipe).count() == 1


def test_cannot_delete_other_users_favorite(client, db, auth_headers, other_headers):
    recipe = create_recipe(client, auth_headers, "Soup")
    favorite = client.post(
        "/api/v1/favorites", headers=auth_headers, json={"recipeId": recipe["id"]}
    ).json()["data"]

    response = client.delete(f"/api/v1/favorites/{favorite['id']}", headers=other_headers)
    assert response.status_code == 404
    assert db.query(Favorite).count() == 1


def test_deleting_recipe_removes_favorites(client, db, auth_headers, other_headers):
    recipe = create_recipe(client, auth_headers, "Soup")
    client.post("/api/v1/favorites", headers=other_headers, json={"recipeId": recipe["id"]})

    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers)
    assert response.status_code == 200

    response = client.get("/api/v1/favorites", headers=other_headers)
    assert response.json()["data"] == []
