"""Listing engine tests: pagination, sorting and search across list endpoints."""

from tests.conftest import API_KEY_HEADERS, create_recipe

TITLES = ["Banana Bread", "Apple Pie", "Date Squares", "Carrot Cake", "Egg Tart"]


def seed_recipes(client, headers):
    return {title: create_recipe(client, headers, title)["id"] for title in TITLES}


def titles(response):
    return [recipe["title"] for recipe in response.json()["data"]["data"]]


def test_pagination_metadata(client, auth_headers):
    seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?page=1&limit=2", headers=auth_headers)
    assert response.status_code == 200
    page = response.json()["data"]
    assert len(page["data"]) == 2
    assert page["metadata"] == {
        "total": 5,
        "page": 1,
        "limit": 2,
        "totalPages": 3,
        "hasNextPage": True,
        "hasPreviousPage": False,
    }

    response = client.get("/api/v1/recipes?page=3&limit=2", headers=auth_headers)
    page = response.json()["data"]
    assert titles(response) == ["Egg Tart"]
    assert page["metadata"]["hasNextPage"] is False
    assert page["metadata"]["hasPreviousPage"] is True


def test_page_past_the_end_is_empty(client, auth_headers):
    seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?page=9&limit=2", headers=auth_headers)
    assert response.status_code == 200
    page = response.json()["data"]
    assert page["data"] == []
    assert page["metadata"]["total"] == 5
    assert page["metadata"]["hasNextPage"] is False


def test_empty_listing(client, auth_headers):
    response = client.get("/api/v1/recipes", headers=auth_headers)
    metadata = response.json()["data"]["metadata"]
    assert metadata["total"] == 0
    assert metadata["totalPages"] == 0
    assert metadata["hasNextPage"] is False


def test_sort_a_z_and_z_a(client, auth_headers):
    seed_recipes(client, auth_headers)

    ascending = titles(client.get("/api/v1/recipes?sort=a-z", headers=auth_headers))
    descending = titles(client.get("/api/v1/recipes?sort=z-a", headers=auth_headers))
    assert ascending == sorted(TITLES)
    assert descending == list(reversed(ascending))


def test_sort_ties_are_stable(client, auth_headers):
    """Equal titles still order deterministically, and z-a mirrors a-z."""
    ids = [create_recipe(client, auth_headers, "Pancakes")["id"] for _ in range(3)]

    def listed_ids(sort):
        response = client.get(f"/api/v1/recipes?sort={sort}", headers=auth_headers)
        return [recipe["id"] for recipe in response.json()["data"]["data"]]

    assert listed_ids("a-z") == sorted(ids)
    assert listed_ids("z-a") == sorted(ids, reverse=True)


def test_sort_newest(client, auth_headers):
    ids = seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?sort=newest", headers=auth_headers)
    listed = [recipe["id"] for recipe in response.json()["data"]["data"]]
    assert listed == sorted(ids.values(), reverse=True)


def test_sort_latest(client, auth_headers):
    seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?sort=latest", headers=auth_headers)
    assert response.status_code == 200
    assert len(titles(response)) == 5


def test_unknown_sort_falls_back_to_a_z(client, auth_headers):
    seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?sort=by-rating", headers=auth_headers)
    assert response.status_code == 200
    assert titles(response) == sorted(TITLES)


def test_search_is_case_insensitive(client, auth_headers):
    seed_recipes(client, auth_headers)

    response = client.get("/api/v1/recipes?search=CAKE", headers=auth_headers)
    assert titles(response) == ["Carrot Cake"]
    assert response.json()["data"]["metadata"]["total"] == 1


def test_search_matches_description(client, auth_headers):
    create_recipe(client, auth_headers, "Morning Loaf", description="A quick rye bread")
    create_recipe(client, auth_headers, "Evening Stew", description="Slow cooked beans")

    response = client.get("/api/v1/recipes?search=rye", headers=auth_headers)
    assert titles(response) == ["Morning Loaf"]


def test_search_treats_wildcards_literally(client, auth_headers):
    seed_recipes(client, auth_headers)
    create_recipe(client, auth_headers, "100% Rye")

    response = client.get("/api/v1/recipes", params={"search": "%"}, headers=auth_headers)
    assert titles(response) == ["100% Rye"]

    response = client.get("/api/v1/recipes", params={"search": "_"}, headers=auth_headers)
    assert titles(response) == []


def test_search_total_counts_all_matches(client, auth_headers):
    for title in ("Tart One", "Tart Two", "Tart Three", "Soup"):
        create_recipe(client, auth_headers, title)

    response = client.get("/api/v1/recipes?search=tart&limit=2", headers=auth_headers)
    page = response.json()["data"]
    assert len(page["data"]) == 2
    assert page["metadata"]["total"] == 3
    assert page["metadata"]["totalPages"] == 2


def test_invalid_page_and_limit(client, auth_headers):
    for query in ("page=0", "page=-1", "limit=0", "limit=101", "page=abc"):
        response = client.get(f"/api/v1/recipes?{query}", headers=auth_headers)
        assert response.status_code == 400, query
        assert response.json()["status"] == "error"


def test_reference_data_listing(client, catalog):
    response = client.get("/api/v1/ingredients?sort=z-a", headers=API_KEY_HEADERS)
    assert response.status_code == 200
    names = [item["name"] for item in response.json()["data"]["data"]]
    assert names == ["sugar", "flour", "egg", "butter"]

    response = client.get("/api/v1/categories?search=FAST", headers=API_KEY_HEADERS)
    names = [item["name"] for item in response.json()["data"]["data"]]
    assert names == ["breakfast"]
