def create_genre(client, name="Sci-Fi"):
    return client.post("/api/genres", json={"name": name})


def test_create_and_read_genre(client):
    genre = create_genre(client).get_json()

    response = client.get(f"/api/genres/{genre['id']}")

    assert response.status_code == 200
    assert response.get_json()["name"] == "Sci-Fi"
    assert response.get_json()["_links"]["movies"] == f"/api/movies?genre={genre['id']}"


def test_create_genre_with_blank_name(client):
    response = create_genre(client, name="   ")

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Validation failed: name - Name can not be blank; "


def test_list_genres_defaults_to_ten_per_page(client):
    for i in range(12):
        create_genre(client, name=f"Genre {i}")

    body = client.get("/api/genres").get_json()

    assert body["size"] == 10
    assert len(body["items"]) == 10
    assert body["total_pages"] == 2


def test_find_genre_by_name(client):
    create_genre(client, name="Horror")

    assert [g["name"] for g in client.get("/api/genres?name=Horror").get_json()] == ["Horror"]
    assert client.get("/api/genres?name=Comedy").get_json() == []


def test_patch_genre(client):
    genre_id = create_genre(client).get_json()["id"]

    assert client.patch(f"/api/genres/{genre_id}", json={"name": "Horror"}).get_json()["name"] == "Horror"
    assert client.patch(f"/api/genres/{genre_id}", json={"name": ""}).status_code == 400
    assert client.patch("/api/genres/500", json={"name": "Horror"}).status_code == 404


def test_delete_genre_referenced_by_movie(client):
    genre_id = create_genre(client).get_json()["id"]
    client.post("/api/movies", json={"title": "Nova", "releaseYear": 1999, "duration": 90, "genreIds": [genre_id]})

    response = client.delete(f"/api/genres/{genre_id}?force=false")

    assert response.status_code == 400
    assert response.get_data(as_text=True) == (
        "Cannot delete genre 'Sci-Fi' because it is associated with 1 movie(s)."
    )

    assert client.delete(f"/api/genres/{genre_id}?force=true").status_code == 204
    assert client.get(f"/api/movies?genre={genre_id}").status_code == 404
    movie = client.get("/api/movies/search?title=Nova").get_json()[0]
    assert "genreIds" not in movie


def test_genre_page_past_the_end_is_empty(client):
    create_genre(client)

    body = client.get(f"/api/genres?page={10**30}").get_json()

    assert body["items"] == []
    assert body["count"] == 1


def test_delete_unknown_genre_ignores_unreadable_force_flag(client):
    response = client.delete("/api/genres/8?force=maybe")

    assert response.status_code == 404
    assert response.get_data(as_text=True) == "Genre not found with id: 8"
