import pytest

from kmdb.dto import GenreDTO
from kmdb.errors import DuplicateResource, NotFound, ValidationFailed
from kmdb.models import db
from kmdb.models.genre import Genre
from kmdb.models.movie import Movie


def test_create_and_get_genre(genre_service, make_genre):
    genre = make_genre("Horror")

    assert genre_service.get_genre(genre.id) == GenreDTO(id=genre.id, name="Horror")


def test_create_genre_allows_duplicate_names(make_genre):
    first = make_genre("Drama")
    second = make_genre("Drama")

    assert first.id != second.id


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_genre_rejects_blank_name(genre_service, name):
    with pytest.raises(ValidationFailed, match="Genre name cannot be empty or blank."):
        genre_service.create_genre(GenreDTO(name=name))


def test_find_genres_by_exact_name(genre_service, make_genre):
    make_genre("Drama")
    make_genre("Docudrama")

    assert [g.name for g in genre_service.find_genres_by_name("Drama")] == ["Drama"]
    assert genre_service.find_genres_by_name("drama") == []


def test_list_genres_rejects_negative_page(genre_service):
    with pytest.raises(ValidationFailed, match="page number can't be < 0"):
        genre_service.list_genres(-1, 10)


def test_update_genre(genre_service, make_genre):
    genre = make_genre("Drama")

    assert genre_service.update_genre(genre.id, GenreDTO(name="Thriller")).name == "Thriller"


def test_update_genre_checks_name_before_lookup(genre_service):
    with pytest.raises(ValidationFailed):
        genre_service.update_genre(99, GenreDTO(name=" "))
    with pytest.raises(NotFound, match="Genre not found with id: 99"):
        genre_service.update_genre(99, GenreDTO(name="Thriller"))


def test_delete_genre_in_use_reports_movie_count(genre_service, make_actor, make_genre, make_movie):
    actor = make_actor()
    genre = make_genre("Sci-Fi")
    movie = make_movie(title="Nova", actor_ids=[actor.id], genre_ids=[genre.id])

    with pytest.raises(DuplicateResource) as excinfo:
        genre_service.delete_genre(genre.id, force=False)
    assert str(excinfo.value) == "Cannot delete genre 'Sci-Fi' because it is associated with 1 movie(s)."

    genre_service.delete_genre(genre.id, force=True)

    assert db.session.get(Genre, genre.id) is None
    assert db.session.get(Movie, movie.id).genres == []
    assert [a.id for a in db.session.get(Movie, movie.id).actors] == [actor.id]


def test_delete_unused_genre_with_or_without_force(genre_service, make_genre):
    for force in (False, True):
        genre = make_genre()
        genre_service.delete_genre(genre.id, force=force)
        assert db.session.get(Genre, genre.id) is None
