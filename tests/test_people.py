from datetime import date

import pytest

from tmdb_api.people import (
    KnownForMovie,
    KnownForTVShow,
    PersonDetails,
    PersonExternalIds,
    PersonImages,
    PersonMovieCredits,
    PersonPopular,
    PersonSearch,
    PersonTVCredits,
)

PERSON = {
    "adult": False,
    "gender": 2,
    "id": 287,
    "known_for_department": "Acting",
    "name": "Brad Pitt",
    "original_name": "Brad Pitt",
    "popularity": 50.4,
    "profile_path": "/cckcYc2v0yh1tc9QjRelptcOBko.jpg",
}

KNOWN_FOR = [
    {
        "adult": False,
        "backdrop_path": "/hZkgoQYus5vegHoetLkCJzb17zJ.jpg",
        "id": 550,
        "title": "Fight Club",
        "original_language": "en",
        "original_title": "Fight Club",
        "overview": "A ticking-time-bomb insomniac ...",
        "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "media_type": "movie",
        "genre_ids": [18],
        "popularity": 61.4,
        "release_date": "1999-10-15",
        "video": False,
        "vote_average": 8.4,
        "vote_count": 26280,
    },
    {
        "adult": False,
        "id": 4546,
        "name": "Friends",
        "original_language": "en",
        "original_name": "Friends",
        "media_type": "tv",
        "first_air_date": "1994-09-22",
        "origin_country": ["US"],
    },
]


@pytest.mark.asyncio
async def test_person_details(server, client):
    server.respond(
        {
            **PERSON,
            "also_known_as": ["William Bradley Pitt"],
            "biography": "William Bradley Pitt is an American actor ...",
            "birthday": "1963-12-18",
            "deathday": None,
            "homepage": None,
            "imdb_id": "nm0000093",
            "place_of_birth": "Shawnee, Oklahoma, USA",
        }
    )

    result = await PersonDetails(person_id=287).execute(client)

    assert server.last_request.url.path == "/person/287"
    assert result.name == "Brad Pitt"
    assert result.birthday == date(1963, 12, 18)
    assert result.deathday is None
    assert result.also_known_as == ["William Bradley Pitt"]


@pytest.mark.asyncio
async def test_person_movie_credits(server, client):
    movie = {k: v for k, v in KNOWN_FOR[0].items() if k != "media_type"}
    server.respond(
        {
            "id": 287,
            "cast": [{**movie, "character": "Tyler Durden", "credit_id": "52fe4250c3a36847f80149f7", "order": 1}],
            "crew": [{**movie, "id": 1422, "credit_id": "52fe43c4c3a368484e", "department": "Production", "job": "Producer"}],
        }
    )

    result = await PersonMovieCredits(person_id=287).execute(client)

    assert server.last_request.url.path == "/person/287/movie_credits"
    assert result.cast[0].character == "Tyler Durden"
    assert result.crew[0].job == "Producer"


@pytest.mark.asyncio
async def test_person_tv_credits(server, client):
    show = {k: v for k, v in KNOWN_FOR[1].items() if k != "media_type"}
    server.respond(
        {
            "id": 287,
            "cast": [{**show, "character": "Will Colbert", "credit_id": "525710bf760ee3776a1a", "episode_count": 1}],
            "crew": [],
        }
    )

    result = await PersonTVCredits(person_id=287, language="en-US").execute(client)

    assert server.last_request.url.path == "/person/287/tv_credits"
    assert result.cast[0].episode_count == 1
    assert result.cast[0].name == "Friends"


@pytest.mark.asyncio
async def test_person_external_ids(server, client):
    server.respond(
        {
            "id": 287,
            "freebase_mid": "/m/0c6qh",
            "imdb_id": "nm0000093",
            "tvrage_id": 59436,
            "wikidata_id": "Q35332",
            "facebook_id": None,
            "instagram_id": "bradpittofflcial",
            "tiktok_id": None,
            "twitter_id": None,
            "youtube_id": None,
        }
    )

    result = await PersonExternalIds(person_id=287).execute(client)

    assert server.last_request.url.path == "/person/287/external_ids"
    assert result.tvrage_id == 59436
    assert result.tiktok_id is None


@pytest.mark.asyncio
async def test_person_images(server, client):
    server.respond(
        {
            "id": 287,
            "profiles": [
                {
                    "aspect_ratio": 0.667,
                    "height": 1500,
                    "iso_639_1": None,
                    "file_path": "/cckcYc2v0yh1tc9QjRelptcOBko.jpg",
                    "vote_average": 5.3,
                    "vote_count": 17,
                    "width": 1000,
                }
            ],
        }
    )

    result = await PersonImages(person_id=287).execute(client)

    assert server.last_request.url.path == "/person/287/images"
    assert result.profiles[0].width == 1000


@pytest.mark.asyncio
async def test_person_search_known_for_is_typed_by_media_type(server, client):
    server.respond(
        {
            "page": 1,
            "results": [{**PERSON, "known_for": KNOWN_FOR}],
            "total_pages": 1,
            "total_results": 1,
        }
    )

    result = await PersonSearch(query="brad pitt").execute(client)

    assert server.last_request.url.path == "/search/person"
    assert server.last_request.url.params["query"] == "brad pitt"
    movie, show = result.results[0].known_for
    assert isinstance(movie, KnownForMovie)
    assert movie.title == "Fight Club"
    assert isinstance(show, KnownForTVShow)
    assert show.first_air_date == date(1994, 9, 22)


@pytest.mark.asyncio
async def test_person_popular(server, client):
    server.respond({"page": 2, "results": [PERSON], "total_pages": 500, "total_results": 10000})

    result = await PersonPopular(page=2).execute(client)

    assert server.last_request.url.path == "/person/popular"
    assert server.last_request.url.params["page"] == "2"
    assert result.results[0].known_for == []
    assert result.total_pages == 500
