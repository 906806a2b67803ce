from datetime import date

import pytest

from tmdb_api.discover import MovieDiscover, TVShowDiscover


def page_of(results):
    return {"page": 1, "results": results, "total_pages": 1, "total_results": len(results)}


@pytest.mark.asyncio
async def test_movie_discover(server, client):
    server.respond(
        page_of(
            [
                {
                    "id": 579974,
                    "title": "RRR",
                    "original_title": "రౌద్రం రణం రుధిరం",
                    "original_language": "te",
                    "release_date": "2022-03-24",
                    "genre_ids": [28, 18],
                    "vote_average": 7.8,
                    "vote_count": 1500,
                }
            ]
        )
    )

    command = MovieDiscover(
        with_origin_country="IN",
        with_original_language="te",
        sort_by="popularity.desc",
        vote_count_gte=100,
        with_runtime_gte=90,
        include_adult=False,
    )
    result = await command.execute(client)

    params = server.last_request.url.params
    assert server.last_request.url.path == "/discover/movie"
    assert params["with_origin_country"] == "IN"
    assert params["with_original_language"] == "te"
    assert params["vote_count.gte"] == "100"
    assert params["with_runtime.gte"] == "90"
    assert params["include_adult"] == "false"
    assert "vote_count_gte" not in params
    assert result.results[0].original_language == "te"


@pytest.mark.asyncio
async def test_tvshow_discover(server, client):
    server.respond(page_of([]))

    command = TVShowDiscover(
        with_networks="213",
        first_air_date_gte=date(2020, 1, 1),
        vote_average_gte=8,
    )
    result = await command.execute(client)

    params = server.last_request.url.params
    assert server.last_request.url.path == "/discover/tv"
    assert params["with_networks"] == "213"
    assert params["first_air_date.gte"] == "2020-01-01"
    assert params["vote_average.gte"] == "8.0"
    assert result.results == []
