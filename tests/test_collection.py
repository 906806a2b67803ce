import pytest

from tmdb_api.collection import CollectionDetails, CollectionImages


@pytest.mark.asyncio
async def test_collection_details(server, client):
    server.respond(
        {
            "id": 10,
            "name": "Star Wars Collection",
            "overview": "An epic space-opera theatrical film series ...",
            "poster_path": "/r8Ph5MYXL04Qzu4QBbq2KjqwtkQ.jpg",
            "backdrop_path": "/d8duYyyC9J5T825Hg7grmaabfxQ.jpg",
            "parts": [
                {
                    "adult": False,
                    "backdrop_path": "/zqkmTXzjkAgXmEWLRsY4UpTWCeo.jpg",
                    "id": 11,
                    "title": "Star Wars",
                    "original_language": "en",
                    "original_title": "Star Wars",
                    "overview": "Princess Leia is captured ...",
                    "poster_path": "/6FfCtAuVAW8XJjZ7eWeLibRLWTw.jpg",
                    "media_type": "movie",
                    "genre_ids": [12, 28, 878],
                    "popularity": 86.1,
                    "release_date": "1977-05-25",
                    "video": False,
                    "vote_average": 8.2,
                    "vote_count": 20000,
                }
            ],
        }
    )

    result = await CollectionDetails(collection_id=10, language="en-US").execute(client)

    assert server.last_request.url.path == "/collection/10"
    assert server.last_request.url.params["language"] == "en-US"
    assert result.name == "Star Wars Collection"
    assert result.parts[0].title == "Star Wars"


@pytest.mark.asyncio
async def test_collection_images(server, client):
    server.respond(
        {
            "id": 10,
            "backdrops": [
                {
                    "aspect_ratio": 1.778,
                    "height": 1080,
                    "iso_639_1": None,
                    "file_path": "/d8duYyyC9J5T825Hg7grmaabfxQ.jpg",
                    "vote_average": 5.3,
                    "vote_count": 10,
                    "width": 1920,
                }
            ],
            "posters": [],
        }
    )

    result = await CollectionImages(collection_id=10, include_image_language=["en", "null"]).execute(client)

    assert server.last_request.url.path == "/collection/10/images"
    assert server.last_request.url.params["include_image_language"] == "en,null"
    assert result.backdrops[0].width == 1920
    assert result.posters == []
