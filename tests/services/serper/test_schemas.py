from services.serper.constants import GL_UNITED_STATES, HL_CHINESE, HL_ENGLISH
from services.serper.schemas import (
    ErrorEnvelope,
    ImageResponse,
    OrganicResult,
    PlacesResponse,
    Request,
    SearchResponse,
)


def test_request_payload_only_has_q_by_default():
    assert Request(q="python").to_payload() == {"q": "python"}


def test_request_payload_keeps_empty_query():
    assert Request(q="").to_payload() == {"q": ""}


def test_request_payload_drops_zero_values():
    request = Request(q="python", gl="", hl=None, num=0, autocorrect=False, page=0, safe="")
    assert request.to_payload() == {"q": "python"}


def test_request_payload_includes_set_fields():
    request = Request(
        q="python",
        gl=GL_UNITED_STATES,
        hl=HL_ENGLISH,
        num=20,
        autocorrect=True,
        page=2,
        type="search",
        location="Austin, Texas, United States",
        tbs="qdr:w",
        safe="active",
    )
    assert request.to_payload() == {
        "q": "python",
        "gl": "us",
        "hl": "en",
        "num": 20,
        "autocorrect": True,
        "page": 2,
        "type": "search",
        "location": "Austin, Texas, United States",
        "tbs": "qdr:w",
        "safe": "active",
    }


def test_request_decodes_back_from_payload():
    request = Request(q="python", gl="de", hl=HL_CHINESE, num=5, tbs="qdr:d")
    assert Request.model_validate(request.to_payload()) == request


def test_request_str_hides_unset_fields():
    assert str(Request(q="python", num=5)) == "Request(q='python', num=5)"


def test_search_response_missing_fields_take_defaults():
    resp = SearchResponse.model_validate_json("{}")

    assert resp.credits == 0
    assert resp.search_parameters.q == ""
    assert resp.organic == []
    assert resp.knowledge_graph is None
    assert resp.people_also_ask is None
    assert resp.related_searches is None


def test_search_response_optional_sections():
    resp = SearchResponse.model_validate(
        {
            "searchParameters": {"q": "apple", "gl": "us", "hl": "en", "autocorrect": True, "engine": "google"},
            "credits": 1,
            "knowledgeGraph": {
                "title": "Apple",
                "type": "Technology company",
                "imageUrl": "https://img.test/apple.png",
                "descriptionSource": "Wikipedia",
                "attributes": {"Founded": "April 1, 1976", "Employees": 164000},
            },
            "organic": [
                {
                    "title": "Apple",
                    "link": "https://www.apple.com",
                    "position": 1,
                    "sitelinks": [{"title": "Support", "link": "https://support.apple.com"}],
                }
            ],
            "peopleAlsoAsk": [{"question": "Who owns Apple?", "snippet": "...", "title": "t", "link": "l"}],
            "relatedSearches": [{"query": "apple stock"}],
        }
    )

    assert resp.search_parameters.autocorrect is True
    assert resp.knowledge_graph is not None
    assert resp.knowledge_graph.image_url == "https://img.test/apple.png"
    assert resp.knowledge_graph.description_source == "Wikipedia"
    assert resp.knowledge_graph.attributes == {"Founded": "April 1, 1976", "Employees": 164000}
    assert resp.organic[0].sitelinks[0].title == "Support"
    assert resp.organic[0].attributes is None
    assert resp.people_also_ask[0].question == "Who owns Apple?"
    assert [r.query for r in resp.related_searches] == ["apple stock"]


def test_empty_knowledge_graph_is_an_object():
    resp = SearchResponse.model_validate({"knowledgeGraph": {}})
    assert resp.knowledge_graph is not None
    assert resp.knowledge_graph.title == ""


def test_results_keep_upstream_order():
    positions = [3, 1, 2]
    resp = SearchResponse.model_validate({"organic": [{"title": str(p), "position": p} for p in positions]})
    assert [r.position for r in resp.organic] == positions


def test_camel_case_wire_names():
    images = ImageResponse.model_validate(
        {
            "images": [
                {
                    "title": "Logo",
                    "imageUrl": "https://img.test/a.png",
                    "imageWidth": 640,
                    "imageHeight": 480,
                    "thumbnailUrl": "https://img.test/t.png",
                    "googleUrl": "https://google.test/imgres",
                }
            ]
        }
    )
    places = PlacesResponse.model_validate(
        {"places": [{"title": "Cafe", "latitude": 55, "rating": 4.5, "ratingCount": 42, "phoneNumber": "+45 1234"}]}
    )

    image = images.images[0]
    assert (image.image_width, image.image_height) == (640, 480)
    assert image.google_url == "https://google.test/imgres"

    place = places.places[0]
    assert place.latitude == 55.0
    assert place.longitude == 0.0
    assert place.rating_count == 42
    assert place.phone_number == "+45 1234"


def test_snake_case_names_are_accepted():
    result = OrganicResult(title="Docs", link="https://docs.python.org")
    assert str(result) == "Docs (https://docs.python.org)"
    assert PlacesResponse(places=[{"rating_count": 3}]).places[0].rating_count == 3


def test_error_envelope():
    assert ErrorEnvelope.model_validate_json('{"message": "Not enough credits"}').message == "Not enough credits"
    assert ErrorEnvelope.model_validate_json('{"error": "x"}').message == ""


def test_null_decodes_like_missing_key():
    resp = SearchResponse.model_validate_json(
        '{"searchParameters": null, "credits": null, "organic": [{"title": null, "sitelinks": null}],'
        ' "relatedSearches": null}'
    )

    assert resp.search_parameters.q == ""
    assert resp.credits == 0
    assert resp.organic[0].title == ""
    assert resp.organic[0].sitelinks is None
    assert resp.related_searches is None
