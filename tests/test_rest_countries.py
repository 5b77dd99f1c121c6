from unittest import mock

import pytest
import requests

from countrytable.gateways.rest_countries import CountriesFetchError, RestCountries
from countrytable.services.country_list import Country


def fake_response(payload=None, status_code=200, json_error=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def requests_get():
    with mock.patch("countrytable.gateways.rest_countries.requests.get") as get:
        yield get


def test_list_countries_parses_v2_payload(requests_get, country_payload, countries):
    requests_get.return_value = fake_response(country_payload)

    result = RestCountries.list_countries(endpoint_url="https://example.test/all", timeout=3)

    assert result == countries
    requests_get.assert_called_once_with(
        "https://example.test/all", timeout=3, headers={"Accept": "application/json"}
    )


def test_list_countries_uses_configured_endpoint(requests_get):
    requests_get.return_value = fake_response([])
    RestCountries.set_endpoint_url("https://mirror.test/v2/all")
    RestCountries.set_timeout(2.5)
    try:
        RestCountries.list_countries()
    finally:
        RestCountries.set_endpoint_url(None)
        RestCountries.set_timeout(None)

    assert requests_get.call_args.args[0] == "https://mirror.test/v2/all"
    assert requests_get.call_args.kwargs["timeout"] == 2.5


def test_parse_v3_shape():
    item = {
        "name": {"common": "Norway", "official": "Kingdom of Norway"},
        "population": 5379475,
        "area": 323802.0,
        "gini": {"2018": 27.6, "2019": 27.7},
    }

    assert RestCountries.parse_country(item) == Country("Norway", 5379475, 323802.0, 27.7)


def test_parse_missing_fields():
    assert RestCountries.parse_country({"name": "Heard Island"}) == Country("Heard Island", 0, None, None)


def test_records_without_name_are_skipped():
    payload = [{"population": 3}, {"name": ""}, "junk", {"name": "Malta", "population": 525285}]

    assert RestCountries.parse_countries(payload) == [Country("Malta", 525285)]


def test_http_error_raises_fetch_error(requests_get):
    requests_get.return_value = fake_response(status_code=500)

    with pytest.raises(CountriesFetchError, match="failed"):
        RestCountries.list_countries()


def test_connection_error_raises_fetch_error(requests_get):
    requests_get.side_effect = requests.ConnectionError("no route to host")

    with pytest.raises(CountriesFetchError, match="no route to host"):
        RestCountries.list_countries()


def test_invalid_json_raises_fetch_error(requests_get):
    requests_get.return_value = fake_response(json_error=ValueError("Expecting value"))

    with pytest.raises(CountriesFetchError, match="not valid JSON"):
        RestCountries.list_countries()


def test_non_list_json_raises_fetch_error(requests_get):
    requests_get.return_value = fake_response({"status": 404, "message": "Not Found"})

    with pytest.raises(CountriesFetchError, match="JSON array"):
        RestCountries.list_countries()
