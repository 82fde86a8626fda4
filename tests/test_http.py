import io

import requests
import responses

from battlecity.client.http import HttpClient, HttpResponse

URL = "http://localhost:18080/map"


def test_get_success_reports_and_calls_back():
    out = io.StringIO()
    seen = []
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="hello", status=200)
        result = HttpClient(output=out).get(URL, seen.append)
    assert result == HttpResponse(200, "hello")
    assert seen == [result]
    assert out.getvalue() == "GET request successful!\n"


def test_get_failure_reports_status():
    out = io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body="missing", status=404)
        result = HttpClient(output=out).get(URL)
    assert result.status_code == 404
    assert result.text == "missing"
    assert out.getvalue() == "GET request failed with status code: 404\n"


def test_post_created_counts_as_success_and_sends_body():
    out = io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, URL, body="ok", status=201)
        result = HttpClient(output=out).post(URL, '{"a":1}')
        sent = rsps.calls[0].request.body
    assert result == HttpResponse(201, "ok")
    assert sent == b'{"a":1}'
    assert out.getvalue() == "POST request successful!\n"


def test_post_failure_reports_status_and_calls_back():
    out = io.StringIO()
    seen = []
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, URL, body="boom", status=500)
        HttpClient(output=out).post(URL, "{}", seen.append)
    assert [r.status_code for r in seen] == [500]
    assert out.getvalue() == "POST request failed with status code: 500\n"


def test_unreachable_server_gives_status_zero():
    out = io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("refused"))
        result = HttpClient(output=out).get(URL)
    assert result.status_code == 0
    assert "refused" in result.error
    assert out.getvalue() == "GET request failed with status code: 0\n"