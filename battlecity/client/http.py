"""Blocking HTTP requests with a result callback."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, TextIO

import requests

_NETWORK_FAILURE = 0


@dataclass(frozen=True)
class HttpResponse:
    """Status and body of a finished request.

    A request that never reached the server has status 0 and the reason
    in ``error``.
    """

    status_code: int
    text: str = ""
    error: str = ""


ResponseCallback = Callable[[HttpResponse], None]


class HttpClient:
    """Sends GET and POST requests, reports the outcome and hands the reply on."""

    def __init__(
        self,
        session: requests.Session | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _send(self, method: str, url: str, data: str | None) -> HttpResponse:
        body = data.encode("utf-8") if data is not None else None
        try:
            reply = self.session.request(method, url, data=body)
        except requests.RequestException as exc:
            return HttpResponse(_NETWORK_FAILURE, "", str(exc))
        return HttpResponse(reply.status_code, reply.text)

    def get(self, url: str, callback: ResponseCallback | None = None) -> HttpResponse:
        """Send a GET request; report it and pass the reply to ``callback``."""
        response = self._send("GET", url, None)
        if response.status_code == 200:
            self.output.write("GET request successful!\n")
        else:
            self.output.write(
                f"GET request failed with status code: {response.status_code}\n"
            )
        if callback is not None:
            callback(response)
        return response

    def post(
        self, url: str, data: str, callback: ResponseCallback | None = None
    ) -> HttpResponse:
        """Send ``data`` in a POST request; report it and pass the reply on."""
        response = self._send("POST", url, data)
        if response.status_code in (200, 201):
            self.output.write("POST request successful!\n")
        else:
            self.output.write(
                f"POST request failed with status code: {response.status_code}\n"
            )
        if callback is not None:
            callback(response)
        return response