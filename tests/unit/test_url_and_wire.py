# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from webprobe.http.url import split_target
from webprobe.http.wire import build_request, split_response


def test_split_target_host_and_path():
    assert split_target("example.com/a/b") == ("example.com", "a/b")
    assert split_target("example.com") == ("example.com", "")


def test_split_target_edge_cases():
    assert split_target("") == ("", "")
    assert split_target("example.com/") == ("example.com", "")
    assert split_target("example.com/a//b/") == ("example.com", "a//b/")


def test_build_request_is_minimal_http10():
    raw = build_request("example.com", "a/b")
    assert raw == b"GET /a/b HTTP/1.0\r\nHost: example.com:80\r\nConnection: close\r\n\r\n"
    assert b"User-Agent" not in raw
    assert build_request("example.com", "", port=8080).startswith(b"GET / HTTP/1.0\r\nHost: example.com:8080\r\n")


def test_split_response_headers_and_body():
    headers, body = split_response(b"HTTP/1.0 200 OK\r\nContent-Length: 2\r\n\r\nhi")
    assert headers == ["HTTP/1.0 200 OK", "Content-Length: 2"]
    assert body == "hi"


def test_split_response_without_blank_line_is_all_headers():
    headers, body = split_response(b"HTTP/1.0 200 OK\r\nServer: x")
    assert headers == ["HTTP/1.0 200 OK", "Server: x"]
    assert body == ""

    headers, body = split_response(b"HTTP/1.0 200 OK\r\nServer: x\r\n")
    assert headers == ["HTTP/1.0 200 OK", "Server: x"]
    assert body == ""


def test_split_response_keeps_body_line_terminators():
    headers, body = split_response(b"HTTP/1.0 200 OK\r\n\r\nline one\r\n\r\nline two\n")
    assert headers == ["HTTP/1.0 200 OK"]
    assert body == "line one\r\n\r\nline two\n"


def test_split_response_empty_and_headerless_inputs():
    assert split_response(b"") == ([], "")
    assert split_response(b"\r\nbody") == ([], "body")


def test_split_response_replaces_invalid_utf8():
    headers, body = split_response(b"HTTP/1.0 200 OK\r\n\r\n\xff")
    assert headers == ["HTTP/1.0 200 OK"]
    assert body == "\ufffd"
