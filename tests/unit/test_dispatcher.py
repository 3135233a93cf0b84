"""
Tests for the GET/POST request dispatcher.
"""

import json

import pytest

from httpcall.http import build_body_map, send
from httpcall.schemas import GetRequest, KvPair, PostRequest, TransportError, parse_kv_pair


class TestBuildBodyMap:

    def test_pairs_become_dict(self):
        pairs = [parse_kv_pair("a=1"), parse_kv_pair("b=2")]
        assert build_body_map(pairs) == {"a": "1", "b": "2"}

    def test_last_duplicate_wins(self):
        pairs = [parse_kv_pair("a=1"), parse_kv_pair("b=2"), parse_kv_pair("a=3")]
        body = build_body_map(pairs)
        assert body == {"a": "3", "b": "2"}
        assert list(body) == ["a", "b"]

    def test_empty(self):
        assert build_body_map([]) == {}

    def test_round_trips_through_json(self):
        pairs = [KvPair(key="a", value="1"), KvPair(key="b", value="2")]
        assert json.loads(json.dumps(build_body_map(pairs))) == {"a": "1", "b": "2"}


class TestSend:

    def test_get(self, mock_client, text_response):
        resp = send(mock_client, GetRequest(url="http://abc.xyz"))
        assert resp is text_response
        mock_client.get.assert_called_once_with("http://abc.xyz")
        mock_client.post.assert_not_called()

    def test_post(self, mock_client, text_response):
        spec = PostRequest(
            url="https://httpbin.org/post",
            body=[parse_kv_pair("a=1"), parse_kv_pair("b=2")],
        )
        resp = send(mock_client, spec)
        assert resp is text_response
        mock_client.post.assert_called_once_with(
            "https://httpbin.org/post", json={"a": "1", "b": "2"}
        )
        mock_client.get.assert_not_called()

    def test_post_without_body_sends_empty_object(self, mock_client):
        send(mock_client, PostRequest(url="https://httpbin.org/post"))
        mock_client.post.assert_called_once_with("https://httpbin.org/post", json={})

    def test_transport_error_propagates(self, mock_client):
        mock_client.get.side_effect = TransportError("connection refused")
        with pytest.raises(TransportError):
            send(mock_client, GetRequest(url="http://abc.xyz"))
        assert mock_client.get.call_count == 1

    def test_unknown_spec_type(self, mock_client):
        with pytest.raises(TypeError):
            send(mock_client, object())
