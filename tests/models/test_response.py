import json
from dataclasses import FrozenInstanceError

import pytest

from redd import Response


class TestResponse:
    def test_fields_are_stored_verbatim(self):
        response = Response(
            code=200,
            headers={"content-type": "application/json"},
            raw_body=b'{"name": "value"}',
        )

        assert response.code == 200
        assert response.headers == {"content-type": "application/json"}
        assert response.raw_body == b'{"name": "value"}'

    def test_body_is_parsed(self):
        response = Response(
            code=200, raw_body=b'{"data": {"children": [{"id": 1}]}, "ok": true}'
        )

        assert response.body == {"data": {"children": [{"id": 1}]}, "ok": True}

    def test_body_is_parsed_once(self):
        response = Response(code=200, raw_body=b'{"items": []}')

        first = response.body
        first["items"].append("cached")

        assert response.body is first
        assert response.body == {"items": ["cached"]}

    def test_body_parses_json_scalars_and_arrays(self):
        assert Response(code=200, raw_body=b"[1, 2, 3]").body == [1, 2, 3]
        assert Response(code=200, raw_body=b'"text"').body == "text"

    def test_invalid_json_fails_only_on_access(self):
        response = Response(code=200, headers={}, raw_body=b"not json")

        assert response.raw_body == b"not json"
        with pytest.raises(json.JSONDecodeError):
            response.body

    def test_empty_body_fails_on_access(self):
        response = Response(code=204)

        with pytest.raises(json.JSONDecodeError):
            response.body

    def test_fields_are_read_only(self):
        response = Response(code=200, raw_body=b"{}")

        with pytest.raises(FrozenInstanceError):
            response.code = 500  # type: ignore[misc]
