"""
Tests for envelope serialization and schema validation.
"""

import math
from dataclasses import dataclass
from datetime import date

from typing import Optional

import pytest
from pydantic import BaseModel

from e5e.protocol import Envelope, EnvelopeValidator, ProtocolError, Return, SchemaName


@dataclass
class Point:
    x: int
    y: int


class Item(BaseModel):
    name: str
    note: Optional[str] = None


class TestEnvelope:
    def test_empty_envelope(self) -> None:
        assert Envelope(output="").to_json() == '{"output":"","result":null}'

    def test_return_model_omits_unset_fields(self) -> None:
        envelope = Envelope(output="", result=Return(data=5))

        assert envelope.to_json() == '{"output":"","result":{"data":5}}'

    def test_return_model_full(self) -> None:
        result = Return(status=201, response_headers={"x-id": "1"}, data=[1], type="json")

        assert Envelope(output="log", result=result).to_json() == (
            '{"output":"log","result":{"status":201,'
            '"response_headers":{"x-id":"1"},"data":[1],"type":"json"}}'
        )

    def test_return_model_omits_empty_values(self) -> None:
        result = Return(status=0, response_headers={}, data=0, type="")

        assert Envelope(output="", result=result).to_json() == (
            '{"output":"","result":{"data":0}}'
        )

    def test_nested_none_inside_return_data_is_kept(self) -> None:
        envelope = Envelope(output="", result=Return(data=Item(name="a")))

        assert envelope.to_json() == (
            '{"output":"","result":{"data":{"name":"a","note":null}}}'
        )

    def test_user_model_keeps_none_fields(self) -> None:
        envelope = Envelope(output="", result=Item(name="a"))

        assert envelope.to_json() == '{"output":"","result":{"name":"a","note":null}}'

    def test_html_characters_are_not_escaped(self) -> None:
        envelope = Envelope(output="<b>&</b>", result="a<b")

        assert envelope.to_json() == '{"output":"<b>&</b>","result":"a<b"}'

    def test_plain_values(self) -> None:
        envelope = Envelope(output="a\nb", result={"list": [1, 2.5, None], "ok": True})

        assert envelope.to_json() == (
            '{"output":"a\\nb","result":{"list":[1,2.5,null],"ok":true}}'
        )

    def test_dataclass_and_date_results(self) -> None:
        envelope = Envelope(output="", result={"point": Point(1, 2), "day": date(2024, 1, 2)})

        assert envelope.to_json() == (
            '{"output":"","result":{"point":{"x":1,"y":2},"day":"2024-01-02"}}'
        )

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_floats_fail(self, value: float) -> None:
        with pytest.raises(ValueError):
            Envelope(output="", result=Return(data=value)).to_json()

    def test_unserializable_object_fails(self) -> None:
        with pytest.raises(TypeError):
            Envelope(output="", result=object()).to_json()


class TestEnvelopeValidator:
    def test_accepts_envelope(self) -> None:
        EnvelopeValidator().validate({"output": "", "result": None})

    @pytest.mark.parametrize(
        "document",
        [
            {"output": ""},
            {"result": None},
            {"output": 1, "result": None},
            {"output": "", "result": None, "extra": True},
        ],
    )
    def test_rejects_malformed_envelope(self, document) -> None:
        with pytest.raises(ProtocolError):
            EnvelopeValidator().validate(document)

    def test_return_schema(self) -> None:
        validator = EnvelopeValidator()

        validator.validate({"status": 200, "data": {"any": "thing"}}, schema=SchemaName.RETURN)
        with pytest.raises(ProtocolError):
            validator.validate({"status": "200"}, schema=SchemaName.RETURN)
