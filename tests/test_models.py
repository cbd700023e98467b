import json

from pydantic import ValidationError
import pytest

from json_patch_engine import InvalidOperationError, OpName, Operation, parse_operations


class TestOperation:
    def test_explicit_null_value_is_present(self):
        op = Operation.model_validate(json.loads('{"op":"add","path":"/foo","value":null}'))
        assert op.op == "add"
        assert op.path == "/foo"
        assert op.value is None
        assert op.has_value

    def test_absent_value(self):
        op = Operation.model_validate({"op": "remove", "path": "/foo"})
        assert op.value is None
        assert not op.has_value
        assert op.from_ is None

    def test_from_alias(self):
        op = Operation.model_validate({"op": "copy", "path": "/foo", "from": "/bar"})
        assert op.from_ == "/bar"
        assert op.from_pointer.segments == ["bar"]

    def test_construct_by_name(self):
        op = Operation(op=OpName.MOVE, path="/b", from_="/a")
        assert op.from_ == "/a"
        assert not op.has_value

    # Wire members of the wrong type count as absent
    def test_wrong_types_are_absent(self):
        op = Operation.model_validate({"op": 1, "path": ["x"], "from": {"a": 1}})
        assert op.op is None
        assert op.path is None
        assert op.from_ is None

    @pytest.mark.parametrize(
        "wire",
        [
            '{"op":"add","path":"/foo","value":null}',
            '{"op":"remove","path":"/foo"}',
            '{"op":"copy","path":"/foo","from":"/bar"}',
            '{"op":"test","path":"/a","value":{"b":[1,2]}}',
        ],
    )
    def test_to_wire(self, wire):
        op = Operation.model_validate(json.loads(wire))
        assert json.dumps(op.to_wire(), separators=(",", ":")) == wire

    def test_operations_are_frozen(self):
        op = Operation(op="remove", path="/a")
        with pytest.raises(ValidationError):
            op.path = "/b"


class TestParseOperations:
    def test_from_bytes(self):
        ops = parse_operations(b'[{"op":"add","path":"/a","value":1},{"op":"remove","path":"/b"}]')
        assert [op.op for op in ops] == ["add", "remove"]
        assert ops[0].has_value and not ops[1].has_value

    def test_from_list_mixed(self):
        existing = Operation(op="remove", path="/a")
        ops = parse_operations([existing, {"op": "add", "path": "/b", "value": 2}])
        assert ops[0] is existing
        assert ops[1].value == 2

    @pytest.mark.parametrize("data", ['{"op":"add"}', '"add"', "3", b"null"])
    def test_not_an_array(self, data):
        with pytest.raises(InvalidOperationError):
            parse_operations(data)

    def test_item_not_an_object(self):
        with pytest.raises(InvalidOperationError):
            parse_operations('[{"op":"remove","path":"/a"}, 1]')

    def test_value_not_json(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            parse_operations([{"op": "add", "path": "/a", "value": {1, 2}}])
        assert isinstance(exc_info.value.__cause__, ValidationError)
