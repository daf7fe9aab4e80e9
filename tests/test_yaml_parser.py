import pytest

from motionkit.yaml_parser import (
    ValueKind,
    YamlParseError,
    load_file,
    parse_list,
    parse_node,
    parse_opt_val,
    parse_opt_val_check_range,
    parse_val,
    parse_val_check_range,
)

CONFIG = """\
node_ex:
  a: 1
  b: two
list_ex: [1, 2, 3]
double_ex: 3.25
float_ex: 0.1
string_ex: hello
int32_ex: -42
uint8_ex: 200
uint32_ex: 4000000000
bool_ex: true
quoted_yes: "Y"
text_number: "1e3"
fraction: 2.5
negative: -1
null_ex: null
"""


@pytest.fixture
def parsable_node(tmp_path):
    path = tmp_path / "yaml_parser_config.yaml"
    path.write_text(CONFIG, encoding="utf-8")
    return load_file(path)


@pytest.fixture
def empty_node():
    return None


def test_parse_node(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_node(empty_node, "node_ex")
    assert parse_node(parsable_node, "node_ex") == {"a": 1, "b": "two"}


def test_parse_node_null_value_is_present(parsable_node):
    assert parse_node(parsable_node, "null_ex") is None


def test_parse_list(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_list(empty_node, "list_ex")
    with pytest.raises(YamlParseError, match="sequence"):
        parse_list(parsable_node, "double_ex")
    assert parse_list(parsable_node, "list_ex") == [1, 2, 3]


def test_parse_double_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "double_ex", ValueKind.DOUBLE)
    assert parse_val(parsable_node, "double_ex", ValueKind.DOUBLE) == 3.25


def test_parse_float_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "float_ex", ValueKind.FLOAT)
    assert parse_val(parsable_node, "float_ex", ValueKind.FLOAT) == 0.10000000149011612


def test_parse_string_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "string_ex", ValueKind.STRING)
    assert parse_val(parsable_node, "string_ex", ValueKind.STRING) == "hello"


def test_parse_int32_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "int32_ex", ValueKind.INT32)
    assert parse_val(parsable_node, "int32_ex", ValueKind.INT32) == -42


def test_parse_uint8_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "uint8_ex", ValueKind.UINT8)
    assert parse_val(parsable_node, "uint8_ex", ValueKind.UINT8) == 200


def test_parse_uint32_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "uint32_ex", ValueKind.UINT32)
    assert parse_val(parsable_node, "uint32_ex", ValueKind.UINT32) == 4000000000


def test_parse_bool_val(parsable_node, empty_node):
    with pytest.raises(YamlParseError):
        parse_val(empty_node, "bool_ex", ValueKind.BOOL)
    assert parse_val(parsable_node, "bool_ex", ValueKind.BOOL) is True


def test_bool_word_in_string(parsable_node):
    assert parse_val(parsable_node, "quoted_yes", ValueKind.BOOL) is True


def test_double_from_text(parsable_node):
    assert parse_val(parsable_node, "text_number", ValueKind.DOUBLE) == 1000.0


def test_bad_double_conversion():
    with pytest.raises(YamlParseError):
        parse_val({"angular_frequency": "JPL"}, "angular_frequency", ValueKind.DOUBLE)


def test_int_out_of_range(parsable_node):
    with pytest.raises(YamlParseError):
        parse_val(parsable_node, "uint32_ex", ValueKind.INT32)
    with pytest.raises(YamlParseError):
        parse_val(parsable_node, "uint8_ex", ValueKind.INT8)


def test_negative_for_unsigned(parsable_node):
    with pytest.raises(YamlParseError):
        parse_val(parsable_node, "negative", ValueKind.UINT16)


def test_fraction_for_int(parsable_node):
    with pytest.raises(YamlParseError):
        parse_val(parsable_node, "fraction", ValueKind.INT64)


def test_string_from_sequence_rejected(parsable_node):
    with pytest.raises(YamlParseError):
        parse_val(parsable_node, "list_ex", ValueKind.STRING)


def test_string_from_number(parsable_node):
    assert parse_val(parsable_node, "int32_ex", ValueKind.STRING) == "-42"


def test_error_carries_field(empty_node):
    with pytest.raises(YamlParseError) as info:
        parse_val(empty_node, "order", ValueKind.INT32)
    assert info.value.field == "order"


def test_check_range_accepts_and_rejects(parsable_node):
    assert parse_val_check_range(parsable_node, "double_ex", ValueKind.DOUBLE, 0, 5) == 3.25
    assert parse_val_check_range(parsable_node, "double_ex", ValueKind.DOUBLE, 3.25, 3.25) == 3.25
    with pytest.raises(YamlParseError, match="range check"):
        parse_val_check_range(parsable_node, "double_ex", ValueKind.DOUBLE, 4, 5)
    with pytest.raises(YamlParseError, match="range check"):
        parse_val_check_range(parsable_node, "int32_ex", ValueKind.INT32, 0, 10)


def test_check_range_needs_numeric_kind(parsable_node):
    with pytest.raises(TypeError):
        parse_val_check_range(parsable_node, "string_ex", ValueKind.STRING, 0, 1)


def test_optional_values(parsable_node):
    assert parse_opt_val(parsable_node, "missing", ValueKind.DOUBLE) is None
    assert parse_opt_val(parsable_node, "string_ex", ValueKind.STRING) == "hello"
    assert parse_opt_val(parsable_node, "bool_ex", ValueKind.BOOL) is True


def test_optional_range(parsable_node):
    assert parse_opt_val_check_range(parsable_node, "missing", ValueKind.DOUBLE, 0, 1) is None
    assert parse_opt_val_check_range(parsable_node, "double_ex", ValueKind.DOUBLE, 0, 10) == 3.25
    with pytest.raises(YamlParseError):
        parse_opt_val_check_range(parsable_node, "double_ex", ValueKind.DOUBLE, 0, 1)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "absent.yaml")