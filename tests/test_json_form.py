import json

import pytest

from transforms import form, json_tools


class TestJson:
    def test_pretty(self):
        assert json_tools.json_pretty('{"a":[1,2],"b":null}') == (
            '{\n  "a": [\n    1,\n    2\n  ],\n  "b": null\n}'
        )

    def test_pretty_keeps_unicode(self):
        assert json_tools.json_pretty('"caf\\u00e9"') == '"café"'

    def test_minify(self):
        assert json_tools.json_minify('{ "a" : [1, 2],\n "b": {} }') == '{"a":[1,2],"b":{}}'

    @pytest.mark.parametrize("text, expected", [
        ('{"a": 1.0, "b": 1e5, "c": 1.5e300}', '{"a":1,"b":100000,"c":1.5e+300}'),
        ("[-0.0, 2.50, 1e21]", "[0,2.5,1e+21]"),
        ("[1e400]", "[null]"),
    ])
    def test_minify_numbers(self, text, expected):
        assert json_tools.json_minify(text) == expected

    def test_pretty_integral_float(self):
        assert json_tools.json_pretty('{"n": 3.0}') == '{\n  "n": 3\n}'

    @pytest.mark.parametrize("text", ["not json", "{'a': 1}", "NaN", "[1,]", ""])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            json_tools.json_pretty(text)
        with pytest.raises(ValueError):
            json_tools.json_minify(text)

    def test_escape(self):
        assert json_tools.json_escape('say "hi"\n') == '"say \\"hi\\"\\n"'

    def test_escape_is_valid_json(self):
        text = "tab\there / back\\slash é"
        assert json.loads(json_tools.json_escape(text)) == text


class TestEncodeForm:
    def test_nested(self):
        assert form.json_to_form('{"a":{"b":1},"c":[true,null]}') == (
            "a%5Bb%5D=1&c%5B0%5D=true&c%5B1%5D="
        )

    def test_values_are_percent_encoded(self):
        assert form.json_to_form('{"q":"a b&c"}') == "q=a%20b%26c"

    def test_empty_containers_skipped(self):
        assert form.json_to_form('{"a":{},"b":[],"c":"x"}') == "c=x"

    def test_scalar_top_level(self):
        assert form.json_to_form('"just a string"') == ""

    def test_top_level_array(self):
        assert form.json_to_form('["x","y"]') == "0=x&1=y"

    def test_invalid_json(self):
        with pytest.raises(ValueError):
            form.json_to_form("a=1")


class TestDecodeForm:
    def test_brackets_and_repeats(self):
        decoded = form.decode_form("a[b]=1&a[c]=2&d[]=x&d[]=y&e=1&e=2")
        assert decoded == {
            "a": {"b": "1", "c": "2"},
            "d": ["x", "y"],
            "e": ["1", "2"],
        }

    def test_indexed_array(self):
        assert form.decode_form("a[1]=y&a[0]=x") == {"a": ["x", "y"]}

    def test_large_index_becomes_key(self):
        assert form.decode_form("a[100]=x") == {"a": {"100": "x"}}

    def test_plus_and_percent(self):
        assert form.decode_form("q=hello+world&r=%26") == {"q": "hello world", "r": "&"}

    def test_encoded_brackets(self):
        assert form.decode_form("a%5Bb%5D=1") == {"a": {"b": "1"}}

    def test_key_without_value(self):
        assert form.decode_form("flag&x=") == {"flag": "", "x": ""}

    def test_depth_limit(self):
        decoded = form.decode_form("a[b][c][d][e][f][g][h]=1")
        assert decoded == {"a": {"b": {"c": {"d": {"e": {"f": {"[g][h]": "1"}}}}}}}

    def test_form_to_json_pretty(self):
        assert form.form_to_json(" x=1 ") == '{\n  "x": "1"\n}'

    def test_empty(self):
        assert form.form_to_json("") == "{}"

    def test_round_trip(self):
        data = {"a": {"b": "1"}, "c": ["x", "y"], "d": "e f"}
        assert form.decode_form(form.encode_form(data)) == data
