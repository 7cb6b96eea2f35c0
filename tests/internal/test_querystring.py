"""Tests for query-string encoding."""

from restserver_sdk._internal.querystring import encode_query


class TestEncodeQuery:
    """Tests for encode_query()."""

    def test_sorted_and_joined(self):
        """Should sort pairs regardless of insertion order."""
        assert encode_query({"b": 2, "a": 1}) == "a=1&b=2"
        assert encode_query({"a": 1, "b": 2}) == encode_query({"b": 2, "a": 1})

    def test_skips_none(self):
        """Should drop None values."""
        assert encode_query({"a": None, "b": "x"}) == "b=x"

    def test_percent_encodes_like_encode_uri_component(self):
        """Should escape reserved characters but keep the unreserved set."""
        assert encode_query({"q": "a b&c=d/é"}) == "q=a%20b%26c%3Dd%2F%C3%A9"
        assert encode_query({"q": "-_.!~*'()"}) == "q=-_.!~*'()"

    def test_booleans_lowercase(self):
        """Should render booleans as true/false."""
        assert encode_query({"t": True, "f": False}) == "f=false&t=true"

    def test_integral_floats_drop_fraction(self):
        """Should render whole floats like integers and keep other floats."""
        assert encode_query({"a": 1.0, "b": 2.5, "c": -3.0}) == "a=1&b=2.5&c=-3"

    def test_raw_form_for_signatures(self):
        """Should concatenate raw pairs when unseparated and unencoded."""
        assert encode_query({"b": "x y", "a": 1}, "", False) == "a=1b=x y"

