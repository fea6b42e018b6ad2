"""Test the MD5 digest helper."""

from fraud_request.core.digest import md5_hex


class TestMd5Hex:
    def test_known_value(self):
        assert md5_hex("test@test.org") == "476869598e748d958e819c180af31982"

    def test_empty_string(self):
        assert md5_hex("") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_lowercase_hex_of_fixed_length(self):
        digest = md5_hex("Some Value")
        assert len(digest) == 32
        assert digest == digest.lower()
        int(digest, 16)  # Should not raise

    def test_case_matters_to_the_digest(self):
        assert md5_hex("TEST@TEST.org") != md5_hex("test@test.org")

    def test_non_ascii_input(self):
        assert len(md5_hex("usér@exämple.org")) == 32
