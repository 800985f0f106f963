import pytest

from rasterbot.b64 import decode, encode


def test_encode_known_vector():
    assert encode(b"foobar") == b"Zm9vYmFy"


def test_decode_known_vector():
    assert decode(b"Zm9vYmFy") == b"foobar"


@pytest.mark.parametrize(
    "data", [b"f", b"fo", b"foo", b"foob", b"fooba", bytes(range(256)), b"\x00\xff\x10"]
)
def test_round_trip(data):
    encoded = encode(data)
    assert len(encoded) % 4 == 0
    assert decode(encoded) == data


def test_padding_present_for_partial_groups():
    assert encode(b"f").endswith(b"==")
    assert encode(b"fo").endswith(b"=")
    assert not encode(b"foo").endswith(b"=")


def test_decode_skips_noise():
    encoded = encode(b"hello world, this is a longer message")
    noisy = b"\n".join(encoded[i:i + 5] for i in range(0, len(encoded), 5))
    assert decode(b"  " + noisy + b"\r\n") == b"hello world, this is a longer message"


def test_decode_accepts_str():
    assert decode(encode(b"abc").decode("ascii")) == b"abc"


def test_encode_empty_raises():
    with pytest.raises(ValueError):
        encode(b"")


def test_decode_empty():
    assert decode(b"") == b""