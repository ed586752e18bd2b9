import pytest

from sigtalk.protocol import BitDecoder, encode_bits


def _decode(bits):
    decoder = BitDecoder()
    out = []
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_single_letter_bits():
    assert list(encode_bits(b"A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_empty_message_is_only_terminator():
    assert list(encode_bits(b"")) == [0] * 8


def test_length_is_eight_bits_per_byte_plus_terminator():
    message = b"hello world"
    assert len(list(encode_bits(message))) == 8 * (len(message) + 1)


def test_str_is_encoded_as_utf8():
    text = "héllo"
    assert list(encode_bits(text)) == list(encode_bits(text.encode("utf-8")))


@pytest.mark.parametrize("message", [b"x", b"Hello, there!", bytes(range(1, 256))])
def test_round_trip(message):
    assert _decode(encode_bits(message)) == message + b"\x00"


def test_decoder_returns_none_until_byte_complete():
    decoder = BitDecoder()
    results = [decoder.feed(1) for _ in range(7)]
    assert results == [None] * 7
    assert decoder.pending == 7
    assert decoder.feed(1) == 0xFF
    assert decoder.pending == 0


def test_decoder_resets_between_bytes():
    decoder = BitDecoder()
    for bit in [1] * 8:
        decoder.feed(bit)
    last = None
    for bit in [0] * 8:
        last = decoder.feed(bit)
    assert last == 0


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)


def test_encode_rejects_other_types():
    with pytest.raises(TypeError):
        list(encode_bits(42))