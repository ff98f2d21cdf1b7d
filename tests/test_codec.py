import pytest

from minitalk.codec import BitDecoder, encode_bits


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_encode_single_letter_most_significant_first():
    assert list(encode_bits("A")) == [0, 1, 0, 0, 0, 0, 0, 1]


def test_eight_bits_per_byte():
    data = "hello, world".encode()
    assert len(list(encode_bits(data))) == 8 * len(data)


def test_empty_message_has_no_bits():
    assert list(encode_bits("")) == []


@pytest.mark.parametrize("message", [b"hi", b"\x00\xff\x80\x7f", "héllo".encode()])
def test_round_trip_bytes(message):
    assert _decode(encode_bits(message)) == message


def test_str_is_utf8_encoded():
    assert _decode(encode_bits("héllo")) == "héllo".encode("utf-8")


def test_decoder_waits_for_eight_bits():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in encode_bits(b"\xff")]
    assert results[:7] == [None] * 7
    assert results[7] == 0xFF


def test_decoder_resets_after_each_byte():
    decoder = BitDecoder()
    for bit in encode_bits(b"\xff"):
        decoder.feed(bit)
    results = [decoder.feed(bit) for bit in encode_bits(b"\x00")]
    assert results[-1] == 0


def test_decoder_rejects_non_bits():
    with pytest.raises(ValueError):
        BitDecoder().feed(2)