import pytest
from crystalline import IndexStream, InvalidKeyMaterial, shift, validate_streams

def test_next_forward_wraps_to_start():
    s = IndexStream(b"\x01\x02\x03")
    assert [s.next_forward() for _ in range(7)] == [1, 2, 3, 1, 2, 3, 1]
    assert s.position == 1

def test_next_backward_wraps_to_end():
    s = IndexStream(b"\x01\x02\x03", position=1)
    assert [s.next_backward() for _ in range(5)] == [2, 1, 3, 2, 1]
    assert s.position == 2

def test_single_byte_stream_never_moves():
    s = IndexStream(b"\x09")
    assert [s.next_forward() for _ in range(3)] == [9, 9, 9]
    assert [s.next_backward() for _ in range(3)] == [9, 9, 9]
    assert s.position == 0

def test_empty_stream_rejected():
    with pytest.raises(InvalidKeyMaterial):
        IndexStream(b"")

def test_shift_is_product_of_operands():
    assert shift(0x01, 0x04) == 4
    assert shift(255, 255) == 65025
    assert shift(255, 255, 255) == 16581375
    assert shift(0, 200, 17) == 0

@pytest.mark.parametrize("streams, name", [
    ([b"", b"s"], "key"),
    ([b"k", b""], "salt"),
    ([b"k", b"s", b""], "salt2"),
])
def test_validate_streams_names_the_empty_stream(streams, name):
    with pytest.raises(InvalidKeyMaterial) as exc:
        validate_streams(streams)
    assert exc.value.name == name
    assert isinstance(exc.value, ValueError)
