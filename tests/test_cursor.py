import pytest
from keyinterop.cursor import ByteCursor
from keyinterop.errors import DecodeError


def test_integer_single_zero_byte():
    cursor = ByteCursor(b'\x02\x01\x00')
    assert cursor.next_integer() == b'\x00'
    assert cursor.current_position() == 3
    assert cursor.remaining_bytes() == 0


def test_integer_length_exceeds_remaining():
    cursor = ByteCursor(b'\x02\x01')
    with pytest.raises(DecodeError) as e:
        cursor.next_integer()
    assert e.value.position == 0
    assert e.value.message == 'Incorrect Integer Size. Specified: 1, Remaining: 0'


def test_next_octet_on_empty_buffer():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'').next_octet()
    assert e.value.position == 0
    assert e.value.message == 'Incorrect Size. Specified: 1, Remaining: 0'
    assert str(e.value) == 'Incorrect Size. Specified: 1, Remaining: 0 (Position 0)'


@pytest.mark.parametrize('data', [b'\x31', b'\x31\x00', b'\x31\x03\x02\x01\x00'])
def test_sequence_wrong_tag(data):
    with pytest.raises(DecodeError) as e:
        ByteCursor(data).next_sequence()
    assert e.value.message.startswith('Expected Sequence')
    assert e.value.position == 0


def test_sequence_returns_length_without_consuming_content():
    cursor = ByteCursor(b'\x30\x03\x02\x01\x05')
    assert cursor.next_sequence() == 3
    assert cursor.current_position() == 2
    assert cursor.next_integer() == b'\x05'


def test_sequence_too_long():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x30\x04\x02\x01\x05').next_sequence()
    assert e.value.message == 'Incorrect Sequence Size. Specified: 4, Remaining: 3'


def test_short_form_length():
    assert ByteCursor(b'\x7f').read_length() == 127


@pytest.mark.parametrize('data, length', [
    (b'\x81\x80', 0x80),
    (b'\x82\x01\x00', 0x100),
    (b'\x83\x01\x02\x03', 0x010203),
    (b'\x84\x01\x02\x03\x04', 0x01020304),
])
def test_long_form_length(data, length):
    cursor = ByteCursor(data)
    assert cursor.read_length() == length
    assert cursor.remaining_bytes() == 0


@pytest.mark.parametrize('data', [b'\x85\x01\x02\x03\x04\x05', b'\x80', b'\xff'])
def test_invalid_length_encoding(data):
    with pytest.raises(DecodeError) as e:
        ByteCursor(data).read_length()
    assert e.value.message.startswith('Invalid Length Encoding')
    assert e.value.position == 0


def test_truncated_long_form_length():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x82\x01').read_length()
    assert e.value.message == 'Incorrect Size. Specified: 2, Remaining: 1'


def test_octet_string_returns_length_only():
    cursor = ByteCursor(b'\x04\x02\xaa\xbb')
    assert cursor.next_octet_string() == 2
    assert cursor.remaining_bytes() == 2


def test_octet_string_wrong_tag():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x03\x00').next_octet_string()
    assert e.value.message == 'Expected Octet String. Specified Identifier: 3'


def test_oid():
    oid = bytes.fromhex('2a864886f70d010101')
    cursor = ByteCursor(b'\x06\x09' + oid)
    assert cursor.next_oid() == oid


def test_oid_wrong_tag():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x05\x00').next_oid()
    assert e.value.message.startswith('Expected Object Identifier')


def test_null():
    cursor = ByteCursor(b'\x05\x00')
    assert cursor.is_next_null()
    cursor.next_null()
    assert cursor.remaining_bytes() == 0
    assert not cursor.is_next_null()


def test_null_wrong_tag():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x04\x00').next_null()
    assert e.value.message == 'Expected Null. Specified Identifier: 4'


def test_null_with_content():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x05\x01\x00').next_null()
    assert e.value.message == 'Null has non-zero size. Size: 1'
    assert e.value.position == 0


def test_peek_never_raises_on_empty():
    cursor = ByteCursor(b'')
    assert not cursor.is_next_null()
    assert not cursor.is_next_sequence()


def test_skip_next_any_tag():
    cursor = ByteCursor(b'\xa0\x02\x01\x02\x05\x00')
    assert cursor.skip_next() == b'\x01\x02'
    assert cursor.is_next_null()


def test_skip_next_too_long():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\xa0\x05\x01').skip_next()
    assert e.value.message == 'Incorrect Size. Specified: 5, Remaining: 1'


def test_error_position_is_start_of_failed_read():
    cursor = ByteCursor(b'\x05\x00\x02\x05\x00')
    cursor.next_null()
    with pytest.raises(DecodeError) as e:
        cursor.next_integer()
    assert e.value.position == 2


def test_failed_tag_check_still_advances_monotonically():
    cursor = ByteCursor(b'\x02\x01\x01\x31\x00')
    cursor.next_integer()
    before = cursor.current_position()
    with pytest.raises(DecodeError):
        cursor.next_sequence()
    assert cursor.current_position() >= before


def test_buffer_is_copied():
    data = bytearray(b'\x02\x01\x07')
    cursor = ByteCursor(data)
    data[2] = 0x00
    assert cursor.next_integer() == b'\x07'


def test_oid_too_long():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x06\x05\x2a').next_oid()
    assert e.value.message == 'Incorrect Object Identifier Size. Specified: 5, Remaining: 1'
    assert e.value.position == 0


def test_octet_string_too_long():
    with pytest.raises(DecodeError) as e:
        ByteCursor(b'\x04\x03\x00').next_octet_string()
    assert e.value.message == 'Incorrect Octet String Size. Specified: 3, Remaining: 1'
    assert e.value.position == 0
