from .errors import DecodeError


# DER universal tags understood by the cursor
TAG_INTEGER = 0x02
TAG_OCTET_STRING = 0x04
TAG_NULL = 0x05
TAG_OID = 0x06
TAG_SEQUENCE = 0x30

_TAG_NAMES = {
    TAG_INTEGER: 'Integer',
    TAG_OCTET_STRING: 'Octet String',
    TAG_OID: 'Object Identifier',
    TAG_SEQUENCE: 'Sequence',
}

# Long form lengths larger than 4 octets are not supported
MAX_LENGTH_OCTETS = 4


def _size_message(prefix, specified, remaining):
    return prefix + '. Specified: ' + str(specified) + ', Remaining: ' + str(remaining)


class ByteCursor:
    """Bounds-checked reader over a DER byte buffer.

    The buffer is never modified; consumption only advances an offset. Every
    read checks the requested length against the remaining bytes before
    touching the buffer, and failures raise DecodeError carrying the offset
    at which the failing operation started.
    """

    def __init__(self, data):
        self._data = bytes(data)
        self._offset = 0

    def current_position(self):
        return self._offset

    def remaining_bytes(self):
        return len(self._data) - self._offset

    def is_next(self, tag):
        if(self.remaining_bytes() == 0):
            return False
        return self._data[self._offset] == tag

    def is_next_null(self):
        return self.is_next(TAG_NULL)

    def is_next_sequence(self):
        return self.is_next(TAG_SEQUENCE)

    def next_octets(self, count):
        position = self.current_position()
        if(count > self.remaining_bytes()):
            raise DecodeError(_size_message('Incorrect Size', count, self.remaining_bytes()), position)
        values = self._data[self._offset:self._offset + count]
        self._offset += count
        return values

    def next_octet(self):
        return self.next_octets(1)[0]

    def read_length(self):
        position = self.current_position()
        b = self.next_octet()
        if(b & 0x80 == 0):
            return b
        count = b & 0x7f
        if(count < 1 or count > MAX_LENGTH_OCTETS):
            raise DecodeError('Invalid Length Encoding. Length uses ' + str(count) + ' octets', position)
        length = 0
        for octet in self.next_octets(count):
            length = (length << 8) | octet
        return length

    def _next_tagged(self, tag):
        # Consumes tag and length octets; the length is bound-checked against the rest
        position = self.current_position()
        name = _TAG_NAMES[tag]
        b = self.next_octet()
        if(b != tag):
            raise DecodeError('Expected ' + name + '. Specified Identifier: ' + str(b), position)
        length = self.read_length()
        if(length > self.remaining_bytes()):
            raise DecodeError(_size_message('Incorrect ' + name + ' Size', length, self.remaining_bytes()), position)
        return length

    def next_sequence(self):
        return self._next_tagged(TAG_SEQUENCE)

    def next_octet_string(self):
        # The payload is a nested TLV grammar, so only the header is consumed
        return self._next_tagged(TAG_OCTET_STRING)

    def next_integer(self):
        return self.next_octets(self._next_tagged(TAG_INTEGER))

    def next_oid(self):
        return self.next_octets(self._next_tagged(TAG_OID))

    def next_null(self):
        position = self.current_position()
        b = self.next_octet()
        if(b != TAG_NULL):
            raise DecodeError('Expected Null. Specified Identifier: ' + str(b), position)
        b = self.next_octet()
        if(b != 0x00):
            raise DecodeError('Null has non-zero size. Size: ' + str(b), position)

    def skip_next(self):
        position = self.current_position()
        self.next_octet()
        length = self.read_length()
        if(length > self.remaining_bytes()):
            raise DecodeError(_size_message('Incorrect Size', length, self.remaining_bytes()), position)
        return self.next_octets(length)
