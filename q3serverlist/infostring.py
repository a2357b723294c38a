from .errors import InfoStringError


DELIMITER = b'\\'
ENCODING = 'latin-1'


def decode(raw):
    """Return the key/value pairs of an info string as a dict.

    Anything before the first backslash (the command name) is skipped.
    A key without a value invalidates the whole string.
    """
    start = raw.find(DELIMITER)
    if start == -1:
        return {}

    segments = raw[start + 1:].split(DELIMITER)
    if len(segments) % 2:
        raise InfoStringError(f"key without value in info string: {segments[-1]!r}")

    info = {}
    for i in range(0, len(segments), 2):
        info[segments[i].decode(ENCODING)] = segments[i + 1].decode(ENCODING)
    return info


def encode(info):
    # Pairs are written in insertion order
    data = bytearray()
    for key, value in info.items():
        key, value = str(key), str(value)
        if '\\' in key or '\\' in value:
            raise ValueError(f"info string keys and values cannot contain backslashes: {key!r}={value!r}")
        data += DELIMITER + key.encode(ENCODING) + DELIMITER + value.encode(ENCODING)
    return bytes(data)
