"""Parsing of ``key=value;`` user data blobs."""

from __future__ import annotations

_SEMICOLON = ord(";")
_EQUALS = ord("=")
_NUL = 0


def _is_alnum(byte: int) -> bool:
    return (
        ord("0") <= byte <= ord("9")
        or ord("a") <= byte <= ord("z")
        or ord("A") <= byte <= ord("Z")
    )


class _NotValid(Exception):
    pass


def _parse(data: bytes) -> dict[str, bytes]:
    if not data:
        raise _NotValid
    pairs: dict[str, bytes] = {}
    key_found = False
    key = bytearray()
    value = bytearray()
    prev = _NUL

    for byte in data:
        if key_found:
            if byte == _SEMICOLON and prev != _SEMICOLON:
                prev = byte
                continue
            if byte != _SEMICOLON and prev == _SEMICOLON:
                if not value:
                    raise _NotValid
                pairs[key.decode("ascii")] = bytes(value)
                key.clear()
                value.clear()
                key_found = False
            else:
                value.append(byte)
        if not key_found:
            if byte == _EQUALS:
                if not key:
                    raise _NotValid
                key_found = True
            elif _is_alnum(byte):
                key.append(byte)
            elif byte == _NUL and not key and pairs:
                break  # trailing NUL bytes are accepted
            elif prev != _SEMICOLON or key:
                raise _NotValid
        prev = byte

    if key_found:
        if not value:
            raise _NotValid
        pairs[key.decode("ascii")] = bytes(value)
    elif key:
        raise _NotValid
    return pairs


def parse_key_value(data: bytes | bytearray | memoryview) -> dict[str, bytes]:
    """Parse ``key=value;`` pairs, returning them ordered by key.

    Malformed input is not an error: other participants may use the same
    field for something else, so an empty mapping is returned instead.
    """
    try:
        pairs = _parse(bytes(data))
    except _NotValid:
        return {}
    return dict(sorted(pairs.items()))