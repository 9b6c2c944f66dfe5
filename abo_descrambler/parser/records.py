RECORD_DELIMITER = b"\r\n"


def split_records(buffer: bytes, delimiter: bytes = RECORD_DELIMITER) -> list[bytes]:
    """Split a raw ABO buffer into records on a two-byte delimiter.

    Bytes consumed by a match are never rescanned. A leading delimiter yields
    an empty first record, a trailing delimiter does not yield an empty last
    one, and an empty buffer yields no records at all.
    """
    records: list[bytes] = []
    cursor = 0
    i = 0
    end = len(buffer) - 1
    while i < end:
        if buffer[i] == delimiter[0] and buffer[i + 1] == delimiter[1]:
            records.append(buffer[cursor:i])
            cursor = i + 2
            i = cursor
        else:
            i += 1

    if cursor < len(buffer):
        records.append(buffer[cursor:])
    return records
