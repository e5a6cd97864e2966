"""UUID generation for versions 1 to 6.

Every generator assembles the 128-bit value itself and returns the
canonical lowercase string form. Field layout follows RFC 4122 for
versions 1-5 and RFC 9562 for version 6:

    time_low (32) | time_mid (16) | version (4) + time_hi (12) |
    variant (2) + clock_seq (14) | node (48)

Time-based versions count 100 ns intervals since 1582-10-15 (the
Gregorian epoch). Version 6 stores the same timestamp most significant
bits first so that the string form sorts by creation time.
"""

import hashlib
import os
import random
import threading
import time
import uuid
from datetime import datetime, timedelta, timezone

from ..logging import log

# Re-exported so callers do not need the stdlib module for name-based UUIDs
NAMESPACE_DNS = uuid.NAMESPACE_DNS
NAMESPACE_URL = uuid.NAMESPACE_URL
NAMESPACE_OID = uuid.NAMESPACE_OID
NAMESPACE_X500 = uuid.NAMESPACE_X500

# DCE security domains for version 2
DCE_PERSON = 0
DCE_GROUP = 1
DCE_ORG = 2

# 100 ns intervals between 1582-10-15 and 1970-01-01
GREGORIAN_OFFSET = 0x01B21DD213814000
_GREGORIAN_EPOCH = datetime(1582, 10, 15, tzinfo=timezone.utc)

_VARIANT_RFC_4122 = 0b10

_timestamp_lock = threading.Lock()
_last_timestamp = 0


def _gregorian_timestamp() -> int:
    """Current 60-bit timestamp, strictly increasing within the process."""
    global _last_timestamp
    timestamp = time.time_ns() // 100 + GREGORIAN_OFFSET
    with _timestamp_lock:
        if timestamp <= _last_timestamp:
            timestamp = _last_timestamp + 1
        _last_timestamp = timestamp
    return timestamp & 0x0FFF_FFFF_FFFF_FFFF


def _random_node() -> int:
    # Multicast bit set so a random node can never collide with a real MAC
    return random.getrandbits(48) | 0x0100_0000_0000


def _validate_fields(node: int | None, clock_seq: int | None) -> tuple[int, int]:
    if node is None:
        node = _random_node()
    elif not 0 <= node < 1 << 48:
        raise ValueError(f"node must fit in 48 bits, got {node}")
    if clock_seq is None:
        clock_seq = random.getrandbits(14)
    elif not 0 <= clock_seq < 1 << 14:
        raise ValueError(f"clock_seq must fit in 14 bits, got {clock_seq}")
    return node, clock_seq


def _pack(time_low: int, time_mid: int, time_hi: int, clock_seq_hi: int, clock_seq_low: int, node: int) -> int:
    return (
        (time_low << 96)
        | (time_mid << 80)
        | (time_hi << 64)
        | (clock_seq_hi << 56)
        | (clock_seq_low << 48)
        | node
    )


def _stamp(value: int, version: int) -> str:
    """Overwrite the version nibble and variant bits, then format."""
    value &= ~(0xF << 76)
    value |= version << 76
    value &= ~(0b11 << 62)
    value |= _VARIANT_RFC_4122 << 62
    return str(uuid.UUID(int=value))


def _as_namespace(namespace: uuid.UUID | str) -> uuid.UUID:
    if isinstance(namespace, uuid.UUID):
        return namespace
    try:
        return uuid.UUID(namespace)
    except ValueError as e:
        raise ValueError(f"Invalid namespace UUID: {namespace!r}") from e


def _name_bytes(name: str | bytes) -> bytes:
    return name if isinstance(name, bytes) else name.encode("utf-8")


def uuid1(node: int | None = None, clock_seq: int | None = None) -> str:
    """Time-based UUID (version 1).

    Args:
        node: 48-bit node id; random with the multicast bit set when omitted
        clock_seq: 14-bit clock sequence; random when omitted

    Raises:
        ValueError: If node or clock_seq do not fit their fields
    """
    node, clock_seq = _validate_fields(node, clock_seq)
    timestamp = _gregorian_timestamp()
    value = _pack(
        timestamp & 0xFFFF_FFFF,
        (timestamp >> 32) & 0xFFFF,
        (timestamp >> 48) & 0x0FFF,
        (clock_seq >> 8) & 0x3F,
        clock_seq & 0xFF,
        node,
    )
    return _stamp(value, 1)


def uuid2(
    domain: int = DCE_PERSON,
    local_id: int | None = None,
    node: int | None = None,
    clock_seq: int | None = None,
) -> str:
    """DCE security UUID (version 2).

    The low 32 timestamp bits are replaced by a local identifier and the low
    clock sequence byte by the domain.

    Args:
        domain: DCE_PERSON, DCE_GROUP or DCE_ORG
        local_id: 32-bit identifier; defaults to the current uid (person) or
            gid (group) on POSIX systems
        node: 48-bit node id, random when omitted
        clock_seq: clock sequence, only its high 6 bits are kept

    Raises:
        ValueError: If the domain is unknown, or local_id is missing and
            cannot be derived from the platform
    """
    if not 0 <= domain <= 0xFF:
        raise ValueError(f"domain must fit in 8 bits, got {domain}")
    if local_id is None:
        if domain == DCE_PERSON and hasattr(os, "getuid"):
            local_id = os.getuid()
        elif domain == DCE_GROUP and hasattr(os, "getgid"):
            local_id = os.getgid()
        else:
            raise ValueError(f"local_id is required for domain {domain} on this platform")
    if not 0 <= local_id < 1 << 32:
        raise ValueError(f"local_id must fit in 32 bits, got {local_id}")

    node, clock_seq = _validate_fields(node, clock_seq)
    timestamp = _gregorian_timestamp()
    value = _pack(
        local_id,
        (timestamp >> 32) & 0xFFFF,
        (timestamp >> 48) & 0x0FFF,
        (clock_seq >> 8) & 0x3F,
        domain,
        node,
    )
    return _stamp(value, 2)


def uuid3(namespace: uuid.UUID | str, name: str | bytes) -> str:
    """Name-based UUID using MD5 (version 3).

    Deterministic: the same namespace and name always give the same UUID.
    """
    digest = hashlib.md5(_as_namespace(namespace).bytes + _name_bytes(name)).digest()
    return _stamp(int.from_bytes(digest[:16], "big"), 3)


def uuid4() -> str:
    """Random UUID (version 4) from the OS random source."""
    return _stamp(int.from_bytes(os.urandom(16), "big"), 4)


def uuid5(namespace: uuid.UUID | str, name: str | bytes) -> str:
    """Name-based UUID using SHA-1 (version 5)."""
    digest = hashlib.sha1(_as_namespace(namespace).bytes + _name_bytes(name)).digest()
    return _stamp(int.from_bytes(digest[:16], "big"), 5)


def uuid6(node: int | None = None, clock_seq: int | None = None) -> str:
    """Reordered time-based UUID (version 6).

    Same fields as version 1, but the timestamp is stored most significant
    bits first: 32 high bits, 16 middle bits, then 12 low bits next to the
    version nibble.
    """
    node, clock_seq = _validate_fields(node, clock_seq)
    timestamp = _gregorian_timestamp()
    value = _pack(
        (timestamp >> 28) & 0xFFFF_FFFF,
        (timestamp >> 12) & 0xFFFF,
        timestamp & 0x0FFF,
        (clock_seq >> 8) & 0x3F,
        clock_seq & 0xFF,
        node,
    )
    return _stamp(value, 6)


_GENERATORS = {
    1: uuid1,
    2: uuid2,
    3: uuid3,
    4: uuid4,
    5: uuid5,
    6: uuid6,
}


def generate_uuid(version: int = 4, *args, **kwargs) -> str:
    """Generate a UUID of the requested version.

    Extra arguments are forwarded to the version's generator, e.g.
    ``generate_uuid(5, NAMESPACE_DNS, "example.com")``.

    Raises:
        ValueError: If version is not between 1 and 6
    """
    try:
        generator = _GENERATORS[version]
    except KeyError:
        raise ValueError(f"Unsupported UUID version {version}, expected 1-6") from None
    log.debug(f"Generating UUID version {version}")
    return generator(*args, **kwargs)


def uuid_timestamp(value: str | uuid.UUID) -> datetime:
    """Creation time encoded in a version 1 or 6 UUID, as an aware UTC datetime.

    Raises:
        ValueError: If the UUID is not time-based
    """
    parsed = value if isinstance(value, uuid.UUID) else uuid.UUID(value)
    number = parsed.int
    time_low = (number >> 96) & 0xFFFF_FFFF
    time_mid = (number >> 80) & 0xFFFF
    time_hi = (number >> 64) & 0x0FFF

    if parsed.version == 1:
        timestamp = (time_hi << 48) | (time_mid << 32) | time_low
    elif parsed.version == 6:
        timestamp = (time_low << 28) | (time_mid << 12) | time_hi
    else:
        raise ValueError(f"UUID version {parsed.version} does not carry a full timestamp")
    return _GREGORIAN_EPOCH + timedelta(microseconds=timestamp // 10)
