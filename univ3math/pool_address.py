"""Deterministic computation of pool contract addresses."""

from __future__ import annotations

from Crypto.Hash import keccak

POOL_INIT_CODE_HASH = bytes.fromhex(
    "e34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"
)
ZKSYNC_POOL_INIT_CODE_HASH = bytes.fromhex(
    "010013f177ea1fcbc4520f9a3ca7cd2d1d77959e05aa66484027cb38e712aeed"
)
ZKSYNC_CHAIN_ID = 324

_MAX_UINT24 = (1 << 24) - 1


def _keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def _address_bytes(address: str | bytes) -> bytes:
    if isinstance(address, bytes):
        raw = address
    else:
        text = address[2:] if address[:2].lower() == "0x" else address
        try:
            raw = bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError(f"invalid address: {address!r}") from exc
    if len(raw) != 20:
        raise ValueError(f"invalid address: {address!r}")
    return raw


def _hash_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        raw = value
    else:
        text = value[2:] if value[:2].lower() == "0x" else value
        raw = bytes.fromhex(text)
    if len(raw) != 32:
        raise ValueError("init code hash must be 32 bytes")
    return raw


def _to_checksum(raw: bytes) -> str:
    hex_address = raw.hex()
    digest = _keccak256(hex_address.encode("ascii")).hex()
    return "0x" + "".join(
        ch.upper() if ch.isalpha() and int(nibble, 16) >= 8 else ch
        for ch, nibble in zip(hex_address, digest)
    )


def _create2(factory: bytes, salt: bytes, init_code_hash: bytes) -> bytes:
    return _keccak256(b"\xff" + factory + salt + init_code_hash)[12:]


def _zksync_create2(
    sender: bytes, bytecode_hash: bytes, salt: bytes, input_data: bytes = b""
) -> bytes:
    prefix = _keccak256(b"zksyncCreate2")
    payload = prefix + sender.rjust(32, b"\0") + salt + bytecode_hash + _keccak256(input_data)
    return _keccak256(payload)[12:]


def compute_pool_address(
    factory: str | bytes,
    token_a: str | bytes,
    token_b: str | bytes,
    fee: int,
    init_code_hash_manual_override: str | bytes | None = None,
    chain_id: int | None = None,
) -> str:
    """Return the checksummed address of the pool for two tokens and a fee tier.

    The tokens may be given in either order. Raises ValueError("ADDRESSES")
    if both tokens are the same.
    """
    factory_raw = _address_bytes(factory)
    a, b = _address_bytes(token_a), _address_bytes(token_b)
    if a == b:
        raise ValueError("ADDRESSES")
    token_0, token_1 = (a, b) if a < b else (b, a)

    fee_value = int(fee)
    if not 0 <= fee_value <= _MAX_UINT24:
        raise ValueError("fee must fit in 24 bits")

    encoded = (
        token_0.rjust(32, b"\0")
        + token_1.rjust(32, b"\0")
        + fee_value.to_bytes(32, "big")
    )
    salt = _keccak256(encoded)

    if chain_id == ZKSYNC_CHAIN_ID:
        code_hash = (
            _hash_bytes(init_code_hash_manual_override)
            if init_code_hash_manual_override is not None
            else ZKSYNC_POOL_INIT_CODE_HASH
        )
        return _to_checksum(_zksync_create2(factory_raw, code_hash, salt))

    code_hash = (
        _hash_bytes(init_code_hash_manual_override)
        if init_code_hash_manual_override is not None
        else POOL_INIT_CODE_HASH
    )
    return _to_checksum(_create2(factory_raw, salt, code_hash))