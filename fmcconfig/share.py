"""Share links: pack the stored settings into a URL query and unpack them."""

from __future__ import annotations

import base64
import binascii
import json
import re
import zlib
from urllib.parse import parse_qsl

from fmcconfig.storage import Store

_BASE64_URL = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def _deflate(data: bytes) -> bytes:
    compressor = zlib.compressobj(9, zlib.DEFLATED, -zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def _inflate(data: bytes) -> bytes:
    decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
    try:
        result = decompressor.decompress(data)
    except zlib.error as exc:
        raise ValueError(f"invalid compressed settings: {exc}") from None
    if not decompressor.eof:
        raise ValueError("truncated compressed settings")
    return result


def encode_settings(store: Store) -> str:
    """Return the store's namespaced entries as compressed, URL-safe base64 JSON."""
    serialized = json.dumps(
        store.items(), separators=(",", ":"), ensure_ascii=False, sort_keys=True
    )
    return base64.urlsafe_b64encode(_deflate(serialized.encode("utf-8"))).decode("ascii")


def decode_settings(encoded: str) -> dict[str, str]:
    """Decode settings produced by :func:`encode_settings`.

    Plain (uncompressed) base64 JSON is accepted as well.
    """
    if not _BASE64_URL.fullmatch(encoded):
        raise ValueError(f"invalid base64 settings: {encoded!r}")
    try:
        raw = base64.urlsafe_b64decode(encoded)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 settings: {exc}") from None
    if raw[:1] != b"{":
        raw = _inflate(raw)
    values = json.loads(raw.decode("utf-8"))
    if not isinstance(values, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in values.items()
    ):
        raise ValueError("settings must map strings to strings")
    return values


def share_query(store: Store) -> str:
    """Return the query string of a link that opens with these settings."""
    return f"?local=true&settings={encode_settings(store)}"


def load_query(query: str, store: Store) -> bool:
    """Apply the settings carried by ``query`` to ``store``.

    Returns whether the session should use its own, local storage: that is
    the case when ``local=true`` is given or when settings are carried.
    """
    if "?" in query:
        query = query.split("?", 1)[1]
    query = query.split("#", 1)[0]
    pairs = parse_qsl(query, keep_blank_values=True)

    local = next((v for k, v in pairs if k == "local"), None)
    is_local = local == "true"

    settings = next((v for k, v in pairs if k == "settings"), None)
    if settings is not None:
        values = decode_settings(settings)
        store.replace(values)
        is_local = True
    return is_local