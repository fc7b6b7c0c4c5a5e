from hashlib import md5


def id_for(url: str) -> str:
    """Derive the bookmark id for ``url``: hex MD5 of its UTF-8 bytes.

    No normalization happens, so ``http://e.com`` and ``http://e.com/`` get
    different ids.
    """
    if not isinstance(url, str):
        raise TypeError(f"bookmark url must be a string, got {type(url).__name__}")
    return md5(url.encode("utf-8")).hexdigest()
