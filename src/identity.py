"""Person identifier derivation."""

import hashlib

# Unit separator keeps ("Ann", "aLee") and ("Anna", "Lee") apart.
_FIELD_SEPARATOR = "\x1f"


def generate_id(firstname: str, lastname: str, birthday: str) -> int:
    """
    Derive a stable numeric id from first name, last name and birthday.

    The id is the first 128 bits of a BLAKE2b digest, so it is identical across
    processes and interpreter runs. Two people with the same three fields still
    share an id; the registry rejects the second one as a duplicate.
    """
    data = _FIELD_SEPARATOR.join((firstname, lastname, birthday)).encode("utf-8")
    digest = hashlib.blake2b(data, digest_size=16).digest()
    return int.from_bytes(digest, "big")
