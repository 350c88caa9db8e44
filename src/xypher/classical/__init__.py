from __future__ import annotations


def register_all() -> None:
    from .monoalphabetic import affine, atbash, caesar, rot13  # noqa: F401
