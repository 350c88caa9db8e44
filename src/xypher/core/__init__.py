from .alphabet import ALPHA_MAP, ALPHABET, index_of, letter_of
from .encoder import Encoder
from .errors import (
    IndexOutOfRange,
    InvalidConfiguration,
    InvalidInput,
    NotFound,
    PersistenceError,
    UnknownType,
    XypherError,
)
from .registry import (
    ARG_DELIM,
    cipher_from_canonical_name,
    cipher_from_parameters,
    list_cipher_types,
    register_cipher,
)

__all__ = [
    "ALPHABET",
    "ALPHA_MAP",
    "ARG_DELIM",
    "Encoder",
    "IndexOutOfRange",
    "InvalidConfiguration",
    "InvalidInput",
    "NotFound",
    "PersistenceError",
    "UnknownType",
    "XypherError",
    "cipher_from_canonical_name",
    "cipher_from_parameters",
    "index_of",
    "letter_of",
    "list_cipher_types",
    "register_cipher",
]
