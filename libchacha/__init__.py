# -*- coding: utf-8 -*-
"""
A pure Python ChaCha20 stream cipher.

The core entry point works on key and nonce already split into
little-endian 32-bit words and changes the buffer in place::

    >>> buf = bytearray(b'attack at dawn')
    >>> libchacha.encrypt_or_decrypt(key, 1, nonce, buf)

`libchacha.crypto` has helpers for raw byte keys and nonces.
"""
import logging

from libchacha.common import ChaChaParameterError
from libchacha.pureChaCha20 import ChaCha20, chacha20, chacha20_block, quarter_round
from libchacha.pureChaCha20 import CHACHA20_BLOCK_SIZE, CHACHA20_ROUNDS

logging.getLogger(__name__).addHandler(logging.NullHandler())

encrypt_or_decrypt = chacha20


def new(key, nonce, counter=0, rounds=CHACHA20_ROUNDS):
    """
    Create a `ChaCha20` object from a 32 byte `key` and a 12 byte `nonce`.
    Encryption with the object starts at block `counter`.
    """
    return ChaCha20(key, nonce, counter=counter, rounds=rounds)
