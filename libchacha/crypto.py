# -*- coding: utf-8 -*-
from Crypto.Random import get_random_bytes

from libchacha.common import check_size
from libchacha.pureChaCha20 import chacha20, little8_u32, little3_u32
from libchacha.pureChaCha20 import CHACHA20_KEY_SIZE, CHACHA20_NONCE_SIZE, CHACHA20_ROUNDS


def key_words(key):
    """Return the 32 byte `key` as a list of 8 little-endian words."""
    return list(little8_u32.unpack(check_size('key', key, CHACHA20_KEY_SIZE)))


def nonce_words(nonce):
    """Return the 12 byte `nonce` as a list of 3 little-endian words."""
    return list(little3_u32.unpack(check_size('nonce', nonce, CHACHA20_NONCE_SIZE)))


def chacha20_encrypt(key, nonce, data, counter=0, rounds=CHACHA20_ROUNDS):
    """Encrypt and return `data` with ChaCha20 starting at block `counter`."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('data must be bytes-like, not %s' % type(data).__name__)
    buf = bytearray(data)
    chacha20(key_words(key), counter, nonce_words(nonce), buf, rounds)
    return bytes(buf)

chacha20_decrypt = chacha20_encrypt


def keystream(key, nonce, length, counter=0, rounds=CHACHA20_ROUNDS):
    """Return the first `length` keystream bytes from block `counter` on."""
    if length < 0:
        raise ValueError('length must not be negative')
    return chacha20_encrypt(key, nonce, bytes(length), counter, rounds)


def new_key():
    """Return a fresh random 32 byte key."""
    return get_random_bytes(CHACHA20_KEY_SIZE)


def new_nonce():
    """Return a fresh random 12 byte nonce."""
    return get_random_bytes(CHACHA20_NONCE_SIZE)


def xor(aa, bb):
    """Return a bytearray of a bytewise XOR of `aa` and `bb`."""
    return bytearray([a ^ b for a, b in zip(bytearray(aa), bytearray(bb))])
