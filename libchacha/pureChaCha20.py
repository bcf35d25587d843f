# -*- coding: utf-8 -*-

"""
    pureChaCha20.py -- a pure Python implementation of the ChaCha20 cipher
    ======================================================================

    ChaCha20 is Daniel J. Bernstein's refinement of Salsa20, in the
    variant standardised by RFC 8439: a 256-bit key, a 96-bit nonce and a
    32-bit block counter.  The 16-word state is laid out as

        cccccccc  cccccccc  cccccccc  cccccccc
        kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
        kkkkkkkk  kkkkkkkk  kkkkkkkk  kkkkkkkk
        bbbbbbbb  nnnnnnnn  nnnnnnnn  nnnnnnnn

    c=constant k=key b=blockcount n=nonce

    Every 64-byte block of keystream is the state after 20 rounds
    (10 column/diagonal double rounds) added word-wise to the state it
    started from.  Encryption and decryption are the same XOR.

    Sample usage:
        from libchacha.pureChaCha20 import ChaCha20
        c20 = ChaCha20(key, nonce, counter=1)
        dataout = c20.encryptBytes(datain)   # same for decrypt

    Or, with key and nonce already split into little-endian words:
        chacha20(key_words, counter, nonce_words, buf)   # buf changed in place

    The block counter is 32 bits.  Running past 2**32 blocks from one
    call wraps it back to zero and the keystream repeats; keeping nonces
    unique and messages short enough is the caller's job.  The wrap is
    logged, not raised.

    This is MUCH slower than a C implementation.  It is meant
    for cases where portability matters more than speed.
"""

import logging
from struct import Struct

from libchacha.common import (U32_MAX, ChaChaParameterError, check_u32,
                              check_words, check_size)

log = logging.getLogger(__name__)

little16_u32 = Struct("<16I")  # 16 little-endian 32-bit unsigned ints.
little8_u32 = Struct("<8I")
little3_u32 = Struct("<3I")

CHACHA20_BLOCK_SIZE = 64
CHACHA20_KEY_SIZE = 32
CHACHA20_NONCE_SIZE = 12
CHACHA20_ROUNDS = 20

# "expand 32-byte k"
CHACHA20_CONSTANTS = (0x61707865, 0x3320646e, 0x79622d32, 0x6b206574)

# ----------------------------- ChaCha20 class -----------------------------


class ChaCha20(object):
    """
    Holds a key, nonce, initial counter and round count.  The
    counter is not advanced by `encryptBytes`; each call encrypts from
    the configured counter, so two calls on the same data agree.
    """

    def __init__(self, key=None, nonce=None, counter=0, rounds=CHACHA20_ROUNDS):
        self.key = None
        self.nonce = None
        if key is not None:
            self.setKey(key)
        if nonce is not None:
            self.setNonce(nonce)
        self.setCounter(counter)
        self.setRounds(rounds)

    def setKey(self, key):
        key = check_size('key', key, CHACHA20_KEY_SIZE)
        self.key = list(little8_u32.unpack(key))

    def setNonce(self, nonce):
        nonce = check_size('nonce', nonce, CHACHA20_NONCE_SIZE)
        self.nonce = list(little3_u32.unpack(nonce))

    setIV = setNonce  # support an alternate name

    def setCounter(self, counter):
        self.counter = check_u32('counter', counter)

    def getCounter(self):
        return self.counter

    def setRounds(self, rounds, testing=False):
        if testing:
            if not isinstance(rounds, int) or rounds <= 0 or rounds % 2:
                raise ChaChaParameterError('rounds must be a positive even number')
        elif not isinstance(rounds, int) or rounds not in (8, 12, 20):
            raise ChaChaParameterError('rounds must be 8, 12, 20')
        self.rounds = rounds

    def encryptBytes(self, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError('data must be bytes or bytearray')
        if self.key is None or self.nonce is None:
            raise ChaChaParameterError('key and nonce must be set before encrypting')
        munged = bytearray(data)
        chacha20(self.key, self.counter, self.nonce, munged, self.rounds)
        return bytes(munged)

    decryptBytes = encryptBytes  # encrypt and decrypt use same function


# --------------------------------------------------------------------------

def chacha20(key, counter, nonce, data, rounds=CHACHA20_ROUNDS):
    """
    Encrypt or decrypt `data` in place.

    :param key: 8 ints, the key as little-endian 32-bit words
    :param counter: block counter of the first block
    :param nonce: 3 ints, the nonce as little-endian 32-bit words
    :param data: bytearray or writable memoryview, XORed with the keystream
    :param rounds: how many rounds per block
    """
    key = check_words('key', key, 8)
    nonce = check_words('nonce', nonce, 3)
    check_u32('counter', counter)
    _check_rounds(rounds)

    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError('data must be a mutable bytes-like object, not %s'
                        % type(data).__name__)
    if view.readonly:
        raise TypeError('data must be mutable')
    view = view.cast('B')

    state = list(CHACHA20_CONSTANTS) + key + [counter] + nonce

    lendata = len(view)
    nblocks = (lendata + CHACHA20_BLOCK_SIZE - 1) // CHACHA20_BLOCK_SIZE
    if nblocks and counter + nblocks - 1 > U32_MAX:
        log.warning('block counter wraps after %d of %d blocks, keystream repeats',
                    U32_MAX - counter + 1, nblocks)

    stream = bytearray()
    for _ in range(nblocks):
        stream += chacha20_block(state, rounds)
        state[12] = add32(state[12], 1)

    for i in range(lendata):
        view[i] ^= stream[i]


def chacha20_block(input_word, rounds=CHACHA20_ROUNDS):
    """
    Do a number of ChaCha rounds on a copy of the input
    :param input_word: list or tuple of 16 unsigned 32-bit ints
    :param rounds: how many rounds to run, an even number
    :return: 64-byte bytearray
    """
    x = list(input_word)

    for i in range(rounds // 2):
        # column round
        quarter_round(x, 0, 4, 8, 12)
        quarter_round(x, 1, 5, 9, 13)
        quarter_round(x, 2, 6, 10, 14)
        quarter_round(x, 3, 7, 11, 15)

        # diagonal round
        quarter_round(x, 0, 5, 10, 15)
        quarter_round(x, 1, 6, 11, 12)
        quarter_round(x, 2, 7, 8, 13)
        quarter_round(x, 3, 4, 9, 14)

    for i in range(16):
        x[i] = add32(x[i], input_word[i])
    return bytearray(little16_u32.pack(*x))


def quarter_round(x, a, b, c, d):
    """ARX mix of the words at indices a, b, c, d of `x`, in place."""
    x[a] = add32(x[a], x[b]); x[d] = rot32(x[d] ^ x[a], 16)
    x[c] = add32(x[c], x[d]); x[b] = rot32(x[b] ^ x[c], 12)
    x[a] = add32(x[a], x[b]); x[d] = rot32(x[d] ^ x[a], 8)
    x[c] = add32(x[c], x[d]); x[b] = rot32(x[b] ^ x[c], 7)


def _check_rounds(rounds):
    if not isinstance(rounds, int) or rounds <= 0 or rounds % 2:
        raise ChaChaParameterError('rounds must be a positive even number, got %r' % (rounds,))


# --------------------------- 32-bit ops -------------------------------

def add32(a, b):
    """ Add two 32-bit words discarding carry above 32nd bit. """
    return (a + b) & U32_MAX


def rot32(word, left_rotations):
    """ Rotate 32-bit word left by left_rotations bits. """
    left_rotations &= 31
    return ((word << left_rotations) & U32_MAX) | (word >> (32 - left_rotations))


# --------------------------------- end -----------------------------------
