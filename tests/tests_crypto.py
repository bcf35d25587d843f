# -*- coding: utf-8 -*-
import os
from array import array
import unittest

from Crypto.Cipher import ChaCha20 as ReferenceChaCha20

from libchacha import ChaChaParameterError
from libchacha.crypto import key_words, nonce_words, chacha20_encrypt, chacha20_decrypt
from libchacha.crypto import keystream, new_key, new_nonce, xor

from tests.tests import KEY, NONCE_BLOCK, BLOCK_VECTOR, SUNSCREEN_CIPHERTEXT, sunscreen

RAW_KEY = bytes(range(32))
RAW_NONCE = bytes.fromhex('000000000000004a00000000')


def reference_encrypt(key, nonce, data, counter):
    cipher = ReferenceChaCha20.new(key=key, nonce=nonce)
    cipher.seek(64 * counter)
    return cipher.encrypt(data)


class TestWords(unittest.TestCase):
    def test_key_words(self):
        self.assertEqual(key_words(RAW_KEY), KEY)
        self.assertEqual(key_words(bytearray(RAW_KEY)), KEY)

    def test_nonce_words(self):
        self.assertEqual(nonce_words(bytes.fromhex('000000090000004a00000000')), NONCE_BLOCK)

    def test_wide_memoryview(self):
        self.assertRaises(ChaChaParameterError, key_words, memoryview(array('I', range(32))))
        self.assertRaises(ChaChaParameterError, nonce_words, memoryview(array('I', range(12))))
        self.assertEqual(key_words(memoryview(RAW_KEY).cast('I')), KEY)

    def test_bad_lengths(self):
        self.assertRaises(ChaChaParameterError, key_words, bytes(31))
        self.assertRaises(ChaChaParameterError, nonce_words, bytes(16))
        self.assertRaises(TypeError, key_words, list(range(32)))


class TestEncrypt(unittest.TestCase):
    def test_sunscreen(self):
        self.assertEqual(chacha20_encrypt(RAW_KEY, RAW_NONCE, sunscreen(), counter=1),
                         SUNSCREEN_CIPHERTEXT)
        self.assertEqual(chacha20_decrypt(RAW_KEY, RAW_NONCE, SUNSCREEN_CIPHERTEXT, counter=1),
                         sunscreen())

    def test_input_not_modified(self):
        data = bytearray(b'banana')
        out = chacha20_encrypt(RAW_KEY, RAW_NONCE, data)
        self.assertEqual(data, bytearray(b'banana'))
        self.assertIsInstance(out, bytes)

    def test_empty(self):
        self.assertEqual(chacha20_encrypt(RAW_KEY, RAW_NONCE, b''), b'')

    def test_not_bytes(self):
        self.assertRaises(TypeError, chacha20_encrypt, RAW_KEY, RAW_NONCE, 'banana')

    def test_keystream(self):
        nonce = bytes.fromhex('000000090000004a00000000')
        self.assertEqual(keystream(RAW_KEY, nonce, 64, counter=1), BLOCK_VECTOR)
        self.assertEqual(keystream(RAW_KEY, nonce, 10, counter=1), BLOCK_VECTOR[:10])
        self.assertEqual(keystream(RAW_KEY, nonce, 0), b'')
        self.assertRaises(ValueError, keystream, RAW_KEY, nonce, -1)

    def test_against_pycryptodome(self):
        for length, counter in ((1, 0), (64, 1), (100, 2), (257, 1000), (1024, 0xffff0000)):
            key, nonce, data = os.urandom(32), os.urandom(12), os.urandom(length)
            self.assertEqual(chacha20_encrypt(key, nonce, data, counter),
                             reference_encrypt(key, nonce, data, counter))


class TestRandom(unittest.TestCase):
    def test_new_key(self):
        self.assertEqual(len(new_key()), 32)
        self.assertNotEqual(new_key(), new_key())

    def test_new_nonce(self):
        self.assertEqual(len(new_nonce()), 12)
        self.assertNotEqual(new_nonce(), new_nonce())

    def test_usable(self):
        key, nonce = new_key(), new_nonce()
        ciphertext = chacha20_encrypt(key, nonce, b'attack at dawn')
        self.assertEqual(chacha20_decrypt(key, nonce, ciphertext), b'attack at dawn')


class TestXor(unittest.TestCase):
    def test_xor(self):
        self.assertEqual(xor(b'', b''), b'')
        self.assertEqual(xor(b'\x01\x01', b'\x00\x01'), b'\x01\x00')
        self.assertEqual(xor(b'banana', b'ananas'), b'\x03\x0f\x0f\x0f\x0f\x12')

    def test_xor_keystream(self):
        nonce = bytes.fromhex('000000090000004a00000000')
        data = b'x' * 64
        self.assertEqual(xor(data, keystream(RAW_KEY, nonce, 64, 1)),
                         chacha20_encrypt(RAW_KEY, nonce, data, 1))


if __name__ == '__main__':
    unittest.main()
