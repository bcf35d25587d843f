#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
import os
import argparse
import binascii
import logging

import libchacha
from libchacha.crypto import chacha20_encrypt, keystream, new_key, new_nonce

log = logging.getLogger('libchacha')


def parse_hex(name, value):
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        raise ValueError('%s is not a hex string: %r' % (name, value))


def read_input(path):
    if path == '-':
        return sys.stdin.buffer.read()
    with open(os.path.expanduser(path), 'rb') as rf:
        return rf.read()


def write_output(path, data):
    if path == '-':
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(os.path.expanduser(path), 'wb') as wf:
        wf.write(data)


def chacha_crypt(args):
    key = parse_hex('key', args.key)
    nonce = parse_hex('nonce', args.nonce)
    data = read_input(args.infile)
    log.debug('crypting %d bytes from block %d with %d rounds', len(data), args.counter, args.rounds)
    write_output(args.outfile, chacha20_encrypt(key, nonce, data, args.counter, args.rounds))


def chacha_keystream(args):
    key = parse_hex('key', args.key)
    nonce = parse_hex('nonce', args.nonce)
    print(binascii.hexlify(keystream(key, nonce, args.length, args.counter, args.rounds)).decode('ascii'))


def chacha_keygen(args):
    print('key:   %s' % binascii.hexlify(new_key()).decode('ascii'))
    print('nonce: %s' % binascii.hexlify(new_nonce()).decode('ascii'))


def chacha_help(args):
    print("Specify a command: crypt, keystream or keygen. Use -h for details.", file=sys.stderr, flush=True)


def main(argv):
    parser = argparse.ArgumentParser(description='Encrypt and decrypt with ChaCha20')
    subparsers = parser.add_subparsers(help='sub-command help')
    parser.add_argument('--debug', action='store_true', default=False,
                        help='enable debug mode')
    parser.set_defaults(func=chacha_help)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('key', help='256-bit key as 64 hex digits')
    common.add_argument('nonce', help='96-bit nonce as 24 hex digits')
    common.add_argument('-c', '--counter', type=int, default=0,
                        help='initial block counter')
    common.add_argument('-r', '--rounds', type=int, choices=(8, 12, 20), default=libchacha.CHACHA20_ROUNDS,
                        help='number of rounds')

    crypt_sparser = subparsers.add_parser('crypt', parents=[common])
    crypt_sparser.add_argument('infile', help="input file, '-' for stdin")
    crypt_sparser.add_argument('outfile', help="output file, '-' for stdout")
    crypt_sparser.set_defaults(func=chacha_crypt)

    keystream_sparser = subparsers.add_parser('keystream', parents=[common])
    keystream_sparser.add_argument('length', type=int, help='number of keystream bytes')
    keystream_sparser.set_defaults(func=chacha_keystream)

    keygen_sparser = subparsers.add_parser('keygen')
    keygen_sparser.set_defaults(func=chacha_keygen)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    try:
        args.func(args)
    except (ValueError, OSError) as ex:
        print(ex, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
