# -*- coding: utf-8 -*-

U32_MAX = 0xffffffff


class ChaChaParameterError(ValueError): pass


def check_u32(name, value):
    """Raise `ChaChaParameterError` unless `value` fits an unsigned 32-bit word."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ChaChaParameterError('%s must be an int, not %s' % (name, type(value).__name__))
    if not 0 <= value <= U32_MAX:
        raise ChaChaParameterError('%s out of range: %#x' % (name, value))
    return value


def check_words(name, words, count):
    """
    Return `words` as a list of `count` unsigned 32-bit ints. A wrong
    length or any out of range word raises `ChaChaParameterError`.
    """
    if isinstance(words, (bytes, bytearray, memoryview, str)):
        raise ChaChaParameterError('%s must be a sequence of 32-bit ints, not raw bytes;'
                                   ' convert with libchacha.crypto.%s_words' % (name, name))
    words = list(words)
    if len(words) != count:
        raise ChaChaParameterError('%s must be %d words, got %d' % (name, count, len(words)))
    for i, word in enumerate(words):
        check_u32('%s[%d]' % (name, i), word)
    return words


def check_size(name, data, size):
    """Raise `ChaChaParameterError` unless the bytes `data` are `size` long."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError('%s must be bytes-like, not %s' % (name, type(data).__name__))
    view = memoryview(data)
    if view.nbytes != size:
        raise ChaChaParameterError("%s length isn't %d bytes." % (name, size))
    return view.tobytes()
