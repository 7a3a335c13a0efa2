#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sequential reader of numeric values from an instance definition.

An instance file is a sequence of named values such as::

    numServers=2;
    P_max=[10,10];
    edges={<1,2,10,0,1>};

Names, ``=``, ``;`` and ``,`` only separate values and are skipped. Groups may be
opened with ``[``, ``{`` or ``<`` and must be closed by the matching bracket.
"""
import logging
import re

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"""
    (?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
  | (?P<name>[A-Za-z_][A-Za-z_0-9]*)
  | (?P<open>[\[{<])
  | (?P<close>[\]}>])
  | (?P<skip>[\s=;,]+)
  | (?P<error>.)
""", re.VERBOSE)

_CLOSING = {'[': ']', '{': '}', '<': '>'}


class InstanceFormatError(ValueError):
    """Raised when the instance definition does not follow the expected token layout."""


class InstanceReader:
    """
    Yields scalars, arrays and matrices of floats, in stream order.

    The whole stream is tokenized when the reader is created. The stream may be
    text or binary (decoded as UTF-8).
    """

    def __init__(self, stream):
        self.stream = stream
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        self.tokens = list(self._tokenize(data))
        """ (kind, text, line) triples, separators and names removed """
        self.position = 0
        logger.debug("Tokenized instance definition into %d tokens", len(self.tokens))

    @staticmethod
    def _tokenize(data):
        line = 1
        depth = 0
        previous = 'skip'
        for match in _TOKEN.finditer(data):
            kind = match.lastgroup
            text = match.group()
            if kind == 'error':
                raise InstanceFormatError("Unexpected character %r on line %d" % (text, line))
            # a number must be separated from a following number or name, e.g. "1.2.3" or "1x"
            if previous == 'number' and kind in ('number', 'name'):
                raise InstanceFormatError("Malformed number ending in %r on line %d" % (text, line))
            if kind == 'name' and depth > 0:
                raise InstanceFormatError("Unexpected name %r inside a group on line %d" % (text, line))
            if kind == 'open':
                depth += 1
            elif kind == 'close':
                depth = max(depth - 1, 0)
            if kind not in ('skip', 'name'):
                yield kind, text, line
            previous = kind
            line += text.count("\n")

    def _next(self, expected):
        if self.position >= len(self.tokens):
            raise InstanceFormatError("Expected %s but reached end of input" % expected)
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _expect_open(self, expected):
        kind, text, line = self._next(expected)
        if kind != 'open':
            raise InstanceFormatError("Expected %s on line %d, found %r" % (expected, line, text))
        return text

    def _expect_close(self, opener, line):
        kind, text, closing_line = self._next("'%s'" % _CLOSING[opener])
        if text != _CLOSING[opener]:
            raise InstanceFormatError(
                "Bracket %r opened on line %d closed by %r on line %d" % (opener, line, text, closing_line))

    def _peek(self):
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def single_value(self):
        """
        Returns:
            float: The next bare number.
        """
        kind, text, line = self._next("a number")
        if kind != 'number':
            raise InstanceFormatError("Expected a number on line %d, found %r" % (line, text))
        return float(text)

    def array(self):
        """
        Returns:
            list: The numbers of the next bracketed group.
        """
        line = self._peek()[2] if self._peek() else 0
        opener = self._expect_open("an array")
        values = []
        while True:
            token = self._peek()
            if token is not None and token[0] == 'number':
                values.append(self.single_value())
            else:
                self._expect_close(opener, line)
                return values

    def matrix(self):
        """
        Returns:
            list: The rows of the next bracketed group of groups. Row lengths are not checked.
        """
        line = self._peek()[2] if self._peek() else 0
        opener = self._expect_open("a matrix")
        rows = []
        while True:
            token = self._peek()
            if token is not None and token[0] == 'open':
                rows.append(self.array())
            else:
                self._expect_close(opener, line)
                return rows

    def close(self):
        self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
