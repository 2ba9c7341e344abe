#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright (C) 2019—2021  wikigrams contributors
#
# This file is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#

"""Context extraction: from a tokenized sentence to clean token sequences.

A context is a run of tokens with no paired punctuation and no numbers
inside, each token reduced to the uppercase letters A-Z. Sentences are
carved into contexts by:

 * normalizing every token to Unicode NFKD;
 * splitting a closing quote ('') fused to the end of a token;
 * reattaching contraction suffixes ('s, n't...) to the preceding token;
 * pulling bracketed and quoted spans out as contexts of their own;
 * cutting contexts at tokens containing digits;
 * dropping every character that is not a letter.
"""

import re
import unicodedata
from itertools import tee

from wikigrams.tokenizer import Tokenizer

# opening delimiter -> closing delimiter
DELIMITERS = {'-LRB-': '-RRB-', '[': ']', '``': "''"}

CLOSING_QUOTE = "''"
APOSTROPHE = "'"
NEGATION = "n't"

digit = re.compile(r'[0-9]')
nonletters = re.compile(r'[^A-Z]+')


def normalize(token):
    try:
        return unicodedata.normalize('NFKD', token)
    except TypeError:
        # not a str, leave it as it came
        return token


def split_punctuation(tokens):
    for token in tokens:
        if token.endswith(CLOSING_QUOTE):
            yield token[:-len(CLOSING_QUOTE)]
            yield CLOSING_QUOTE
        else:
            yield token


def is_suffix(token):
    return token.startswith(APOSTROPHE) or token.lower() == NEGATION


def merge_contractions(tokens):
    """Glue a contraction suffix ('s, n't...) to the token before it.

    Works on a window of two adjacent tokens. Only the left token of a
    window is ever emitted on its own, so the last token of the stream
    survives only when it is merged into its predecessor.
    """
    first, second = tee(tokens)
    next(second, None)
    for left, right in zip(first, second):
        if is_suffix(right):
            yield left + right
        elif is_suffix(left):
            continue
        else:
            yield left


def split_delimiters(tokens, delimiters=DELIMITERS):
    """Split a token sequence into contexts by paired delimiters.

    The span between an opener and the first following occurrence of its
    closer becomes a separate context, processed in turn for its own
    delimiters. Delimiter tokens are dropped. An opener with no closer
    later in the sequence is dropped and its span stays in place.
    """
    closers = frozenset(delimiters.values())
    stack = [list(tokens)]
    while stack:
        sequence = stack.pop()
        context = []
        i = 0
        while i < len(sequence):
            token = sequence[i]
            if token in delimiters:
                try:
                    end = sequence.index(delimiters[token], i + 1)
                except ValueError:
                    i += 1
                    continue
                inner = sequence[i + 1:end]
                if inner:
                    stack.append(inner)
                i = end + 1
                continue
            if token not in closers:
                context.append(token)
            i += 1
        yield context


def split_numbers(context):
    rest = list(context)
    while True:
        for index, token in enumerate(rest):
            if digit.search(token):
                yield rest[:index]
                rest = rest[index + 1:]
                break
        else:
            yield rest
            return


def letters(token):
    return nonletters.sub('', token.upper())


def filter_letters(context):
    return [t for t in map(letters, context) if t]


class Processor(object):
    """Lazy chain turning article texts into contexts.

    Every stage is a generator: at any moment only the tokens of the
    sentence being processed are held in memory.
    """
    def __init__(self, tokenizer=None, delimiters=DELIMITERS):
        if tokenizer is None:
            tokenizer = Tokenizer()
        self.tokenizer = tokenizer
        self.delimiters = delimiters

    def paragraphs(self, text):
        return (p for p in text.split('\n\n') if p.strip())

    def sentence_contexts(self, tokens):
        merged = merge_contractions(split_punctuation(map(normalize, tokens)))
        for context in split_delimiters(merged, self.delimiters):
            for segment in split_numbers(context):
                segment = filter_letters(segment)
                if segment:
                    yield segment

    def contexts(self, text):
        for paragraph in self.paragraphs(text):
            for sentence in self.tokenizer.sentences(paragraph):
                for context in self.sentence_contexts(sentence):
                    yield context

    def iter_contexts(self, texts):
        for text in texts:
            for context in self.contexts(text):
                yield context
