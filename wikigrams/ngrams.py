#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from collections import Counter, deque
from itertools import islice


class FrequencyTable(Counter):
    """Occurrence counts keyed by space-joined n-gram"""


class NgramCounter(object):
    def __init__(self, n, table=None):
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError(u'N-gram size must be an integer, got {!r}'.format(n))
        if n <= 0:
            raise ValueError(u'N-gram size must be positive, got {}'.format(n))
        self.n = n
        if table is None:
            table = FrequencyTable()
        self.table = table

    def __len__(self):
        return len(self.table)

    def __getitem__(self, ngram):
        return self.table[ngram]

    def ngrams(self, context):
        tokens = iter(context)
        window = deque(islice(tokens, self.n - 1), maxlen=self.n)
        for token in tokens:
            window.append(token)
            yield tuple(window)

    def add(self, context):
        table = self.table
        for ngram in self.ngrams(context):
            table[u' '.join(ngram)] += 1

    def update(self, contexts):
        for context in contexts:
            self.add(context)
        return self.table

    def merge(self, other):
        if isinstance(other, NgramCounter):
            if other.n != self.n:
                raise ValueError(u'Cannot merge {}-gram counts into {}-gram counts'.format(other.n, self.n))
            other = other.table
        self.table.update(other)
        return self.table


def count_ngrams(n, contexts):
    return NgramCounter(n).update(contexts)
