# -*- coding: utf-8 -*-
from collections import Counter

import pytest

from wikigrams.ngrams import FrequencyTable, NgramCounter, count_ngrams


def test_bigrams():
    assert count_ngrams(2, [['A', 'B', 'C']]) == {'A B': 1, 'B C': 1}


def test_unigrams():
    assert count_ngrams(1, [['A', 'B', 'A']]) == {'A': 2, 'B': 1}


def test_short_context_contributes_nothing():
    assert count_ngrams(3, [['A', 'B'], []]) == {}


def test_windows():
    counter = NgramCounter(3)
    assert list(counter.ngrams(['A', 'B', 'C', 'D'])) == [('A', 'B', 'C'), ('B', 'C', 'D')]


def test_ngrams_do_not_cross_contexts():
    table = count_ngrams(2, [['A', 'B'], ['C', 'D']])
    assert 'B C' not in table
    assert table == {'A B': 1, 'C D': 1}


@pytest.mark.parametrize('n', [0, -1, '2', 2.0, None, True])
def test_invalid_size(n):
    with pytest.raises(ValueError):
        NgramCounter(n)


def test_table_type():
    counter = NgramCounter(2)
    counter.add(['X', 'Y'])
    assert isinstance(counter.table, FrequencyTable)
    assert isinstance(counter.table, Counter)
    assert counter['X Y'] == 1
    assert counter['Y Z'] == 0
    assert len(counter) == 1


def test_counting_is_additive():
    c1 = [['THE', 'CAT', 'SAT'], ['THE', 'CAT']]
    c2 = [['A', 'CAT', 'SAT', 'THE', 'CAT']]
    together = count_ngrams(2, c1 + c2)
    separate = count_ngrams(2, c1) + count_ngrams(2, c2)
    assert together == separate
    assert together['THE CAT'] == 3


def test_merge_shards():
    contexts = [['A', 'B', 'C'], ['B', 'C', 'D'], ['A', 'B']]
    whole = count_ngrams(2, contexts)
    shard1 = NgramCounter(2)
    shard1.update(contexts[:1])
    shard2 = NgramCounter(2)
    shard2.update(contexts[1:])
    assert shard1.merge(shard2) == whole
    assert shard1.merge(Counter({'A B': 1}))['A B'] == whole['A B'] + 1


def test_merge_different_sizes():
    with pytest.raises(ValueError):
        NgramCounter(2).merge(NgramCounter(3))


def test_shared_table():
    table = FrequencyTable()
    NgramCounter(1, table).update([['A']])
    NgramCounter(1, table).update([['A', 'B']])
    assert table == {'A': 2, 'B': 1}


def test_update_consumes_generator():
    contexts = (['A', 'B'] for _ in range(3))
    assert count_ngrams(2, contexts) == {'A B': 3}
