# -*- coding: utf-8 -*-
from wikigrams.tokenizer import Tokenizer


def sentences(text, method="default"):
    return list(Tokenizer(method).sentences(text))


def test_brackets_and_quotes():
    assert sentences(u'He said "hello there" (quietly).') == [
        ['He', 'said', '``', 'hello', 'there', "''", '-LRB-', 'quietly', '-RRB-', '.'],
    ]


def test_typographic_quotes():
    assert sentences(u'A “quoted” word') == [
        ['A', '``', 'quoted', "''", 'word'],
    ]


def test_square_brackets_stay_literal():
    assert sentences(u'See [1] here') == [['See', '[', '1', ']', 'here']]


def test_sentence_split():
    assert sentences(u'First one. Second one!') == [
        ['First', 'one', '.'],
        ['Second', 'one', '!'],
    ]


def test_closing_quote_stays_with_sentence():
    assert sentences(u'He said "Stop." Then he left.') == [
        ['He', 'said', '``', 'Stop', '.', "''"],
        ['Then', 'he', 'left', '.'],
    ]


def test_contractions():
    assert sentences(u"I can't go, it's late") == [
        ['I', 'ca', "n't", 'go', ',', 'it', "'s", 'late'],
    ]


def test_abbreviations_and_numbers():
    assert sentences(u'The U.S. had 3.14 and 1,000 cats') == [
        ['The', 'U.S.', 'had', '3.14', 'and', '1,000', 'cats'],
    ]


def test_hyphenated_word():
    assert sentences(u'a well-known fact') == [['a', 'well-known', 'fact']]


def test_whitespace_method():
    assert sentences(u'a (b) c.', method='whitespace') == [['a', '(b)', 'c.']]


def test_any_text_is_tokenized():
    result = sentences(u'¿Qué? → ok\t§¶ ~~')
    assert result
    assert all(isinstance(t, str) and t for s in result for t in s)


def test_methods():
    tkz = Tokenizer()
    assert 'ptb' in tkz.methods
    assert 'whitespace' in tkz.methods
    assert 'default' in tkz.methods
