import pytest

from lineforth import EndOfInputError, Token, Tokenizer


def all_tokens(line):
    return list(Tokenizer(line).tokens())


def test_splits_on_whitespace():
    assert all_tokens("  3 4\t+ . ") == [
        Token('3', False), Token('4', False), Token('+', False), Token('.', False)]


def test_string_literal():
    assert all_tokens('." hello world" cr') == [
        Token('hello world', True), Token('cr', False)]


def test_unterminated_string_runs_to_end_of_line():
    assert all_tokens('." abc') == [Token('abc', True)]


def test_empty_string_literal_is_end_of_input():
    with pytest.raises(EndOfInputError):
        Tokenizer('." "').next_token()


def test_dot_quote_without_space_is_a_word():
    assert all_tokens('."hi"') == [Token('."hi"', False)]


def test_comment_is_skipped():
    assert all_tokens("dup ( n -- n n ) +") == [Token('dup', False), Token('+', False)]


def test_trailing_comment_is_end_of_input():
    tokenizer = Tokenizer("5 ( trailing )")
    assert tokenizer.next_token() == Token('5', False)
    assert tokenizer.has_more()
    with pytest.raises(EndOfInputError):
        tokenizer.next_token()


def test_paren_without_space_is_a_word():
    assert all_tokens("(x)") == [Token('(x)', False)]


def test_has_more():
    tokenizer = Tokenizer(" a   ")
    assert tokenizer.has_more()
    tokenizer.next_token()
    assert not tokenizer.has_more()


def test_next_token_on_empty_line():
    with pytest.raises(EndOfInputError):
        Tokenizer("   ").next_token()


@pytest.mark.parametrize('line, expected', [
    (": foo 1 ;", True),
    ("   : foo", True),
    (":foo", True),
    ("1 : foo", False),
    ("", False),
])
def test_is_definition_start(line, expected):
    assert Tokenizer(line).is_definition_start() == expected


@pytest.mark.parametrize('line, expected', [
    (": foo 1 ;", True),
    ("dup + ;   ", True),
    ("1 2+;", True),
    ("; dup", False),
    ("dup +", False),
])
def test_is_definition_end(line, expected):
    assert Tokenizer(line).is_definition_end() == expected


def test_boundary_checks_ignore_cursor():
    tokenizer = Tokenizer(": sq dup * ;")
    for _ in tokenizer.tokens():
        pass
    assert tokenizer.is_definition_start()
    assert tokenizer.is_definition_end()
