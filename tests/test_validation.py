import pytest

from roomchat.validation import (
    MessageRejected,
    check_new_username,
    check_outgoing_message,
    count_useful_chars,
    has_visible_chars,
)


def test_count_ignores_line_breaks_and_tabs():
    assert count_useful_chars("a\nb\r\tc") == count_useful_chars("abc")
    assert count_useful_chars("\n\r\t") == 0
    assert count_useful_chars("") == 0


def test_count_includes_spaces_and_unicode():
    text = "привет мир 😊"
    assert count_useful_chars(text) == len(text)


def test_count_never_exceeds_length():
    for text in ["x\ny", "\t\t", "a b c", "\r\n\r\n"]:
        assert 0 <= count_useful_chars(text) <= len(text)


@pytest.mark.parametrize("text", ["", " ", "\n\t\r ", "   \n"])
def test_has_visible_chars_false_for_blank(text):
    assert has_visible_chars(text) is False


@pytest.mark.parametrize("text", ["a", "  x  ", "\n😊\n"])
def test_has_visible_chars_true(text):
    assert has_visible_chars(text) is True


def test_outgoing_message_returns_count():
    assert check_outgoing_message("hi\nthere", 100) == count_useful_chars("hi\nthere")


def test_outgoing_message_at_limit_accepted():
    text = "a" * 10
    assert check_outgoing_message(text, 10) == len(text)


def test_outgoing_message_over_limit_rejected():
    text = "a" * 11
    with pytest.raises(MessageRejected) as info:
        check_outgoing_message(text, 10)
    assert info.value.count == len(text)
    assert info.value.limit == 10


def test_line_breaks_do_not_count_toward_limit():
    text = "a" * 10 + "\n\n\n"
    assert check_outgoing_message(text, 10) == 10


def test_empty_message_rejected():
    with pytest.raises(MessageRejected):
        check_outgoing_message("", 10)


def test_whitespace_message_rejected():
    with pytest.raises(MessageRejected) as info:
        check_outgoing_message("   \n\t", 10)
    assert info.value.count is None


def test_rejection_is_value_error():
    with pytest.raises(ValueError):
        check_outgoing_message(" ", 5)


def test_new_username_gets_prefix():
    assert check_new_username("bob", "@alice") == "@bob"


def test_new_username_same_as_current_rejected():
    with pytest.raises(MessageRejected):
        check_new_username("alice", "@alice")


@pytest.mark.parametrize("name", ["", "@bob"])
def test_new_username_empty_or_prefixed_rejected(name):
    with pytest.raises(MessageRejected):
        check_new_username(name, "@alice")


def test_new_username_unicode():
    assert check_new_username("Иван", "@alice") == "@Иван"