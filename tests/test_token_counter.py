from unittest.mock import MagicMock, patch

import pytest

from dirclip.exceptions import TokenizationError, TokenizerNotAvailableError
from dirclip.token_counter import CountResult, TokenCounter, check_tiktoken_available


@pytest.fixture
def mock_tiktoken_available():
    with patch("importlib.util.find_spec", return_value=True):
        yield


@pytest.fixture
def mock_tiktoken_unavailable():
    with patch("importlib.util.find_spec", return_value=None):
        yield


@pytest.fixture
def mock_encoder():
    encoder = MagicMock()
    encoder.encode.side_effect = lambda text: text.split()  # One token per word
    return encoder


@pytest.fixture
def counter_with_model(mock_tiktoken_available, mock_encoder):
    with patch.object(TokenCounter, "_get_encoder", return_value=mock_encoder):
        yield TokenCounter(model="gpt-4")


def test_check_tiktoken_available(mock_tiktoken_available):
    assert check_tiktoken_available() is True


def test_check_tiktoken_unavailable(mock_tiktoken_unavailable):
    assert check_tiktoken_available() is False


def test_counter_without_model_counts_lines_and_characters():
    counter = TokenCounter()
    assert counter.encoder is None
    assert counter.count("Hello\nworld!") == CountResult(lines=1, tokens=None, characters=12)
    assert counter.get_total_tokens() is None


def test_counter_without_model_does_not_need_tiktoken(mock_tiktoken_unavailable):
    assert TokenCounter().count("x").characters == 1


def test_model_without_tiktoken(mock_tiktoken_unavailable):
    with pytest.raises(TokenizerNotAvailableError, match="pip install dirclip\\[token_counting\\]"):
        TokenCounter(model="gpt-4")


def test_count_with_model(counter_with_model):
    result = counter_with_model.count("one two three\n")
    assert result == CountResult(lines=1, tokens=3, characters=14)


def test_running_totals(counter_with_model):
    counter_with_model.count("a b\n")
    counter_with_model.count("c\nd\n")
    assert counter_with_model.get_total_tokens() == 4
    assert counter_with_model.get_total_lines() == 3
    assert counter_with_model.get_total_characters() == 8


def test_reset_counts(counter_with_model):
    counter_with_model.count("a b\n")
    counter_with_model.reset_counts()
    assert counter_with_model.get_total_tokens() == 0
    assert counter_with_model.get_total_lines() == 0
    assert counter_with_model.get_total_characters() == 0


def test_reset_counts_without_model():
    counter = TokenCounter()
    counter.count("abc")
    counter.reset_counts()
    assert counter.get_total_tokens() is None
    assert counter.get_total_characters() == 0


def test_tokenization_error(counter_with_model, mock_encoder):
    mock_encoder.encode.side_effect = RuntimeError("boom")
    with pytest.raises(TokenizationError, match="Failed to tokenize text: boom"):
        counter_with_model.count("text")


def test_unknown_model():
    pytest.importorskip("tiktoken")
    with pytest.raises(ValueError, match="Could not load tokenizer for model 'no-such-model'"):
        TokenCounter(model="no-such-model")
