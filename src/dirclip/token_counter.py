"""Counter for tokens, lines, and characters in the copied payload.

Line and character counts are always available. Token counts use OpenAI's
tiktoken library, which is an optional dependency (the 'token_counting' extra);
they give a useful estimate of how much of a chat model's context window a
payload will take.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from dirclip.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def check_tiktoken_available() -> bool:
    """Check if the tiktoken library is available.

    Returns:
        True if tiktoken is installed, False otherwise.
    """
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running counter for tokens, lines, and characters.

    Without a model, only lines and characters are counted and token counts are None.
    With a model, tiktoken must be installed and the model's encoding is used.

    Attributes:
        model (Optional[str]): Name of the model whose tokenizer to use, or None.
        encoder (Optional[Any]): The tiktoken encoding, or None when tokens are not counted.

    Example:
        >>> counter = TokenCounter()
        >>> counter.count("Hello\\nworld!")
        CountResult(lines=1, tokens=None, characters=12)

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken does not know the model.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(self.model)

        self._total_tokens: Optional[int] = 0 if self.encoder is not None else None
        self._total_lines = 0
        self._total_characters = 0

    @staticmethod
    def _get_encoder(model: str) -> Any:
        # Imported here so the module loads without the optional dependency
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported "
                "model like 'gpt-4' (cl100k_base encoding) for an approximate token count."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens, and characters in text and add them to the running totals.

        Raises:
            TokenizationError: If token counting is enabled but the encoder fails.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}") from e
            self._total_tokens = (self._total_tokens or 0) + tokens

        self._total_lines += lines
        self._total_characters += chars
        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        """Total tokens counted so far, or None if token counting is disabled."""
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters

    def reset_counts(self) -> None:
        """Reset all running totals while keeping the tokenizer configuration."""
        self._total_tokens = 0 if self.encoder is not None else None
        self._total_lines = 0
        self._total_characters = 0
