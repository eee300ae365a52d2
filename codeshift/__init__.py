"""codeshift: streamed code translation through local language-model servers."""

__version__ = "0.1.0"
