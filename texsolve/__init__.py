"""Tokenize LaTeX-style math expressions, model expression trees and render errors against the source."""

__version__ = "0.1.0"