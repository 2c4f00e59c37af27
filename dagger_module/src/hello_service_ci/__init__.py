"""CI pipeline for the hello service."""

from .main import HelloServiceCi as HelloServiceCi
