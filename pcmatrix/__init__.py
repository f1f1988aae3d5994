"""Producer-consumer bounded buffer that generates and multiplies matrices."""

__version__ = "0.1.0"