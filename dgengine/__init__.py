"""Core building blocks of a small game engine: messages, systems, shader reflection, textures and serialization."""

__version__ = "0.1.0"