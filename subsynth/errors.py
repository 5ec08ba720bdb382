"""Exceptions raised by the synthesizer."""


class SynthesisError(Exception):
    """Base class for every structural failure of a synthesis run."""


class EmptyChoice(SynthesisError):
    """A uniform choice was attempted over an empty candidate set."""


class EmptySchema(SynthesisError):
    """The domain schema declares nothing to generate from."""


class InvalidRange(SynthesisError):
    """A range or count supplied to the synthesizer is not usable."""


class DomainParseError(SynthesisError):
    """A domain file could not be read into a schema."""

    def __init__(self, message: str, filename: str = "<domain>", line: int = 0) -> None:
        self.filename = filename
        self.line = line
        location = f"{filename}:{line}" if line else filename
        super().__init__(f"{location}: {message}")
