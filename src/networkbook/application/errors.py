"""Errors raised while parsing and executing commands. All are recoverable: the model is left unchanged."""


class NetworkBookError(Exception):
    """Base class for errors shown to the user as feedback."""


class ParseError(NetworkBookError):
    """User input does not match the expected command format."""


class TokenizeFormatError(ParseError):
    """A prefix that may appear once was given more than once."""


class InvalidFieldFormat(ParseError):
    """A single field value failed validation."""


class DuplicateValue(ParseError):
    """Two values for one multi-valued field are the same after normalization."""


class NothingToEdit(ParseError):
    """An edit or add command did not specify any field."""


class CommandError(NetworkBookError):
    """A parsed command cannot be executed against the current model."""


class InvalidIndex(CommandError):
    """An index refers past the end of the displayed person list."""


class DataLoadingError(NetworkBookError):
    """The storage file exists but could not be read as a network book."""
