class SequenceQueryError(Exception):
    """base class for errors raised by seqquery itself (not by user callbacks)"""


class EmptySequenceError(SequenceQueryError, ValueError):
    """an operation needed at least one element and had no default to fall back on"""


class SerializationError(SequenceQueryError, ValueError):
    """the working sequence could not be encoded as json"""
