class ContractViolation(ValueError):
    """Raised when the builder API is misused.

    Signals a programming error on the caller's side (an out of range
    percent, an annotation with coordinates but no length, ...), as opposed
    to an `OSError` coming from the filesystem or the output sink.
    """
