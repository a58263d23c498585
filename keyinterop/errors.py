class KeyInteropError(Exception):
    pass


class DecodeError(KeyInteropError):
    """Malformed DER input, reported with the cursor offset of the failed check."""

    def __init__(self, message, position, cause=None):
        super().__init__(message)
        self.message = message
        self.position = position
        self.cause = cause
        if(cause is not None):
            self.__cause__ = cause

    def __str__(self):
        return self.message + ' (Position ' + str(self.position) + ')'


class KeyFileError(KeyInteropError):
    pass
