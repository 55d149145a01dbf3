# Journal error types. Nothing here is fatal; the UI reports and carries on.


class JournalError(Exception):
    pass


class InvalidEntry(JournalError, ValueError):
    pass


class OutOfRange(JournalError, IndexError):
    pass


class InvalidPasscode(JournalError, ValueError):
    pass


# verify() returns False instead of raising; this is for callers that want an exception.
class PasscodeMismatch(JournalError):
    pass


class Locked(JournalError):
    pass


class PersistenceFailure(JournalError, RuntimeError):
    pass


class InvalidAccount(JournalError, ValueError):
    pass


class AccountExists(JournalError, ValueError):
    pass


class InvalidCredentials(JournalError, ValueError):
    pass
