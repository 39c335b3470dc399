class DatabaseError(Exception):
    def __init__(self, message: str, sqlstate: str | None = None):
        self.message = message
        self.sqlstate = sqlstate
        super().__init__(message)


class InvalidFilterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
