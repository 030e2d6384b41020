class SessionError(Exception):
    """Rejected session transition. `code` is the snake_case reason."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code
