class APIError(Exception):
    """
    Error response classified from the Serper API itself.

    Network failures, cancellation and undecodable success bodies are not
    wrapped in this type; they surface as httpx / pydantic exceptions.
    """

    UNKNOWN_MESSAGE = "unknown error"

    def __init__(self, status_code: int, message: str = UNKNOWN_MESSAGE):
        self.status_code = status_code
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"serper api error: {self.message} (status {self.status_code})"
