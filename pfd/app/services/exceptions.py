class ValidationError(Exception):
    """Raised when user input is rejected before reaching the backend"""
    def __init__(self, message="Invalid input"):
        self.message = message
        super().__init__(self.message)
