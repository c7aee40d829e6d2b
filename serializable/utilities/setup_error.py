class SetupError(Exception):
    """Exception raised when a class registry is configured with invalid or conflicting settings."""
    
    def __init__(self, message: str, setting: str | None = None):
        self.message = message
        self.setting = setting
        super().__init__(self.message)
