class OrchestrationTimeoutException(Exception):
    def __init__(self, operation: str):
        super().__init__(f'Timed out waiting for {operation}')
        self.operation = operation
