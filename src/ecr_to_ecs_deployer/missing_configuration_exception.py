class MissingConfigurationException(Exception):
    def __init__(self, variable_name: str):
        super().__init__(f'Required environment variable {variable_name} is not set')
        self.variable_name = variable_name
