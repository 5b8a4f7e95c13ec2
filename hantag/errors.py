class HantagException(Exception):
    pass

class BootstrapError(HantagException):
    pass

class StageConfigurationError(HantagException):
    def __init__(self, stage, message):
        self.stage = stage
        super().__init__(f"Stage '{stage}' could not be configured: {message}")

class AnalysisError(HantagException):
    pass

class ConfigNotFoundError(HantagException):
    pass
