from typing import Any


class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class OptionParseException(OptionException):
    pass

class InvalidSpec(OptionSpecException):
    def __init__(self, spec: Any):
        self.spec = spec
        super().__init__(f"Spec {spec!r} declares no switches")

class InvalidArgument(OptionParseException):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"'{argument}' is not a valid argument")

class MissingArgument(OptionParseException):
    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Option '{option}' is missing an argument")

class ValueConversionFailure(OptionParseException):
    def __init__(self, option: str, value: str, reason: str):
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{option}' {value!r}: {reason}")
