

class OutputError(Exception):
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

class InvalidAddressFormatError(OutputError):
    pass

class InvalidAssetIDFormatError(OutputError):
    pass

class AmountOverflowError(OutputError):
    def __init__(self, *args, value=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.value = value

class InsufficientDataError(OutputError):
    def __init__(self, *args, needed=None, available=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.needed = needed
        self.available = available
