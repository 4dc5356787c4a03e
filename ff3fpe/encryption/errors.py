class FF3Error(ValueError):
    """ Base class for every FF3 parameter or input failure """


class InvalidRadixError(FF3Error):
    pass


class InvalidKeyLengthError(FF3Error):
    pass


class InvalidTweakLengthError(FF3Error):
    pass


class InvalidInputLengthError(FF3Error):
    pass


class InvalidDigitError(FF3Error):
    def __init__(self, char, radix):
        super().__init__(f"char '{char}' is not a valid digit in radix {radix}")
        self.char = char
        self.radix = radix


class DomainTooSmallError(FF3Error):
    pass


class NumeralOverflowError(FF3Error):
    """ An internal value does not fit the requested fixed-width numeral """
