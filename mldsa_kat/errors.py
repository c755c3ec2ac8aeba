"""
Exceptions raised while converting ML-DSA KAT files

(C) 2026 The mldsa-kat authors

Released under the Simplified BSD License (see license.txt)
"""

#
# Base exception for all conversion failures raised from this package
#
class ConversionException(Exception):
    # 1-based index of the test case being converted, filled in by the converter
    test_case = None

    def describe(self) -> str:
        if self.test_case is None:
            return str(self)
        return "test case %d: %s" % (self.test_case, self)

class DecodeError(ConversionException):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__("invalid %s: decoding hex data: %s" % (field, reason))

class LengthMismatch(ConversionException):
    def __init__(self, field: str, expected: int, actual: int):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__("invalid %s: unexpected data length %d (expected %d)" % (field, actual, expected))

class MalformedLine(ConversionException):
    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__("line %d: encountered unexpected 'key = value' line %r" % (line_number, line))

class MissingField(ConversionException):
    def __init__(self, field: str):
        self.field = field
        super().__init__("bad test case: no %s" % (field))

class UnsupportedParameterSet(ConversionException):
    def __init__(self, length: int):
        self.length = length
        super().__init__("invalid pk: length %d did not conform to any known ML-DSA parameter set" % (length))

class ContextTooLarge(ConversionException):
    def __init__(self, length: int):
        self.length = length
        super().__init__("ctx size too large: %d" % (length))

class KeyMismatch(ConversionException):
    def __init__(self, field: str, recorded: str, derived: str):
        self.field = field
        self.recorded = recorded
        self.derived = derived
        super().__init__("unexpected %s: KAT had %s, seed derives %s" % (field, recorded, derived))

class SignatureInvalid(ConversionException):
    def __init__(self, parameter_set: str):
        self.parameter_set = parameter_set
        super().__init__("could not verify %s signature" % (parameter_set))

class DigestVerificationFailed(ConversionException):
    def __init__(self, parameter_set: str, mu: str):
        self.parameter_set = parameter_set
        self.mu = mu
        super().__init__("could not verify %s signature against mu %s" % (parameter_set, mu))
