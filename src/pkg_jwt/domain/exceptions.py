class JWTError(Exception):
    """Base class for every error raised by pkg_jwt."""
    pass


class InvalidArgumentError(JWTError, TypeError):
    """Raised when an argument has the wrong shape or type."""
    pass


class UnsupportedAlgorithmError(JWTError):
    """Raised when an algorithm identifier is not in the registry."""
    pass


class InvalidKeyError(JWTError):
    """Raised when key material cannot be parsed into the required key form."""
    pass


class DecodeError(JWTError):
    """Raised when a token cannot be accepted."""
    pass


class MalformedTokenError(DecodeError):
    """Raised when a token does not split into three segments."""
    pass


class InvalidEncodingError(DecodeError):
    """Raised when a segment is not valid base64url or JSON."""
    pass


class InvalidHeaderError(DecodeError):
    """Raised when `typ` or `alg` is missing or wrong."""
    pass


class ClaimTypeError(DecodeError):
    """Raised when `exp` or `nbf` is present but not numeric."""
    pass


class SignatureVerificationError(DecodeError):
    """Raised when the signature does not match the signing input."""
    pass


class TokenExpiredError(DecodeError):
    """Raised when token has expired."""
    pass


class TokenNotYetValidError(DecodeError):
    """Raised when token is used before its `nbf` instant."""
    pass
