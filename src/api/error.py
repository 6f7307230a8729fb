from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """
    Failure the caller cannot fix by changing the request.

    The message is replaced with a generic one unless expose_message is set,
    which is reserved for messages that tell the caller to retry.
    """

    def __init__(self, base_error: Error, expose_message: bool = False):
        self.base_error = base_error
        self.expose_message = expose_message
        super().__init__(base_error.message)


def invite_error(error: Error) -> Exception:
    """Maps invite issuance error codes to the HTTP error to raise"""
    if error.code == "INVALID_ROLE":
        return ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "USER_NOT_FOUND":
        return ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
    elif error.code == "INSUFFICIENT_ROLE":
        return ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("USER_ALREADY_EXISTS", "EMPLOYEE_ALREADY_EXISTS"):
        return ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVITE_DISPATCH_FAILED":
        return ServerError(error, expose_message=True)
    return ServerError(error)
