from http.client import HTTPException


class ProfileHttpRequestException(HTTPException): ...


class ProfileHttpResponseException(HTTPException):
    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(status_code, detail)
        self.status_code = status_code
        self.detail = detail
